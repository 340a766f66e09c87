"""
Code endpoints - HTTP routes for firmware export
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.middleware.error_handler import InvalidSessionValueError
from api.routes.session import get_session_service
from api.schemas.pattern import CodeRequest, CodeResponse
from codegen.firmware import generate_firmware_source, pattern_routine_name
from services.preview_session_service import PreviewSessionService

router = APIRouter(prefix="/code", tags=["Code"])


@router.post(
    "",
    response_model=CodeResponse,
    summary="Generate firmware code",
    description="Render a FastLED sketch. Omitted fields come from the current session; the session is not modified."
)
async def generate_code(
    request: CodeRequest,
    session: PreviewSessionService = Depends(get_session_service)
) -> CodeResponse:
    """
    **Errors:**
    - 422: Negative LED count
    """
    pattern = request.pattern if request.pattern is not None else session.pattern_name
    led_count = request.led_count if request.led_count is not None else session.config.led_count
    brightness = request.brightness if request.brightness is not None else session.config.brightness
    speed = request.speed if request.speed is not None else session.config.speed

    try:
        code = generate_firmware_source(
            pattern, led_count, brightness, speed, options=session.firmware_options
        )
    except ValueError as e:
        raise InvalidSessionValueError("led_count", led_count, str(e))

    return CodeResponse(pattern=pattern, code=code)


@router.get(
    "/download",
    response_class=PlainTextResponse,
    summary="Download session sketch",
    description="Generate code for the current session and return it as an .ino attachment"
)
async def download_code(
    session: PreviewSessionService = Depends(get_session_service)
) -> PlainTextResponse:
    code = session.generate_code()
    filename = f"{pattern_routine_name(session.pattern)[: -len('Pattern')]}.ino"
    return PlainTextResponse(
        code,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
