"""
Session endpoints - HTTP routes for the live preview session

Every route is a thin facade over PreviewSessionService: it applies the
change, then returns the resulting session state.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_service_container
from api.middleware.error_handler import InvalidSessionValueError
from api.schemas.session import (
    PatternUpdateRequest, PromptRequest, PromptResponse,
    SessionConfigUpdateRequest, SessionResponse,
)
from models.enums import LogCategory
from services.preview_session_service import PreviewSessionService
from services.service_container import ServiceContainer
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/session", tags=["Session"])


async def get_session_service(
    services: ServiceContainer = Depends(get_service_container)
) -> PreviewSessionService:
    """Dependency to get the preview session from the service container."""
    return services.session_service


def _to_response(session: PreviewSessionService) -> SessionResponse:
    return SessionResponse.from_snapshot(session.snapshot(), session.clock.interval_ms)


@router.get(
    "",
    response_model=SessionResponse,
    summary="Get session state",
    description="Current pattern, config, frame, clock state and LED colors"
)
async def get_session(
    session: PreviewSessionService = Depends(get_session_service)
) -> SessionResponse:
    return _to_response(session)


@router.put(
    "/config",
    response_model=SessionResponse,
    summary="Update strip config",
    description="Partial update of LED count, brightness and speed. Values are clamped."
)
async def update_config(
    request: SessionConfigUpdateRequest,
    session: PreviewSessionService = Depends(get_session_service)
) -> SessionResponse:
    """
    **Errors:**
    - 422: Negative LED count
    """
    if request.led_count is not None:
        try:
            session.set_led_count(request.led_count)
        except ValueError as e:
            raise InvalidSessionValueError("led_count", request.led_count, str(e))
    if request.brightness is not None:
        session.set_brightness(request.brightness)
    if request.speed is not None:
        session.set_speed(request.speed)
    return _to_response(session)


@router.put(
    "/pattern",
    response_model=SessionResponse,
    summary="Select pattern",
    description="Unknown pattern ids are accepted and render solid white"
)
async def update_pattern(
    request: PatternUpdateRequest,
    session: PreviewSessionService = Depends(get_session_service)
) -> SessionResponse:
    session.set_pattern(request.pattern)
    return _to_response(session)


@router.post("/start", response_model=SessionResponse, summary="Start the animation clock")
async def start(session: PreviewSessionService = Depends(get_session_service)) -> SessionResponse:
    session.start()
    return _to_response(session)


@router.post("/stop", response_model=SessionResponse, summary="Stop the animation clock")
async def stop(session: PreviewSessionService = Depends(get_session_service)) -> SessionResponse:
    session.stop()
    return _to_response(session)


@router.post(
    "/reset",
    response_model=SessionResponse,
    summary="Reset to frame 0",
    description="Stops the clock, rewinds to frame 0 and renders frame 0"
)
async def reset(session: PreviewSessionService = Depends(get_session_service)) -> SessionResponse:
    session.reset()
    return _to_response(session)


@router.post("/step", response_model=SessionResponse, summary="Advance one frame")
async def step(session: PreviewSessionService = Depends(get_session_service)) -> SessionResponse:
    session.step()
    return _to_response(session)


@router.post(
    "/play",
    response_model=SessionResponse,
    summary="Generate & play",
    description="Start the clock, render immediately and generate firmware code"
)
async def play(session: PreviewSessionService = Depends(get_session_service)) -> SessionResponse:
    session.play()
    return _to_response(session)


@router.post(
    "/prompt",
    response_model=PromptResponse,
    summary="Pick pattern from description",
    description="Keyword match on the prompt, then generate & play"
)
async def apply_prompt(
    request: PromptRequest,
    session: PreviewSessionService = Depends(get_session_service)
) -> PromptResponse:
    pattern = session.apply_prompt(request.prompt)
    log.info("Prompt applied", pattern=pattern.value)
    return PromptResponse(pattern=pattern.value, session=_to_response(session))
