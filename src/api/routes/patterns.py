"""
Pattern endpoints - HTTP routes for pattern metadata
"""

from fastapi import APIRouter

from api.middleware.error_handler import PatternNotFoundError
from api.schemas.pattern import PatternListResponse, PatternResponse
from codegen.firmware import pattern_routine_name, pattern_snippet
from models.enums import PatternID
from patterns.engine import available_patterns, is_deterministic, resolve_pattern_id

router = APIRouter(prefix="/patterns", tags=["Patterns"])


def _pattern_to_response(pattern_id: PatternID) -> PatternResponse:
    return PatternResponse(
        id=pattern_id.value,
        deterministic=is_deterministic(pattern_id),
        routine=pattern_routine_name(pattern_id),
        snippet=pattern_snippet(pattern_id),
    )


@router.get(
    "",
    response_model=PatternListResponse,
    summary="List patterns",
    description="All registered patterns in selector order"
)
async def list_patterns() -> PatternListResponse:
    patterns = [_pattern_to_response(p) for p in available_patterns()]
    return PatternListResponse(patterns=patterns, count=len(patterns))


@router.get(
    "/{pattern_id}",
    response_model=PatternResponse,
    summary="Get pattern",
    description="Metadata and firmware snippet for one pattern"
)
async def get_pattern(pattern_id: str) -> PatternResponse:
    """
    **Errors:**
    - 404: Pattern not registered
    """
    resolved = resolve_pattern_id(pattern_id)
    if resolved is None:
        raise PatternNotFoundError(pattern_id, [p.value for p in available_patterns()])
    return _pattern_to_response(resolved)
