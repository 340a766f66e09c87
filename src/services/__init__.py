"""Services layer"""

from .pattern_suggester import suggest_pattern, KEYWORD_PATTERNS
from .preview_session_service import PreviewSessionService, SessionSnapshot
from .service_container import ServiceContainer

__all__ = [
    "suggest_pattern",
    "KEYWORD_PATTERNS",
    "PreviewSessionService",
    "SessionSnapshot",
    "ServiceContainer",
]
