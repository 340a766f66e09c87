"""
LED Pattern Studio - API Layer

REST interface to the preview session, pattern registry and firmware
export. All endpoints are facades over PreviewSessionService.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic schemas
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
