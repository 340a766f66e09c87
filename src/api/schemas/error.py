"""
Error schemas - envelope shared by every API error response
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. PATTERN_NOT_FOUND")
    message: str = Field(description="Human-readable message")
    details: Optional[Dict[str, Any]] = Field(None, description="Offending field, valid values, ...")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ErrorResponse(BaseModel):
    error: ErrorDetail
    request_id: Optional[str] = Field(None, description="Correlates the response with server logs")

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "code": "PATTERN_NOT_FOUND",
                    "message": "Pattern 'lava' not found",
                    "details": {"pattern_id": "lava", "valid_values": ["rainbow", "wave", "chase"]},
                    "timestamp": "2025-11-26T10:30:00Z",
                },
                "request_id": "3f0c2a9e-6d1b-4c55-9a51-1b2f3c4d5e6f",
            }
        }


class ValidationErrorResponse(ErrorResponse):
    validation_errors: List[Dict[str, Any]] = Field(description="One entry per invalid field")
