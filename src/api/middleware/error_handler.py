"""
Error handling for the API

Every error leaves the API in the same envelope (api.schemas.error):
- RequestValidationError -> 422 VALIDATION_ERROR with per-field errors
- DomainError subclasses -> their own code and status
- anything else          -> 500 INTERNAL_SERVER_ERROR
"""

import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.schemas.error import ErrorDetail, ErrorResponse, ValidationErrorResponse
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Error the API reports with a machine-readable code"""

    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class PatternNotFoundError(DomainError):
    status_code = 404

    def __init__(self, pattern_id: str, valid_values: List[str]):
        super().__init__(
            "PATTERN_NOT_FOUND",
            f"Pattern '{pattern_id}' not found",
            {"pattern_id": pattern_id, "valid_values": valid_values},
        )


class InvalidSessionValueError(DomainError):
    """Numeric value the engine refuses (negative LED count)"""

    status_code = 422

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            "INVALID_SESSION_VALUE",
            f"Invalid {field}: {reason}",
            {"field": field, "value": value},
        )


def _json(status_code: int, body: BaseModel) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = str(uuid.uuid4())
    errors = exc.errors()
    log.warn("Request validation failed", path=request.url.path, errors=len(errors), request_id=request_id)

    field_errors = [
        {
            # loc starts with "body" / "query" / "path"
            "field": ".".join(str(part) for part in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]
    body = ValidationErrorResponse(
        error=ErrorDetail(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"error_count": len(errors)},
        ),
        validation_errors=field_errors,
        request_id=request_id,
    )
    return _json(422, body)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    request_id = str(uuid.uuid4())
    log.warn(f"{exc.code}: {exc.message}", path=request.url.path, request_id=request_id)

    body = ErrorResponse(
        error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details),
        request_id=request_id,
    )
    return _json(exc.status_code, body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    request_id = str(uuid.uuid4())
    log.error(f"Unhandled {type(exc).__name__}: {exc}", path=request.url.path, request_id=request_id)

    body = ErrorResponse(
        error=ErrorDetail(
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again.",
            details={"request_id": request_id},
        ),
        request_id=request_id,
    )
    return _json(500, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
