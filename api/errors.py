"""
Validation Error Handlers
Translate validation exceptions into 4xx JSON responses
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from utils.exceptions import (
    ValidationError,
    MissingFieldException,
    InvalidInputException,
    ExistingProductException,
)

STATUS_CODES = {
    MissingFieldException: 400,
    InvalidInputException: 400,
    ExistingProductException: 409,
}


def error_body(exc: ValidationError) -> dict:
    """JSON body for a rejected request"""
    field_key = getattr(exc, "field_key", None)
    return {
        "error": exc.kind,
        "field": field_key.value if field_key is not None else None,
        "detail": str(exc),
    }


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Catch validation exceptions raised by route handlers"""
    status_code = STATUS_CODES.get(type(exc), 400)
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content=error_body(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the validation handler on an application"""
    app.add_exception_handler(ValidationError, validation_exception_handler)
