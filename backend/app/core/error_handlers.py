"""Translation of application exceptions into JSON error responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from app.core.logger import get_logger
from app.shared.exceptions import (
    ConflictError,
    DocumentStoreException,
    EntityNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


# Most specific first
_STATUS_BY_EXCEPTION = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


def error_body(message: str, error_code: str, details: dict | None = None) -> dict:
    return {"error": message, "error_code": error_code, "details": details or {}}


def status_for_exception(exc: DocumentStoreException) -> int:
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def document_store_exception_handler(request: Request, exc: DocumentStoreException) -> JSONResponse:
    status_code = status_for_exception(exc)
    if status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path} ({status_code}): {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, exc.error_code, exc.details),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and schema violations are reported as 400."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request body", "BadRequest", {"errors": errors}),
    )


class CatchAllExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"{type(exc).__name__} on {request.url.path} (500): {exc}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body("Internal server error", type(exc).__name__),
            )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocumentStoreException, document_store_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_middleware(CatchAllExceptionMiddleware)
