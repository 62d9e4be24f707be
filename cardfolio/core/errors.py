"""
CardFolio — Error taxonomy and HTTP mapping

Every failure a handler can produce is a CardfolioError subclass.
The registered exception handlers render those, request validation
errors and anything unexpected as {"error": <message>}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cardfolio.core.config import get_settings

logger = logging.getLogger(__name__)

GENERIC_STORAGE_MESSAGE = "Internal storage error"
GENERIC_SERVER_MESSAGE = "Internal server error"


class CardfolioError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCredentials(CardfolioError):
    """Login step 1: unknown email or wrong password (indistinguishable)."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class InvalidOrExpiredCode(CardfolioError):
    """Login step 2: wrong, missing, consumed or expired one-time code."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid or expired code"


class StorageFailure(CardfolioError):
    """Any error raised by the database or its driver."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorSanitizer:
    """
    Decides what the caller gets to see of a failure.

    With expose=True storage and unexpected error messages are passed
    through verbatim; otherwise they are replaced by a generic message.
    """

    def __init__(self, expose: bool = True):
        self.expose = expose

    def public_message(self, exc: CardfolioError) -> str:
        if isinstance(exc, StorageFailure) and not self.expose:
            return GENERIC_STORAGE_MESSAGE
        return exc.message

    def unexpected_message(self, exc: Exception) -> str:
        if not self.expose:
            return GENERIC_SERVER_MESSAGE
        return str(exc) or GENERIC_SERVER_MESSAGE


def validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI, sanitizer: ErrorSanitizer | None = None):
    if sanitizer is None:
        sanitizer = ErrorSanitizer(expose=get_settings().EXPOSE_STORAGE_ERRORS)
    app.state.error_sanitizer = sanitizer

    @app.exception_handler(CardfolioError)
    async def cardfolio_error_handler(request: Request, exc: CardfolioError):
        current = request.app.state.error_sanitizer
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": current.public_message(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": validation_message(exc)},
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        current = request.app.state.error_sanitizer
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": current.unexpected_message(exc)},
        )
