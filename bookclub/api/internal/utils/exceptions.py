# Third-party imports
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk

# Local application imports
from bookclub.core.monitoring.logging import get_logger
from bookclub.schemas.common import ErrorResponse
from bookclub.services.exceptions import BookClubError, StoreUnavailable

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    # Map specific HTTP status codes to custom error codes
    error_map = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        422: "unprocessable_entity",
        429: "too_many_requests",
        500: "internal_server_error",
    }

    @app.exception_handler(BookClubError)
    async def book_club_exception_handler(
        request: Request,  # noqa
        exc: BookClubError,
    ) -> JSONResponse:
        if isinstance(exc, StoreUnavailable):
            sentry_sdk.capture_exception(exc)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        response = ErrorResponse.failure(code=exc.code, message=exc.message, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=response.model_dump(), headers=headers)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: HTTPException,
    ) -> JSONResponse:
        error_code = error_map.get(exc.status_code, "error")
        # Ensure the detail is a string; if not, convert it
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response = ErrorResponse.failure(code=error_code, message=detail)
        return JSONResponse(status_code=exc.status_code, content=response.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> JSONResponse:
        error_details = []
        fields: dict[str, str] = {}
        for error in exc.errors():
            message = error.get("msg", "")

            # Remove the "Value error, " prefix pydantic adds to validator messages
            val_error_prefix = "Value error, "
            if message.startswith(val_error_prefix):
                message = message[len(val_error_prefix) :]

            error_details.append(message)
            location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            if location:
                fields[".".join(location)] = message

        max_errors = 5
        shown = error_details[:max_errors]

        if len(error_details) > max_errors:
            shown.append("...and more errors")
        detail = "; ".join(shown) if shown else "Invalid request data"

        response = ErrorResponse.failure(
            code="bad_request",
            message=detail,
            details=fields or None,
        )
        return JSONResponse(status_code=400, content=response.model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,  # noqa
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        sentry_sdk.capture_exception(exc)
        response = ErrorResponse.failure(
            code="internal_server_error",
            message="An unexpected error occurred. Please try again later.",
        )
        return JSONResponse(status_code=500, content=response.model_dump())
