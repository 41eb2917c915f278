import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from quicknotes.errors import ApiError

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def create_json_error_response(status_code: int, message: str) -> JSONResponse:
    """Create the JSON error envelope."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": {"message": message}})


def _log_failure(request: Request, status_code: int, message: str, is_operational: bool) -> None:
    log = logger.warning if is_operational else logger.error
    log(
        "request_failed",
        status_code=status_code,
        message=message,
        is_operational=is_operational,
        method=request.method,
        path=request.url.path,
    )


async def api_error_handler(request: Request, exc: Exception) -> Response:
    """Handle ApiError raised by validators and handlers."""
    if not isinstance(exc, ApiError):
        return await general_exception_handler(request, exc)

    _log_failure(request, exc.status_code, exc.message, exc.is_operational)
    message = exc.message if exc.is_operational else INTERNAL_ERROR_MESSAGE
    return create_json_error_response(status_code=exc.status_code, message=message)


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle framework HTTP errors; unmatched routes and methods become a 404."""
    if not isinstance(exc, StarletteHTTPException):
        return await general_exception_handler(request, exc)

    if exc.status_code in (404, 405):
        status_code = 404
        message = f"Route {request.method} {request.url.path} not found"
    else:
        status_code = exc.status_code
        message = str(exc.detail)

    _log_failure(request, status_code, message, is_operational=status_code < 500)
    return create_json_error_response(status_code=status_code, message=message)


async def request_validation_error_handler(request: Request, exc: Exception) -> Response:
    """Report framework-level request validation as a 400."""
    if not isinstance(exc, RequestValidationError):
        return await general_exception_handler(request, exc)

    errors = exc.errors()
    message = str(errors[0].get("msg", "Invalid request")) if errors else "Invalid request"
    _log_failure(request, 400, message, is_operational=True)
    return create_json_error_response(status_code=400, message=message)


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500). Details only go to the server log."""
    logger.exception(
        "unexpected_error",
        status_code=500,
        message=str(exc),
        is_operational=False,
        method=request.method,
        path=request.url.path,
    )
    return create_json_error_response(status_code=500, message=INTERNAL_ERROR_MESSAGE)
