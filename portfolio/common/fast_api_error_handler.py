from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from portfolio.common.errors import (
    ConflictError,
    NotFoundError,
    PortfolioError,
    ValidationError,
)
from portfolio.common.fast_api_response_wrapper import api_response
from portfolio.common.logger import get_logger

logger = get_logger()


def _request_validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", []) if part != "body"]
        details.append({"field": ".".join(loc), "message": error.get("msg")})
    return details


async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler used to convert Python exceptions into a unified API response.
    It also performs structured logging while preventing sensitive information from leaking
    to the client.
    """

    # Determine the HTTP status code based on the type of exception.
    match exc:
        case NotFoundError():
            status = HTTPStatus.NOT_FOUND
        case ConflictError():
            status = HTTPStatus.CONFLICT
        case ValueError() | RequestValidationError():
            status = HTTPStatus.BAD_REQUEST
        case RuntimeError():
            status = HTTPStatus.SERVICE_UNAVAILABLE
        case _:
            status = HTTPStatus.INTERNAL_SERVER_ERROR

    # Extract the resource name from the request path, e.g. /api/skills/3 -> skills.
    parts = request.url.path.strip("/").split("/")
    resource = parts[1] if len(parts) > 1 else "unknown"
    is_server_error = status >= 500

    # The log message always contains the full raw error details.
    log_msg = str(exc)

    # The user-facing message hides sensitive details for server errors,
    # summarizes validation errors, and otherwise displays the original message.
    data = None
    if is_server_error:
        user_message = "Internal Server Error. Please contact support."
    elif isinstance(exc, RequestValidationError):
        errors = _request_validation_details(exc)
        first_error = errors[0] if errors else {"field": "", "message": ""}
        user_message = (
            f"Validation Error: {first_error['field']} - {first_error['message']}"
        )
        data = {"errors": errors}
    elif isinstance(exc, ValidationError):
        user_message = str(exc)
        data = {"errors": exc.errors}
    else:
        user_message = str(exc)

    # Full stack traces are logged only for server-side errors.
    log_method = logger.error if is_server_error else logger.warning
    log_method(
        "[%s] %s on resource [%s]: %s",
        "Server Error" if is_server_error else "Client Error",
        type(exc).__name__,
        resource,
        log_msg,
        exc_info=is_server_error,
    )

    return api_response(
        success=False,
        message=user_message,
        data=data,
        status_code=status,
    )


def register_exception_handlers(app: FastAPI):
    """
    Registers the global exception handlers on the provided FastAPI application.
    This ensures unexpected exceptions are consistently processed and returned
    in the standard API response format.
    """
    for exc_cls in (
        Exception,
        RequestValidationError,
        PortfolioError,
        ValueError,
        RuntimeError,
    ):
        app.add_exception_handler(exc_cls, global_exception_handler)
