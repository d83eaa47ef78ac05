import logging
from fastapi import Request, Response, responses, exceptions
from pydantic import ValidationError
from typing import Union
from sqlalchemy.exc import IntegrityError, DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException
from error import ServerError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def _error_field(loc: tuple) -> str:
    # ("body", "email") -> "email"; ("body",) or ("body", 12) -> "body"
    if len(loc) > 1 and isinstance(loc[-1], str):
        return loc[-1]
    return str(loc[0]) if loc else "body"


def validation_error_handler(
    request: Request, exec: Union[ValidationError, exceptions.RequestValidationError]
) -> responses.JSONResponse:
    """Validation Error Handler

    This method serves as a custom error handler
    for all validation errors raised by pydantic.
    Every offending field is reported, one message each
    """
    errors = {}
    for error in exec.errors():
        field = _error_field(tuple(error.get("loc") or ()))
        errors.setdefault(field, error.get("msg"))

    return responses.JSONResponse(status_code=400, content=errors)


def not_found_handler(request: Request, exec: ResourceNotFoundError) -> Response:
    """Not found responses carry no body"""
    return Response(status_code=exec.status_code)


def validation_http_exceptions_handler(
    request: Request, exec: StarletteHTTPException
) -> responses.JSONResponse:
    """Validation handler for http exceptions"""
    return responses.JSONResponse(
        status_code=exec.status_code, content={"message": exec.detail}
    )


def db_error_handler(request: Request, exec: Union[IntegrityError, DBAPIError]):
    """Db error handler"""
    logger.error(f"Database error on {request.method} {request.url.path}: {exec}")

    # Return user-friendly message that doesn't reveal database details
    user_msg = "An internal error occurred. Please try again later."

    return responses.JSONResponse(
        status_code=500, content={"message": user_msg}
    )


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"message": str(exec.msg)}
    )
