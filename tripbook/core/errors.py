"""Translate typed errors into the JSON error body.

Every error response has the shape
``{"message": ..., "status": ..., "error": ..., "timestamp": ...}``.
"""
import logging
from datetime import datetime
from http import HTTPStatus
from typing import Any
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .exceptions import (
    AccessDeniedError,
    AuthenticationError,
    EntityExistsError,
    EntityNotFoundError,
    IllegalArgumentError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error: Any = None, headers: dict = None) -> JSONResponse:
    if error is None:
        error = HTTPStatus(status_code).phrase
    body = {
        "message": message,
        "status": status_code,
        "error": error,
        "timestamp": datetime.now().isoformat(),
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


async def illegal_argument_handler(request: Request, exc: IllegalArgumentError):
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def entity_exists_handler(request: Request, exc: EntityExistsError):
    return error_response(status.HTTP_409_CONFLICT, exc.message)


async def access_denied_handler(request: Request, exc: AccessDeniedError):
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def authentication_handler(request: Request, exc: AuthenticationError):
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def validation_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for violation in exc.errors():
        # undecodable JSON reports a byte offset as its location
        names = [part for part in violation.get("loc") or () if isinstance(part, str)]
        if violation.get("type") == "json_invalid" or not names:
            field = "body"
        else:
            field = names[-1]
        errors[field] = violation.get("msg", "Invalid value")
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IllegalArgumentError, illegal_argument_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(EntityExistsError, entity_exists_handler)
    app.add_exception_handler(AccessDeniedError, access_denied_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
