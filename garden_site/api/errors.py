"""
Error Handlers
==============

Renders every error as a JSON body with a ``message`` key:

- HTTPException -> ``{"message": detail}`` with its status code
- Request validation failure -> 400 with field-level ``errors``
- Anything else -> 500 with a generic message; details go to the log only
"""
import logging
from collections import defaultdict
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PUBLIC_ERROR_MESSAGE = "Something went wrong, please try again."
ADMIN_ERROR_MESSAGE = "Internal server error"


def _field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Group validation messages by camelCase field path."""
    errors: Dict[str, List[str]] = defaultdict(list)
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else (loc[0] if loc else "body")
        errors[field].append(error.get("msg", "Invalid value"))
    return dict(errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.debug("Validation failed on %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    admin = request.url.path.startswith("/api/admin")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": ADMIN_ERROR_MESSAGE if admin else PUBLIC_ERROR_MESSAGE},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
