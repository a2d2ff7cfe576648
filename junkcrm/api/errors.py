"""
Error envelope for every API response.

All failures leave the API as {"error": "<message>"}: request validation
problems become 400 with every offending field listed, HTTP errors keep their
status, and anything unexpected becomes a logged 500 with a generic message.
"""
import logging
from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds that mean nothing to the caller
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Join pydantic error entries into one readable message.

    e.g. 'Validation error: Field required at "name"; Input should be a valid
    decimal at "total"'
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PREFIXES]
        message = error.get("msg", "Invalid value")
        parts.append(f'{message} at "{".".join(loc)}"' if loc else message)
    return "Validation error: " + "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
