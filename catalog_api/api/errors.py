"""Render every failure in the ``{"success": false, "message": ...}`` envelope."""
import logging
from typing import Dict, List
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from catalog_api.core.exceptions import CatalogError, OperationFailedError, ValidationFailedError

logger = logging.getLogger(__name__)

# Locations FastAPI prefixes to every error; clients only need the field path
REQUEST_PARTS = ("body", "query", "path")
VALUE_ERROR_PREFIX = "Value error, "

def _field_key(loc) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts) or "body"

def _clean_message(message: str) -> str:
    if message.startswith(VALUE_ERROR_PREFIX):
        return message[len(VALUE_ERROR_PREFIX):]
    return message

def format_validation_errors(errors) -> Dict[str, List[str]]:
    formatted: Dict[str, List[str]] = {}
    for error in errors:
        formatted.setdefault(_field_key(error["loc"]), []).append(_clean_message(error["msg"]))
    return formatted

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationFailedError(format_validation_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_response())

async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s raised an unhandled error", request.method, request.url.path, exc_info=exc)
    error = OperationFailedError(error=str(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_response())

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
