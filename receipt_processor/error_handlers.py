"""
Exception handlers for the receipt API.
Every error body has the same shape: route, message, status, httpStatus.
"""

from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .errors import ReceiptNotFound
from .schemas import ErrorDetails
from .utils.logging import logger


def _error_response(request: Request, status: HTTPStatus, message: str, details=None) -> JSONResponse:
    body = ErrorDetails(
        route=request.url.path,
        message=message,
        status=status.value,
        httpStatus=status.name,
        details=details,
    )
    return JSONResponse(
        status_code=status.value,
        content=jsonable_encoder(body, exclude_none=True),
    )


def receipt_not_found_handler(request: Request, exc: ReceiptNotFound):
    logger.warning("Receipt %s not found (%s)", exc.receipt_id, request.url.path)
    return _error_response(request, HTTPStatus.NOT_FOUND, str(exc))


def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {loc or 'body'}: {first.get('msg')}"
    else:
        message = "Invalid request"
    logger.warning("Rejected request to %s: %s", request.url.path, message)
    details = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
    ]
    return _error_response(request, HTTPStatus.BAD_REQUEST, message, details=details)


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return _error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")
