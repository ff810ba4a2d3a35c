# app/utils/responses.py
"""
Response helpers for the routers.
Strings go out as text/plain, everything else as JSON.
"""

import functools
from typing import Any, Optional

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from app.utils.exceptions import AppException, StorageError
from app.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_REQUEST = "Invalid request"


def _render(content: Any, status_code: int) -> Response:
    if isinstance(content, str):
        return PlainTextResponse(content, status_code=status_code)
    return JSONResponse(content=jsonable_encoder(content), status_code=status_code)


def ok(content: Any = None) -> Response:
    return _render(content, status.HTTP_200_OK)


def bad_request(message: Optional[str] = None) -> Response:
    """400 with the message as text, or with no body at all."""
    if message is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def error_response(exc: AppException) -> Response:
    if exc.message is None:
        return Response(status_code=exc.status_code)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def handle_errors(func):
    """
    Wrap a route so every failure becomes a Response:
    AppException → its own status, anything else → 400 with the exception text.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StorageError as exc:
            logger.error(f"{func.__name__}: storage failure: {exc}", exc_info=True)
            return error_response(exc)
        except AppException as exc:
            logger.warning(f"{func.__name__}: rejected ({exc.status_code}): {exc}")
            return error_response(exc)
        except Exception as exc:
            logger.warning(f"{func.__name__}: failed: {exc}")
            return bad_request(str(exc))
    return wrapper
