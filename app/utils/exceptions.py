# app/utils/exceptions.py
"""
Error taxonomy shared by the repositories and routers.
Input problems, missing records and storage failures each carry their own
HTTP status so callers never have to inspect message text.
"""

from typing import Optional


class AppException(Exception):
    """Base class. `message` may be None for an empty response body."""

    status_code = 400

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or "")
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(AppException):
    """Null payload, id mismatch, or a referenced record that does not exist."""

    status_code = 400


class NotFoundError(AppException):
    status_code = 404


class StorageError(AppException):
    """Raised by a repository after SQLAlchemy fails and the session was rolled back."""

    status_code = 500
