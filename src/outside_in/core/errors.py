"""Typed failures raised by the request pipeline.

Every failure derives from OutsideInError. Failures derived from an HTTP
response carry the response's status code.
"""

from __future__ import annotations

from typing import Any, Optional


class OutsideInError(Exception):
    """Base exception for all outside-in client errors."""

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SignatureError(OutsideInError):
    """The API key or secret is not set, so the request cannot be signed."""


class ForbiddenError(OutsideInError):
    """403: the key is not allowed to access the resource."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status_code=403)


class NotFoundError(OutsideInError):
    """404: the resource does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class ServiceError(OutsideInError):
    """The service reported a fault through the x-mashery-error-code header."""

    def __init__(self, code: str, status_code: Optional[int] = None):
        super().__init__(f"Service error {code}", status_code=status_code)
        self.code = code


class QueryError(OutsideInError):
    """The request was rejected; payload is the parsed error body."""

    def __init__(self, payload: Any, status_code: Optional[int] = None):
        super().__init__(f"Query error: {payload!r}", status_code=status_code)
        self.payload = payload


class TransportError(OutsideInError):
    """The request never produced an HTTP response (connect error, timeout)."""


class ParseError(OutsideInError):
    """A body that should be JSON could not be parsed."""
