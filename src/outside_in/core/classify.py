"""Map an HTTP response onto a parsed envelope or a typed failure."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from .errors import ForbiddenError, NotFoundError, ParseError, QueryError, ServiceError

ERROR_CODE_HEADER = "x-mashery-error-code"


def parse_json(body: bytes, status_code: Optional[int] = None) -> Any:
    """Parse a JSON response body, raising ParseError on malformed input.

    status_code, when given, is carried on the ParseError so callers can tell
    an HTML error page from a malformed success body.
    """
    try:
        return json.loads(body)
    except (ValueError, TypeError) as exc:
        raise ParseError(f"Malformed JSON body: {exc}", status_code=status_code) from exc


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    for k, v in headers.items():
        if k.lower() == name:
            return v
    return None


def classify_response(status_code: int, headers: Mapping[str, str], body: bytes) -> Any:
    """Return the parsed body of a successful response, or raise.

    Any status below 300 is success. 403 and 404 map to ForbiddenError and
    NotFoundError. Other statuses raise ServiceError when the gateway set the
    x-mashery-error-code header, QueryError carrying the parsed body otherwise.
    """
    if status_code < 300:
        return parse_json(body, status_code)
    if status_code == 403:
        raise ForbiddenError()
    if status_code == 404:
        raise NotFoundError()

    code = _header(headers, ERROR_CODE_HEADER)
    if code is not None:
        raise ServiceError(code, status_code=status_code)
    raise QueryError(parse_json(body, status_code), status_code=status_code)
