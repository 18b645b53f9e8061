"""Outside.in hyperlocal API client.

Turns a resource call into a signed, scoped, parameterized GET request and
maps the response onto parsed JSON or a typed error.
"""

__version__ = "1.1.0"

import logging

from .core.credentials import configure, get_credentials, reset
from .core.errors import (
    ForbiddenError,
    NotFoundError,
    OutsideInError,
    ParseError,
    QueryError,
    ServiceError,
    SignatureError,
    TransportError,
)
from .core.models import Credentials
from .core.resources import PublicationScopedResource, QueryResource, Resource, fetch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Credentials",
    "ForbiddenError",
    "NotFoundError",
    "OutsideInError",
    "ParseError",
    "PublicationScopedResource",
    "QueryError",
    "QueryResource",
    "Resource",
    "ServiceError",
    "SignatureError",
    "TransportError",
    "configure",
    "fetch",
    "get_credentials",
    "reset",
]
