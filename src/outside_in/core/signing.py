"""Request signing.

A signed URL carries two extra query parameters: dev_key, the raw API key, and
sig, the hex MD5 digest of key + secret + the current unix time in whole
seconds. Two requests signed within the same second share a signature.
"""

from __future__ import annotations

import hashlib
import time
from typing import Callable

from .errors import SignatureError
from .models import Credentials
from .urls import append_query

Clock = Callable[[], float]


def _require(credentials: Credentials) -> tuple[str, str]:
    if not credentials.key:
        raise SignatureError("Key not set")
    if not credentials.secret:
        raise SignatureError("Secret not set")
    return credentials.key, credentials.secret


def make_auth_string(key: str, secret: str, timestamp: float) -> str:
    """Return the sig value for key and secret at the given unix timestamp."""
    raw = f"{key}{secret}{int(timestamp)}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def sign(url: str, credentials: Credentials, clock: Clock = time.time) -> str:
    """Return url with the dev_key and sig query parameters appended.

    Raises:
        SignatureError: if the key or the secret is not set.
    """
    key, secret = _require(credentials)
    sig = make_auth_string(key, secret, clock())
    return append_query(url, f"dev_key={key}&sig={sig}")
