"""Environment-driven configuration.

Variables:
    OUTSIDE_IN_KEY / OUTSIDE_IN_SECRET: API credentials.
    OUTSIDE_IN_TIMEOUT: request timeout in seconds (default 30).
    OUTSIDE_IN_CONNECT_TIMEOUT: connect timeout in seconds (default 10).
    OUTSIDE_IN_LOG_LEVEL: level used by configure_logging (default INFO).
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import httpx

from .core import credentials
from .core.models import Credentials

logger = logging.getLogger(__name__)

HOST = "hyperlocal-api.outside.in"
API_VERSION = "1.1"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


def get_timeout() -> httpx.Timeout:
    """Build the httpx timeout from the environment."""
    return httpx.Timeout(
        _float_env("OUTSIDE_IN_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        connect=_float_env("OUTSIDE_IN_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT_SECONDS),
    )


def load_credentials_from_env() -> Credentials:
    """Push OUTSIDE_IN_KEY and OUTSIDE_IN_SECRET into the default credential store.

    Missing values are not an error here; signing fails on first use instead.
    """
    loaded = credentials.configure(
        key=os.environ.get("OUTSIDE_IN_KEY") or None,
        secret=os.environ.get("OUTSIDE_IN_SECRET") or None,
    )
    if not loaded.complete:
        logger.warning("OUTSIDE_IN_KEY or OUTSIDE_IN_SECRET not set; requests cannot be signed")
    return loaded


def configure_logging(level: Optional[str] = None) -> None:
    """Send package logs to stderr at the given (or OUTSIDE_IN_LOG_LEVEL) level."""
    level = (level or os.environ.get("OUTSIDE_IN_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
