"""HTTP GET primitive built on httpx."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import get_timeout
from .errors import TransportError
from .models import RawResponse

logger = logging.getLogger(__name__)


async def http_get(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[httpx.Timeout] = None,
) -> RawResponse:
    """GET url and return its status, headers and body.

    Args:
        url: Absolute URL, already signed.
        client: Optional shared client. A short-lived one is created otherwise.
        timeout: Timeout for the short-lived client. Defaults to the environment
            configuration.

    Raises:
        TransportError: if no HTTP response was received.
    """
    try:
        if client is not None:
            response = await client.get(url)
        else:
            if timeout is None:
                timeout = get_timeout()
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
                response = await owned.get(url)
    except httpx.TransportError as exc:
        logger.warning("GET %s failed: %s", url, exc)
        raise TransportError(f"{type(exc).__name__}: {exc}") from exc

    return RawResponse(
        status_code=response.status_code,
        headers=dict(response.headers.items()),
        body=response.content,
    )
