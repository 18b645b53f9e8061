"""The base class for API resources and the request executor.

Resources are exposed by the API service at endpoints identified by URLs.
A concrete resource type decides how inputs scope and parameterize its URL;
everything else (signing, dispatch, response mapping) is shared.

Example:
    resource = PublicationScopedResource("/locations/named/Brooklyn")
    data = await resource.get({"publication-id": 1234, "limit": 5})
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import httpx

from ... import config
from .. import credentials as credential_store
from ..classify import classify_response
from ..models import Credentials
from ..signing import Clock, sign
from ..transport import http_get

logger = logging.getLogger(__name__)

PUBLICATION_ID = "publication-id"


class Resource(ABC):
    """Abstract API resource. Subclasses implement scope and parameterize."""

    host: str = config.HOST
    version: str = config.API_VERSION

    def __init__(self, relative_url: str):
        self._base_url = f"http://{self.host}/v{self.version}{relative_url}"

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_url!r})"

    @classmethod
    @abstractmethod
    def scope(cls, url: str, inputs: Mapping[str, Any]) -> str:
        """Return url, scoped to a publication when inputs has a non-None publication-id."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def parameterize(cls, url: str, inputs: Mapping[str, Any]) -> str:
        """Return url with query parameters corresponding to inputs."""
        raise NotImplementedError

    @classmethod
    def build_url(cls, base_url: str, inputs: Mapping[str, Any], credentials: Credentials, clock: Clock = time.time) -> str:
        """Scope, parameterize and sign base_url, in that order."""
        return sign(cls.parameterize(cls.scope(base_url, inputs), inputs), credentials, clock)

    async def get(
        self,
        inputs: Optional[Mapping[str, Any]] = None,
        *,
        credentials: Optional[Credentials] = None,
        client: Optional[httpx.AsyncClient] = None,
        clock: Clock = time.time,
    ) -> Any:
        """GET this resource. See fetch()."""
        return await fetch(self, inputs, credentials=credentials, client=client, clock=clock)


async def fetch(
    resource: Resource,
    inputs: Optional[Mapping[str, Any]] = None,
    *,
    credentials: Optional[Credentials] = None,
    client: Optional[httpx.AsyncClient] = None,
    clock: Clock = time.time,
) -> Any:
    """Call GET on the remote service and return the parsed JSON envelope.

    The URL is the resource's base URL, scoped and parameterized by its type
    according to inputs, then signed.

    Args:
        resource: The resource to request.
        inputs: Data inputs. May include publication-id.
        credentials: Credentials to sign with. Defaults to the process-wide store.
        client: Optional httpx client to send the request through.
        clock: Source of the signing timestamp.

    Returns:
        The response body as parsed from JSON.

    Raises:
        SignatureError: the key or secret is not set.
        ForbiddenError: for a 403 response.
        NotFoundError: for a 404 response.
        ServiceError: for an error response carrying a service fault code.
        QueryError: for any other error response.
        TransportError: when no response was received.
        ParseError: when the body is not valid JSON.
    """
    inputs = dict(inputs or {})
    if credentials is None:
        credentials = credential_store.get_credentials()

    url = type(resource).build_url(resource.base_url, inputs, credentials, clock)
    logger.debug("Requesting %s", url)

    response = await http_get(url, client=client)
    return classify_response(response.status_code, response.headers, response.body)
