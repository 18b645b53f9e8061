"""API resource types and the request executor."""

from .base import PUBLICATION_ID, Resource, fetch
from .standard import PublicationScopedResource, QueryResource

__all__ = ["PUBLICATION_ID", "PublicationScopedResource", "QueryResource", "Resource", "fetch"]
