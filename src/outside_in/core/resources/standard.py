"""Generic resource types that concrete API endpoints build on."""

from __future__ import annotations

from typing import Any, Mapping

from ..urls import insert_path_segment, parameterize
from .base import PUBLICATION_ID, Resource


class QueryResource(Resource):
    """A resource with no publication scoping; every input becomes a query parameter."""

    @classmethod
    def scope(cls, url: str, inputs: Mapping[str, Any]) -> str:
        return url

    @classmethod
    def parameterize(cls, url: str, inputs: Mapping[str, Any]) -> str:
        return parameterize(url, inputs)


class PublicationScopedResource(Resource):
    """A resource that can be narrowed to a single publication.

    When inputs carry a non-empty publication-id, the segment built from scope_template
    goes right after the version segment, e.g.
    /v1.1/publications/42/locations/named/Brooklyn. The publication-id is then
    not repeated in the query string.
    """

    scope_template = "/publications/{publication_id}"

    @classmethod
    def scope(cls, url: str, inputs: Mapping[str, Any]) -> str:
        publication_id = inputs.get(PUBLICATION_ID)
        if publication_id is None or publication_id == "":
            return url
        return insert_path_segment(url, cls.scope_template.format(publication_id=publication_id))

    @classmethod
    def parameterize(cls, url: str, inputs: Mapping[str, Any]) -> str:
        return parameterize(url, {k: v for k, v in inputs.items() if k != PUBLICATION_ID})
