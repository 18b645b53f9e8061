"""URL composition: query-string appending and path scoping.

All functions are pure and never touch the network.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote, urlencode, urlsplit, urlunsplit


def append_query(url: str, query: str) -> str:
    """Append an already-encoded query fragment to url.

    Starts the query string with '?' unless url already has one, in which
    case the fragment is joined with '&'. An empty fragment leaves url as is.
    """
    if not query:
        return url
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(inputs: Mapping[str, Any]) -> str:
    """URL-encode inputs as a query fragment, keys sorted, None values dropped.

    Booleans are sent as true/false.
    """
    pairs = [(str(k), _query_value(v)) for k, v in sorted(inputs.items(), key=lambda item: str(item[0])) if v is not None]
    return urlencode(pairs, quote_via=quote)


def parameterize(url: str, inputs: Mapping[str, Any]) -> str:
    """Return url with every entry of inputs added to its query string."""
    return append_query(url, encode_params(inputs))


def insert_path_segment(url: str, segment: str, after: int = 1) -> str:
    """Insert segment into the path of url after the first `after` components.

    segment is a path fragment such as '/publications/42'. If the path already
    carries segment at that position, url is returned unchanged, which makes
    repeated scoping a no-op. The rest of the path, empty components and
    trailing slash included, is kept as it was.
    """
    parts = urlsplit(url)
    inserted = [quote(c, safe="") for c in segment.split("/") if c]
    if not inserted:
        return url

    components = parts.path.split("/")[1:] if parts.path not in ("", "/") else []
    head, tail = components[:after], components[after:]
    if tail[: len(inserted)] == inserted:
        return url

    path = "/" + "/".join(head + inserted + tail)
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))
