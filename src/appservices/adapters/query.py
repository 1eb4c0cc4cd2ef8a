"""Query-string options for list endpoints.

Each options model exposes `query_params() -> list[(key, value)]`; this module
merges them into a request path.
"""

from __future__ import annotations

from typing import Protocol
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


class QueryOptions(Protocol):
    def query_params(self) -> list[tuple[str, str]]:
        ...


def set_query_params(path: str, options: QueryOptions | None) -> str:
    """Merge `options.query_params()` into the query string of `path`.

    None options leave `path` untouched. Option keys replace same-named keys
    already in the path; the resulting query is sorted by key.
    """

    if options is None:
        return path

    parts = urlsplit(path)
    merged: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        merged.setdefault(key, []).append(value)

    fresh: dict[str, list[str]] = {}
    for key, value in options.query_params():
        fresh.setdefault(key, []).append(value)
    merged.update(fresh)

    if not merged:
        return path

    query = urlencode(sorted(merged.items()), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
