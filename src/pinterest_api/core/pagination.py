"""Continuation of paged lists.

The API returns `page.next` as a full URL, e.g.
`https://api.pinterest.com/v1/boards/5/pins/?cursor=abc`. Every other
request is expressed relative to the versioned API root, so the root path
(`/{base_path}/{version}/`) is stripped and the query string is turned back
into parameters.

A continuation URL whose path does not start with that prefix cannot be
expressed as a request and is reported as a `MappingError` instead of
producing a wrong path.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

from pinterest_api.core.config import normalize_api_version
from pinterest_api.core.domain.models import PagedList
from pinterest_api.core.errors import InvalidArgument, MappingError
from pinterest_api.core.http import Request


def version_prefix(api_version: str, *, base_path: str = "") -> str:
    """Path prefix of the versioned API root, e.g. `/v1/` or `/api/v1/`."""

    version = normalize_api_version(api_version)
    base = base_path.strip().strip("/")
    if base:
        return f"/{base}/{version}/"
    return f"/{version}/"


def request_from_url(url: str, *, api_version: str, base_path: str = "") -> Request:
    """GET request descriptor equivalent to an absolute or path-relative URL."""

    parts = urlsplit(url)
    prefix = version_prefix(api_version, base_path=base_path)
    if not parts.path.startswith(prefix):
        raise MappingError(
            f"Continuation URL path {parts.path!r} does not start with the API root prefix {prefix!r}."
        )

    path = parts.path[len(prefix):]
    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    return Request("GET", path, params)


def build_next_page_request(paged_list: PagedList, *, api_version: str, base_path: str = "") -> Request:
    """Request for the page following `paged_list`.

    No field selection is set: the continuation URL already encodes the
    projection of the original request.
    """

    next_url = paged_list.next_url
    if not next_url:
        raise InvalidArgument("The list has no more items.")
    return request_from_url(next_url, api_version=api_version, base_path=base_path)
