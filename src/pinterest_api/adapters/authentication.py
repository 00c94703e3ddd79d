"""Authenticated httpx transport.

Responsibility:
- Turn a `Request` descriptor into an HTTP call against the versioned API
  root, with the access token as a bearer header.
- Decode the JSON body and classify the result once
  (ok / rate-limited / error) before handing it to the core.

Transport errors (`httpx.HTTPError`: timeouts, connection failures)
propagate unchanged; there is no retry here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any
from urllib.parse import urlsplit

import httpx

from pinterest_api.adapters.http_client import build_async_client
from pinterest_api.core.config import ApiSettings
from pinterest_api.core.domain.image import Image
from pinterest_api.core.errors import InvalidArgument
from pinterest_api.core.http import Request, Response, ResponseStatus

logger = logging.getLogger(__name__)

_QUERY_METHODS = frozenset({"GET", "DELETE"})


class HttpxAuthentication:
    """`Authentication` implementation on top of `httpx.AsyncClient`."""

    def __init__(
        self,
        access_token: str | None = None,
        settings: ApiSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or ApiSettings()
        if access_token is None and self._settings.access_token is not None:
            access_token = self._settings.access_token.get_secret_value()
        if not access_token or not access_token.strip():
            raise InvalidArgument("An access token is required.")

        self.api_version = self._settings.api_version
        self.base_path = urlsplit(self._settings.base_url).path.strip("/")
        self._api_root = self._settings.api_root()
        self._auth_header = {"Authorization": f"Bearer {access_token.strip()}"}
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)

    @property
    def api_root(self) -> str:
        return self._api_root

    def url_for(self, request: Request) -> str:
        return self._api_root + request.path.lstrip("/")

    async def execute(self, request: Request) -> Response:
        url = self.url_for(request)
        query: dict[str, Any] = {}
        if request.fields:
            query["fields"] = ",".join(request.fields)

        if request.method in _QUERY_METHODS:
            query.update({k: _form_value(v) for k, v in request.params.items()})
            logger.debug("%s %s params=%s", request.method, url, sorted(query))
            http_response = await self._client.request(
                request.method, url, params=query, headers=self._auth_header
            )
        else:
            data, files = _split_body(request.params)
            logger.debug("%s %s body=%s files=%s", request.method, url, sorted(data), sorted(files))
            http_response = await self._client.request(
                request.method,
                url,
                params=query,
                data=data,
                files=files or None,
                headers=self._auth_header,
            )

        return self._to_response(request, http_response)

    def _to_response(self, request: Request, http_response: httpx.Response) -> Response:
        body: Any = None
        malformed = False
        if http_response.content.strip():
            try:
                body = http_response.json()
            except ValueError:
                malformed = True

        status = ResponseStatus.classify(http_response.status_code, body, malformed=malformed)
        logger.debug("%s %s -> HTTP %s (%s)", request.method, request.path, http_response.status_code, status.value)
        return Response(
            request,
            http_response.status_code,
            status,
            body=body,
            raw_body=http_response.text,
            headers=dict(http_response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxAuthentication:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _form_value(value: Any) -> str:
    if isinstance(value, Image):
        return str(value.data)
    return str(value)


def _split_body(params: dict[str, Any]) -> tuple[dict[str, str], dict[str, tuple[str, bytes]]]:
    """Form fields and multipart files of a write request."""

    data: dict[str, str] = {}
    files: dict[str, tuple[str, bytes]] = {}
    for key, value in params.items():
        if isinstance(value, Image) and value.is_file():
            files[key] = (Path(value.data).name, value.read_bytes())
        else:
            data[key] = _form_value(value)
    return data, files
