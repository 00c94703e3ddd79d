"""Mapping of response bodies onto domain objects.

Bodies follow the envelope `{"data": <object|array>, "page": {"next": <url>}}`.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from pinterest_api.core.domain.models import ApiObject, ObjectKind, PagedList
from pinterest_api.core.errors import MappingError
from pinterest_api.core.http import Response


class Mapper:
    """Maps a response body onto the model selected by `kind`."""

    def __init__(self, kind: ObjectKind) -> None:
        self._kind = kind

    @property
    def kind(self) -> ObjectKind:
        return self._kind

    def to_single(self, response: Response) -> ApiObject:
        data = self._body(response).get("data")
        if not isinstance(data, dict):
            raise MappingError(f"Expected a JSON object under 'data' for a {self._kind.value}.")
        return self._map(data)

    def to_list(self, response: Response) -> PagedList:
        body = self._body(response)
        data = body.get("data")
        if not isinstance(data, list):
            raise MappingError(f"Expected a JSON array under 'data' for a list of {self._kind.value}s.")

        items: list[ApiObject] = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise MappingError(f"Item {index} of 'data' is not a JSON object.")
            items.append(self._map(record))

        return PagedList(kind=self._kind, items=tuple(items), next_url=self._next_url(body))

    def _map(self, record: dict[str, Any]) -> ApiObject:
        try:
            return self._kind.model.model_validate(record)
        except ValidationError as exc:
            raise MappingError(f"Invalid {self._kind.value} record: {exc}") from exc

    @staticmethod
    def _body(response: Response) -> dict[str, Any]:
        if not isinstance(response.body, dict):
            raise MappingError("Response body is not a JSON object.")
        return response.body

    @staticmethod
    def _next_url(body: dict[str, Any]) -> str | None:
        page = body.get("page")
        if page is None:
            return None
        if not isinstance(page, dict):
            raise MappingError("Expected a JSON object under 'page'.")
        next_url = page.get("next")
        if next_url is None:
            return None
        if not isinstance(next_url, str):
            raise MappingError("Expected 'page.next' to be a string.")
        return next_url or None
