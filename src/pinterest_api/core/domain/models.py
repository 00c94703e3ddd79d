"""Domain models (Pydantic v2).

Pydantic in the domain:
- Mapping a JSON record is a single `model_validate` call: declared keys
  are copied, undeclared keys are ignored and missing ones stay `None`.
- Models are frozen, a fresh instance is produced for every response.

Note:
- These models describe *what* the API returns, not *how* it is fetched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterator

from pydantic import BaseModel, ConfigDict, Field


class ApiObject(BaseModel):
    """Common base of the three resource kinds."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    FIELDS: ClassVar[tuple[str, ...]] = ()

    id: str | None = Field(
        default=None,
        description="Server-assigned identifier (opaque string, may exceed 64-bit range).",
    )

    @classmethod
    def fields(cls) -> list[str]:
        """Field names requested from the API when fetching this kind."""

        return list(cls.FIELDS)


class User(ApiObject):
    """A Pinterest user."""

    FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "username",
        "first_name",
        "last_name",
        "bio",
        "created_at",
        "counts",
        "image",
    )

    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    created_at: str | None = Field(default=None, description="ISO-8601 timestamp as sent by the API.")
    counts: dict[str, Any] | None = Field(default=None, description="pins/following/followers/boards/likes.")
    image: dict[str, Any] | None = None


class Board(ApiObject):
    """A board, also used for the projected `{id, name}` interest records."""

    FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "name",
        "url",
        "description",
        "creator",
        "created_at",
        "counts",
        "image",
    )

    name: str | None = None
    url: str | None = None
    description: str | None = None
    creator: dict[str, Any] | None = None
    created_at: str | None = None
    counts: dict[str, Any] | None = None
    image: dict[str, Any] | None = None


class Pin(ApiObject):
    """A pin."""

    FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "link",
        "url",
        "creator",
        "board",
        "created_at",
        "note",
        "color",
        "counts",
        "media",
        "attribution",
        "image",
        "metadata",
    )

    link: str | None = None
    url: str | None = None
    creator: dict[str, Any] | None = None
    board: dict[str, Any] | None = None
    created_at: str | None = None
    note: str | None = None
    color: str | None = None
    counts: dict[str, Any] | None = None
    media: dict[str, Any] | None = None
    attribution: dict[str, Any] | None = None
    image: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


class ObjectKind(str, Enum):
    """Tag selecting which domain model a response maps onto."""

    USER = "user"
    BOARD = "board"
    PIN = "pin"

    @property
    def model(self) -> type[ApiObject]:
        return _MODELS[self]

    def fields(self) -> list[str]:
        """Default field selection for this kind."""

        return self.model.fields()


_MODELS: dict[ObjectKind, type[ApiObject]] = {
    ObjectKind.USER: User,
    ObjectKind.BOARD: Board,
    ObjectKind.PIN: Pin,
}


@dataclass(frozen=True)
class PagedList:
    """One page of homogeneous domain objects plus the continuation URL.

    `kind` is recorded when the list is created so the next page can be
    mapped onto the same model without inspecting the items.
    """

    kind: ObjectKind
    items: tuple[ApiObject, ...] = ()
    next_url: str | None = None

    def has_next(self) -> bool:
        return bool(self.next_url)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ApiObject]:
        return iter(self.items)

    def __getitem__(self, index: int) -> ApiObject:
        return self.items[index]
