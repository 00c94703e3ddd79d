"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

from pinterest_api.core.http import Request, Response, ResponseStatus
from pinterest_api.core.services.api import Api


class RecordingTransport:
    """`Authentication` double: records requests, answers with queued envelopes."""

    def __init__(self, api_version: str = "v1", base_path: str = "") -> None:
        self.api_version = api_version
        self.base_path = base_path
        self.requests: list[Request] = []
        self._queue: list[tuple[int, Any, dict[str, str]]] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def queue(self, status_code: int = 200, body: Any = None, headers: dict[str, str] | None = None) -> None:
        self._queue.append((status_code, body, headers or {}))

    async def execute(self, request: Request) -> Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.path}")
        status_code, body, headers = self._queue.pop(0)
        return Response(
            request,
            status_code,
            ResponseStatus.classify(status_code, body),
            body=body,
            headers=headers,
        )


def user_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": "4788400174839062",
        "username": "jdoe",
        "first_name": "Jane",
        "last_name": "Doe",
        "bio": "Pins about bread.",
        "created_at": "2015-03-02T10:11:12",
        "counts": {"pins": 12, "following": 3, "followers": 40, "boards": 2, "likes": 7},
        "image": {"60x60": {"url": "https://i.pinimg.com/60x60/a.jpg", "width": 60, "height": 60}},
    }
    record.update(overrides)
    return record


def board_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": "314196648911734959",
        "name": "Sourdough",
        "url": "https://www.pinterest.com/jdoe/sourdough/",
        "description": "Starters and loaves",
        "creator": {"url": "https://www.pinterest.com/jdoe/", "first_name": "Jane", "last_name": "Doe", "id": "4788400174839062"},
        "created_at": "2016-01-01T00:00:00",
        "counts": {"pins": 31, "collaborators": 0, "followers": 9},
        "image": {"60x60": {"url": "https://i.pinimg.com/60x60/b.jpg", "width": 60, "height": 60}},
    }
    record.update(overrides)
    return record


def pin_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": "314196580192594085",
        "link": "https://example.com/bread",
        "url": "https://www.pinterest.com/pin/314196580192594085/",
        "creator": {"id": "4788400174839062"},
        "board": {"id": "314196648911734959", "name": "Sourdough"},
        "created_at": "2017-05-05T05:05:05",
        "note": "Crumb shot",
        "color": "#c8a27a",
        "counts": {"saves": 4, "comments": 1},
        "media": {"type": "image"},
        "attribution": {"title": "Bread", "url": "https://example.com"},
        "image": {"original": {"url": "https://i.pinimg.com/originals/c.jpg", "width": 800, "height": 600}},
        "metadata": {"link": {"locale": "en"}},
    }
    record.update(overrides)
    return record


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user-level config and PINTEREST_* variables out of the tests."""

    for name in list(os.environ):
        if name.upper().startswith("PINTEREST_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def api(transport: RecordingTransport) -> Api:
    return Api(transport)
