"""Unit tests for the execution core."""

from __future__ import annotations

import pytest

from pinterest_api.core.domain import Board, ObjectKind, PagedList, User
from pinterest_api.core.errors import MappingError, RateLimitReached
from pinterest_api.core.http import Request, Response
from pinterest_api.core.services.api import Api
from tests.conftest import RecordingTransport, board_record, user_record


class TestExecute:
    """Tests for Api.execute."""

    @pytest.mark.asyncio
    async def test_without_processor_returns_envelope(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": None})
        response = await api.execute(Request("DELETE", "pins/1/"))
        assert response.ok()
        assert response.result is None
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_processor_result_is_attached(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": {"id": "1"}})
        seen: list[Response] = []

        def processor(response: Response) -> str:
            seen.append(response)
            return "mapped"

        response = await api.execute(Request("GET", "me/"), processor)
        assert response.result == "mapped"
        assert seen == [response]

    @pytest.mark.asyncio
    async def test_error_response_is_returned_without_result(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(404, {"message": "Board not found.", "type": "api"})
        called = False

        def processor(response: Response) -> str:
            nonlocal called
            called = True
            return "mapped"

        response = await api.execute(Request("GET", "boards/1/"), processor)
        assert not response.ok()
        assert response.status_code == 404
        assert response.error_message() == "Board not found."
        assert response.result is None
        assert not called

    @pytest.mark.asyncio
    @pytest.mark.parametrize("with_processor", [True, False])
    async def test_rate_limited_always_raises(
        self, api: Api, transport: RecordingTransport, with_processor: bool
    ) -> None:
        transport.queue(429, {"message": "Slow down"}, headers={"X-Ratelimit-Limit": "10", "X-Ratelimit-Remaining": "0"})
        processor = (lambda response: "mapped") if with_processor else None

        with pytest.raises(RateLimitReached) as excinfo:
            await api.execute(Request("GET", "me/"), processor)

        envelope = excinfo.value.response
        assert envelope.rate_limited()
        assert envelope.result is None
        assert envelope.rate_limit() == 10
        assert "limit=10" in str(excinfo.value)
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_mapping_error_propagates(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": "not an object"})
        with pytest.raises(MappingError):
            await api.fetch_user(Request("GET", "me/"))


class TestFetchHelpers:
    """Tests for the single/list specialisations."""

    @pytest.mark.asyncio
    async def test_fetch_user_sets_fields_and_maps(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": user_record()})
        response = await api.fetch_user(Request("GET", "me/"))
        assert transport.requests[0].fields == User.fields()
        assert isinstance(response.result, User)
        assert response.result.username == "jdoe"

    @pytest.mark.asyncio
    async def test_fetch_multiple_boards_default_fields(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": [board_record(), board_record(id="2")]})
        response = await api.fetch_multiple_boards(Request("GET", "me/boards/"))
        assert transport.requests[0].fields == Board.fields()
        page = response.result
        assert isinstance(page, PagedList)
        assert page.kind is ObjectKind.BOARD
        assert len(page) == 2

    @pytest.mark.asyncio
    async def test_fetch_multiple_boards_field_override(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": [{"id": "1", "name": "Bread"}]})
        response = await api.fetch_multiple_boards(Request("GET", "me/following/interests/"), ["id", "name"])
        assert transport.requests[0].fields == ["id", "name"]
        assert response.result[0].name == "Bread"

    @pytest.mark.asyncio
    async def test_execute_for_single_with_explicit_kind(self, api: Api, transport: RecordingTransport) -> None:
        transport.queue(200, {"data": board_record()})
        response = await api.execute_for_single(Request("GET", "boards/1/"), ObjectKind.BOARD)
        assert isinstance(response.result, Board)
