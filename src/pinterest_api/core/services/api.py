"""API client: execution core and endpoint operations.

Every public operation funnels through `Api.execute`:

1. the `Request` is handed to the injected `Authentication` transport;
2. a rate-limited response raises `RateLimitReached` (never retried);
3. an ok response is passed to the processor, whose return value becomes
   `response.result`;
4. any other response is returned untouched, leaving interpretation of
   API errors to the caller.

Endpoint methods validate their arguments *before* touching the transport.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Callable

from pinterest_api.core.domain.image import Image
from pinterest_api.core.domain.models import Board, ObjectKind, PagedList
from pinterest_api.core.errors import InvalidArgument, RateLimitReached
from pinterest_api.core.http import Request, Response
from pinterest_api.core.interfaces.transport import Authentication
from pinterest_api.core.mapper import Mapper
from pinterest_api.core.pagination import build_next_page_request

logger = logging.getLogger(__name__)

Processor = Callable[[Response], Any]

INTEREST_FIELDS: tuple[str, ...] = ("id", "name")


def _require(value: object, message: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise InvalidArgument(message)
    return text


class Api:
    """Typed client over an authenticated transport.

    The transport's `api_version` and `base_path` are read once here and
    threaded into the pagination helpers explicitly.
    """

    def __init__(self, auth: Authentication) -> None:
        self._auth = auth
        self._api_version = auth.api_version
        self._base_path = auth.base_path

    @property
    def api_version(self) -> str:
        return self._api_version

    # ------------------------------------------------------------------
    # Execution core
    # ------------------------------------------------------------------

    async def execute(self, request: Request, processor: Processor | None = None) -> Response:
        logger.debug("Executing %s %s", request.method, request.path)
        response = await self._auth.execute(request)

        if response.rate_limited():
            logger.warning(
                "Rate limit reached on %s %s (remaining=%s)",
                request.method,
                request.path,
                response.remaining_requests(),
            )
            raise RateLimitReached(response)

        if processor is not None and response.ok():
            response.set_result(processor(response))
        elif not response.ok():
            logger.debug(
                "%s %s returned HTTP %s: %s",
                request.method,
                request.path,
                response.status_code,
                response.error_message(),
            )

        return response

    async def execute_for_single(self, request: Request, kind: ObjectKind) -> Response:
        request.set_fields(kind.fields())
        return await self.execute(request, Mapper(kind).to_single)

    async def execute_for_list(
        self,
        request: Request,
        kind: ObjectKind,
        fields: list[str] | tuple[str, ...] | None = None,
    ) -> Response:
        request.set_fields(list(fields) if fields else kind.fields())
        return await self.execute(request, Mapper(kind).to_list)

    async def fetch_user(self, request: Request) -> Response:
        return await self.execute_for_single(request, ObjectKind.USER)

    async def fetch_board(self, request: Request) -> Response:
        return await self.execute_for_single(request, ObjectKind.BOARD)

    async def fetch_pin(self, request: Request) -> Response:
        return await self.execute_for_single(request, ObjectKind.PIN)

    async def fetch_multiple_users(self, request: Request) -> Response:
        return await self.execute_for_list(request, ObjectKind.USER)

    async def fetch_multiple_boards(self, request: Request, fields: list[str] | tuple[str, ...] | None = None) -> Response:
        return await self.execute_for_list(request, ObjectKind.BOARD, fields)

    async def fetch_multiple_pins(self, request: Request, fields: list[str] | tuple[str, ...] | None = None) -> Response:
        return await self.execute_for_list(request, ObjectKind.PIN, fields)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user(self, username_or_id: str) -> Response:
        username_or_id = _require(username_or_id, "The username or id should not be empty.")
        return await self.fetch_user(Request("GET", f"users/{username_or_id}/"))

    async def get_current_user(self) -> Response:
        return await self.fetch_user(Request("GET", "me/"))

    async def get_user_boards(self) -> Response:
        return await self.fetch_multiple_boards(Request("GET", "me/boards/"))

    async def get_user_pins(self) -> Response:
        return await self.fetch_multiple_pins(Request("GET", "me/pins/"))

    async def get_user_followers(self) -> Response:
        return await self.fetch_multiple_users(Request("GET", "me/followers/"))

    async def get_user_following_boards(self) -> Response:
        return await self.fetch_multiple_boards(Request("GET", "me/following/boards/"))

    async def get_user_following(self) -> Response:
        return await self.fetch_multiple_users(Request("GET", "me/following/users/"))

    async def get_user_interests(self) -> Response:
        """Interests followed by the current user, as boards projected to id and name."""

        return await self.fetch_multiple_boards(Request("GET", "me/following/interests/"), INTEREST_FIELDS)

    async def follow_user(self, username: str) -> Response:
        username = _require(username, "Username is required.")
        return await self.execute(Request("POST", "me/following/users/", {"user": username}))

    # ------------------------------------------------------------------
    # Boards
    # ------------------------------------------------------------------

    async def get_board(self, board_id: str) -> Response:
        board_id = _require(board_id, "The board id should not be empty.")
        return await self.fetch_board(Request("GET", f"boards/{board_id}/"))

    async def update_board(self, board: Board) -> Response:
        board_id = _require(board.id, "The board id is required.")

        params: dict[str, Any] = {}
        if board.name:
            params["name"] = str(board.name)
        if board.description:
            params["description"] = str(board.description)

        return await self.fetch_board(Request("PATCH", f"boards/{board_id}/", params))

    async def create_board(self, name: str, description: str | None = None) -> Response:
        name = _require(name, "The name should not be empty.")

        params: dict[str, Any] = {"name": name}
        if description:
            params["description"] = str(description)

        return await self.fetch_board(Request("POST", "boards/", params))

    async def delete_board(self, board_id: str) -> Response:
        board_id = _require(board_id, "The board id should not be empty.")
        return await self.execute(Request("DELETE", f"boards/{board_id}/"))

    async def get_board_pins(self, board_id: str) -> Response:
        board_id = _require(board_id, "The board id should not be empty.")
        return await self.fetch_multiple_pins(Request("GET", f"boards/{board_id}/pins/"))

    # ------------------------------------------------------------------
    # Pins
    # ------------------------------------------------------------------

    async def create_pin(self, board_id: str, note: str, image: Image, link: str | None = None) -> Response:
        # Board ids exceed 32-bit range: they stay opaque strings.
        board_id = _require(board_id, "The board id should not be empty.")
        note = _require(note, "The note should not be empty.")

        params: dict[str, Any] = {"board": board_id, "note": note}
        if link:
            params["link"] = str(link)

        # File images travel as the Image itself so the transport can upload them.
        params[image.param_key] = image if image.is_file() else image.data

        return await self.fetch_pin(Request("POST", "pins/", params))

    async def delete_pin(self, pin_id: str) -> Response:
        pin_id = _require(pin_id, "The pin id should not be empty.")
        return await self.execute(Request("DELETE", f"pins/{pin_id}/"))

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    async def get_next_items(self, paged_list: PagedList) -> Response:
        """Fetch the page following `paged_list`; its `result` is a new `PagedList`."""

        if not paged_list.has_next():
            raise InvalidArgument("The list has no more items.")
        if not paged_list.items:
            raise InvalidArgument("Unable to detect object type because the list contains no items.")

        request = build_next_page_request(paged_list, api_version=self._api_version, base_path=self._base_path)
        return await self.execute(request, Mapper(paged_list.kind).to_list)

    async def iter_pages(self, response: Response, *, max_pages: int | None = None) -> AsyncIterator[PagedList]:
        """Yield the page held by `response`, then each following page on demand.

        The next page is only requested when the consumer asks for it.
        Iteration stops at the last page, at an empty page, after
        `max_pages` pages, or when a next-page request is not ok.
        """

        if max_pages is not None and max_pages < 1:
            raise InvalidArgument("max_pages should be at least 1.")

        page = response.result
        if not isinstance(page, PagedList):
            raise InvalidArgument("The response does not hold a paged list.")

        count = 0
        while True:
            yield page
            count += 1
            if max_pages is not None and count >= max_pages:
                return
            if not page.has_next() or not page.items:
                return

            next_response = await self.get_next_items(page)
            if not next_response.ok():
                logger.warning(
                    "Stopping pagination: HTTP %s (%s)",
                    next_response.status_code,
                    next_response.error_message(),
                )
                return
            page = next_response.result

