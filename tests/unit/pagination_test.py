"""Unit tests for continuation URL handling."""

from __future__ import annotations

import pytest

from pinterest_api.core.domain import ObjectKind, PagedList, Pin
from pinterest_api.core.errors import InvalidArgument, MappingError
from pinterest_api.core.pagination import build_next_page_request, request_from_url, version_prefix


class TestRequestFromUrl:
    """Tests for request_from_url."""

    def test_absolute_url(self) -> None:
        request = request_from_url("https://api.example/v1/boards/5/pins/?cursor=abc", api_version="v1")
        assert request.method == "GET"
        assert request.path == "boards/5/pins/"
        assert request.params == {"cursor": "abc"}
        assert request.fields is None

    def test_path_relative_url(self) -> None:
        request = request_from_url("/v1/me/boards/?cursor=xyz&fields=id%2Cname", api_version="v1")
        assert request.path == "me/boards/"
        assert request.params == {"cursor": "xyz", "fields": "id,name"}

    def test_url_without_query(self) -> None:
        request = request_from_url("https://api.pinterest.com/v1/me/pins/", api_version="v1")
        assert request.path == "me/pins/"
        assert request.params == {}

    def test_blank_values_are_kept(self) -> None:
        request = request_from_url("https://api.pinterest.com/v1/me/pins/?cursor=&limit=25", api_version="v1")
        assert request.params == {"cursor": "", "limit": "25"}

    def test_version_with_slashes_is_normalised(self) -> None:
        request = request_from_url("https://api.pinterest.com/v3/me/?cursor=1", api_version="/v3/")
        assert request.path == "me/"

    @pytest.mark.parametrize(
        "url",
        [
            "https://api.pinterest.com/v3/me/pins/?cursor=a",
            "https://api.pinterest.com/me/pins/?cursor=a",
            "me/pins/?cursor=a",
            "https://api.pinterest.com/v10/me/pins/",
        ],
    )
    def test_version_mismatch_fails(self, url: str) -> None:
        with pytest.raises(MappingError):
            request_from_url(url, api_version="v1")

    @pytest.mark.parametrize("version", ["", "   ", "/", " / ", "//"])
    def test_blank_version_is_rejected(self, version: str) -> None:
        with pytest.raises(InvalidArgument):
            version_prefix(version)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert version_prefix(" /v1/ ") == "/v1/"

    def test_root_path_is_part_of_the_prefix(self) -> None:
        assert version_prefix("v1", base_path="/api/") == "/api/v1/"
        request = request_from_url(
            "https://proxy.local/api/v1/boards/5/pins/?cursor=c2", api_version="v1", base_path="api"
        )
        assert request.path == "boards/5/pins/"
        assert request.params == {"cursor": "c2"}

    def test_missing_root_path_fails(self) -> None:
        with pytest.raises(MappingError):
            request_from_url("https://proxy.local/v1/boards/5/pins/", api_version="v1", base_path="api")


class TestBuildNextPageRequest:
    """Tests for build_next_page_request."""

    def test_uses_next_url(self) -> None:
        page = PagedList(
            kind=ObjectKind.PIN,
            items=(Pin(id="1"),),
            next_url="https://api.pinterest.com/v1/boards/5/pins/?cursor=abc",
        )
        request = build_next_page_request(page, api_version="v1")
        assert (request.method, request.path, request.params) == ("GET", "boards/5/pins/", {"cursor": "abc"})

    def test_without_next_fails(self) -> None:
        page = PagedList(kind=ObjectKind.PIN, items=(Pin(id="1"),))
        with pytest.raises(InvalidArgument):
            build_next_page_request(page, api_version="v1")

    def test_blank_next_url_fails(self) -> None:
        page = PagedList(kind=ObjectKind.PIN, items=(Pin(id="1"),), next_url="")
        with pytest.raises(InvalidArgument, match="no more items"):
            build_next_page_request(page, api_version="v1")
