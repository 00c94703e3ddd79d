"""Async client for the Pinterest REST API (boards, pins, users)."""

from pinterest_api.adapters.authentication import HttpxAuthentication
from pinterest_api.core.config import ApiSettings
from pinterest_api.core.domain import Board, Image, ObjectKind, PagedList, Pin, User
from pinterest_api.core.errors import InvalidArgument, MappingError, PinterestError, RateLimitReached
from pinterest_api.core.http import Request, Response, ResponseStatus
from pinterest_api.core.services.api import Api

__version__ = "0.1.0"

__all__ = [
    "Api",
    "ApiSettings",
    "Board",
    "HttpxAuthentication",
    "Image",
    "InvalidArgument",
    "MappingError",
    "ObjectKind",
    "PagedList",
    "Pin",
    "PinterestError",
    "RateLimitReached",
    "Request",
    "Response",
    "ResponseStatus",
    "User",
]
