"""Error taxonomy of the client.

- InvalidArgument: a required argument is empty or a precondition failed,
  raised before any network call.
- RateLimitReached: the transport classified a response as rate-limited.
- MappingError: a response body does not have the expected shape.

Non-ok responses that are not rate-limited are *not* errors: they are
returned as a `Response` with error status and no result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pinterest_api.core.http import Response


class PinterestError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(PinterestError, ValueError):
    """A required identifier/string is blank or a precondition is violated."""


class MappingError(PinterestError, ValueError):
    """A response body cannot be mapped onto the target domain object."""


class RateLimitReached(PinterestError):
    """The API answered with a rate-limit response.

    The envelope is kept on `response` so callers can inspect headers
    (limit/remaining) before deciding whether to try again later.
    """

    def __init__(self, response: Response) -> None:
        self.response = response
        limit = response.rate_limit()
        remaining = response.remaining_requests()
        message = "Rate limit reached"
        hints = []
        if limit is not None:
            hints.append(f"limit={limit}")
        if remaining is not None:
            hints.append(f"remaining={remaining}")
        if hints:
            message += f" ({', '.join(hints)})"
        super().__init__(message)
