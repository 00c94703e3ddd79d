"""Request descriptor and response envelope.

`Request` describes one outbound call (method, relative path, field
selection, parameters). `Response` wraps what the transport got back,
already classified as ok / rate-limited / error, plus the optional mapped
`result`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from pinterest_api.core.errors import InvalidArgument

RATE_LIMIT_STATUS = 429


class ResponseStatus(str, Enum):
    OK = "ok"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"

    @classmethod
    def classify(cls, status_code: int, body: Any, *, malformed: bool = False) -> ResponseStatus:
        """One-time classification of an HTTP result.

        - 429 is rate-limited whatever the body says.
        - 2xx whose body decoded (or was empty) and carries no `error`
          marker is ok.
        - Anything else, including an undecodable body, is an error.
        """

        if status_code == RATE_LIMIT_STATUS:
            return cls.RATE_LIMITED
        if not 200 <= status_code < 300:
            return cls.ERROR
        if malformed:
            return cls.ERROR
        if isinstance(body, dict) and body.get("error"):
            return cls.ERROR
        return cls.OK


@dataclass
class Request:
    """Outbound request descriptor, built fresh per operation."""

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    fields: list[str] | None = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    def set_fields(self, fields: list[str]) -> None:
        self.fields = list(fields)


class Response:
    """Classified wrapper around one HTTP response."""

    def __init__(
        self,
        request: Request,
        status_code: int,
        status: ResponseStatus,
        *,
        body: Any = None,
        raw_body: str = "",
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.request = request
        self.status_code = status_code
        self.status = status
        self.body = body
        self.raw_body = raw_body
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}
        self._result: Any = None

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def result(self) -> Any:
        """Mapped payload (domain object or `PagedList`), `None` if absent."""

        return self._result

    def set_result(self, result: Any) -> None:
        if not self.ok():
            raise InvalidArgument("A result can only be attached to an ok response.")
        self._result = result

    def ok(self) -> bool:
        return self.status is ResponseStatus.OK

    def rate_limited(self) -> bool:
        return self.status is ResponseStatus.RATE_LIMITED

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    def error_message(self) -> str | None:
        """Error text sent by the API (`message`, then `error`), if any."""

        if not isinstance(self.body, dict):
            return None
        for key in ("message", "error"):
            value = self.body.get(key)
            if isinstance(value, str) and value:
                return value
        return None

    def rate_limit(self) -> int | None:
        return self._int_header("X-Ratelimit-Limit")

    def remaining_requests(self) -> int | None:
        return self._int_header("X-Ratelimit-Remaining")

    def _int_header(self, name: str) -> int | None:
        value = self.get_header(name)
        if value is None:
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    def __repr__(self) -> str:
        return (
            f"Response({self.request.method} {self.request.path!r}, "
            f"status_code={self.status_code}, status={self.status.value})"
        )
