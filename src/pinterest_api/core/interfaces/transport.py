"""Contract of the authenticated transport.

Protocol:
- A structural contract: the httpx adapter and the test doubles satisfy
  it without inheriting from anything.
- The transport owns credentials, the root URL and the API version; the
  core only reads `api_version` and `base_path` (path of the root URL,
  without the version) to rewrite continuation URLs.
"""

from __future__ import annotations

from typing import Protocol

from pinterest_api.core.http import Request, Response


class Authentication(Protocol):
    """Minimal contract of an authenticated transport.

    Rules:
    - `execute` is asynchronous because it performs HTTP I/O.
    - The returned `Response` is already classified and carries the
      decoded body.
    """

    api_version: str
    base_path: str

    async def execute(self, request: Request) -> Response:
        """Send `request` and return the classified response."""

        ...
