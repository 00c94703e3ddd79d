"""httpx client builder.

Centralizes timeouts and headers so every caller (transport adapter,
CLI diagnostics) behaves the same, and tests can inject a mocked client.
"""

from __future__ import annotations

import httpx

from pinterest_api.core.config import ApiSettings


def build_async_client(
    settings: ApiSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults."""

    settings = settings or ApiSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
