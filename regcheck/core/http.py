"""Shared httpx client construction."""

import httpx

from regcheck.config import CheckerConfig


def build_async_client(
    config: CheckerConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an `httpx.AsyncClient` with the configured timeout and headers.

    Args:
        config: CheckerConfig instance, uses defaults if None
        transport: Optional transport override (e.g. httpx.MockTransport)

    Returns:
        Unauthenticated client that follows redirects
    """
    config = config or CheckerConfig()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        transport=transport,
    )
