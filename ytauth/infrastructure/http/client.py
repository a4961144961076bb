"""Shared HTTP client construction."""

import httpx

from ytauth.config import HttpConfig


def create_http_client(config: HttpConfig | None = None) -> httpx.AsyncClient:
    """Shared HTTP client for auth operations (connection pooling)."""
    config = config or HttpConfig()
    timeout = httpx.Timeout(
        connect=config.connect_timeout,
        read=config.read_timeout,
        write=config.write_timeout,
        pool=config.pool_timeout,
    )
    return httpx.AsyncClient(timeout=timeout)
