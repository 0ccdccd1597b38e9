"""Default HTTP transport used when the caller does not supply one."""

from __future__ import annotations

import httpx

DEFAULT_TIMEOUT = 30.0

DEFAULT_LIMITS = httpx.Limits(max_connections=100, max_keepalive_connections=100, keepalive_expiry=90.0)


def build_default_http_client(*, timeout: float | None = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Build an ``httpx.AsyncClient`` tuned for connection reuse.

    Proxy settings are read from the environment. Idle keep-alive connections
    are evicted after 90 seconds.
    """
    return httpx.AsyncClient(
        limits=DEFAULT_LIMITS,
        timeout=httpx.Timeout(timeout, connect=timeout),
        trust_env=True,
    )
