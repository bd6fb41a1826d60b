"""
Pooled httpx client shared by the Last.fm, Musixmatch and SerpApi providers,
plus the per-upstream timeout policy applied to each call.
"""

import httpx

from app.core.config import ServiceConfig

USER_AGENT = "TopTrack/1.0"
CONNECT_TIMEOUT = 5.0


def timeout_for(config: ServiceConfig) -> httpx.Timeout:
    """Overall bound from the service config; connecting never waits longer than CONNECT_TIMEOUT."""
    return httpx.Timeout(config.timeout, connect=min(config.timeout, CONNECT_TIMEOUT))


class HttpClientManager:
    """
    Process-wide AsyncClient, created lazily on first upstream call and
    closed by the application lifespan. Three upstreams, one request each
    per /toptrack call, so the pool stays small.
    """
    _client: httpx.AsyncClient | None = None

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        if cls._client is None or cls._client.is_closed:
            cls._client = httpx.AsyncClient(
                http2=True,  # requires httpx[http2]
                timeout=httpx.Timeout(10.0, connect=CONNECT_TIMEOUT),
                limits=httpx.Limits(max_keepalive_connections=6, max_connections=30),
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            )
        return cls._client

    @classmethod
    async def close(cls) -> None:
        if cls._client is not None and not cls._client.is_closed:
            await cls._client.aclose()
        cls._client = None
