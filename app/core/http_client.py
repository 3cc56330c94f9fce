# app/core/http_client.py
"""
Shared outbound client for the Genius and TMDB lookups.
"""

import logging

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class HttpClientManager:
    """
    Lazily builds one httpx.AsyncClient per process and hands it to every provider.

    Genius moves song pages when a slug is renamed, so redirects are followed.
    Scraping song pages without a browser-like User-Agent gets a 403.
    The client is rebuilt on the next call after close() (app shutdown, tests).
    """
    DEFAULT_HEADERS = {
        "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) MediaFinder/1.0",
        "Accept-Language": "en-US,en;q=0.8",
    }
    POOL_LIMITS = httpx.Limits(max_keepalive_connections=10, max_connections=20)

    _client: httpx.AsyncClient | None = None

    @classmethod
    def _build(cls) -> httpx.AsyncClient:
        logger.debug(f"Opening shared HTTP client (timeout {settings.provider_timeout}s)")
        return httpx.AsyncClient(
            http2=True,
            follow_redirects=True,
            timeout=httpx.Timeout(settings.provider_timeout),
            limits=cls.POOL_LIMITS,
            headers=cls.DEFAULT_HEADERS,
        )

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        if cls._client is None or cls._client.is_closed:
            cls._client = cls._build()
        return cls._client

    @classmethod
    async def close(cls) -> None:
        client, cls._client = cls._client, None
        if client is not None and not client.is_closed:
            await client.aclose()
            logger.debug("Shared HTTP client closed")
