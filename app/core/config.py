# app/core/config.py
"""
Environment-driven settings. A local .env file is honoured if present.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    app_name: str = "MediaFinder API"
    app_version: str = "1.0.0"
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    genius_access_token: str = ""
    lyrics_cache_size: int = 1024
    lyrics_cache_ttl: Optional[float] = None  # Seconds; None keeps entries until evicted
    provider_timeout: float = 10.0
    log_level: str = "INFO"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            tmdb_api_key=os.getenv("TMDB_API_KEY", ""),
            tmdb_base_url=os.getenv("TMDB_BASE_URL", cls.tmdb_base_url).rstrip("/"),
            genius_access_token=os.getenv("GENIUS_ACCESS_TOKEN", ""),
            lyrics_cache_size=int(os.getenv("LYRICS_CACHE_SIZE", str(cls.lyrics_cache_size))),
            lyrics_cache_ttl=_optional_float(os.getenv("LYRICS_CACHE_TTL")),
            provider_timeout=float(os.getenv("PROVIDER_TIMEOUT", str(cls.provider_timeout))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            port=int(os.getenv("PORT", str(cls.port))),
        )


settings = Settings.from_env()
