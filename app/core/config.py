"""
Service configuration loaded from environment variables.
Each upstream API gets its own ServiceConfig; credentials are never shared.
"""

import os
import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

LASTFM_URL = "http://ws.audioscrobbler.com/2.0/"
MUSIXMATCH_URL = "https://api.musixmatch.com/ws/1.1/matcher.lyrics.get"
SERPAPI_URL = "https://serpapi.com/search.json"


def _get_float(env_var: str, default: float) -> float:
    value = os.getenv(env_var)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid value for {env_var}: {value!r}, using {default}")
        return default


def _get_int(env_var: str, default: int) -> int:
    value = os.getenv(env_var)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid value for {env_var}: {value!r}, using {default}")
        return default


@dataclass(frozen=True)
class ServiceConfig:
    name: str
    base_url: str
    api_key: str = ""
    timeout: float = 10.0


@dataclass(frozen=True)
class Settings:
    lastfm: ServiceConfig
    musixmatch: ServiceConfig
    serpapi: ServiceConfig
    request_timeout: float = 30.0
    host: str = "0.0.0.0"
    port: int = 8099
    log_level: str = "INFO"

    @property
    def services(self) -> Tuple[ServiceConfig, ...]:
        return (self.lastfm, self.musixmatch, self.serpapi)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        timeout = _get_float("UPSTREAM_TIMEOUT", 10.0)
        return cls(
            lastfm=ServiceConfig(
                name="Last.fm",
                base_url=os.getenv("LASTFM_BASE_URL", LASTFM_URL),
                api_key=os.getenv("LASTFM_API_KEY", ""),
                timeout=timeout,
            ),
            musixmatch=ServiceConfig(
                name="Musixmatch",
                base_url=os.getenv("MUSIXMATCH_BASE_URL", MUSIXMATCH_URL),
                api_key=os.getenv("MUSIXMATCH_API_KEY", ""),
                timeout=timeout,
            ),
            serpapi=ServiceConfig(
                name="SerpApi",
                base_url=os.getenv("SERPAPI_BASE_URL", SERPAPI_URL),
                api_key=os.getenv("SERPAPI_API_KEY", ""),
                timeout=timeout,
            ),
            request_timeout=_get_float("REQUEST_TIMEOUT", 30.0),
            host=os.getenv("TOPTRACK_HOST", "0.0.0.0"),
            port=_get_int("TOPTRACK_PORT", 8099),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def warn_missing_keys(self) -> None:
        for service in self.services:
            if not service.api_key:
                logger.warning(f"No API key configured for {service.name}. Requests will likely be rejected.")


def get_settings() -> Settings:
    return Settings.from_env()
