"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GEOLOOKUP_LOOKUP=nominatim
- GEOLOOKUP_CACHE_PREFIX=myapp:geocoder:
- GEOLOOKUP_GOOGLE_API_KEY=...
- GEOLOOKUP_CACHE_ENABLED=true
- GEOLOOKUP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LookupConfig(BaseSettings):
    """Lookup selection and provider settings.

    Environment variables prefixed with GEOLOOKUP_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOLOOKUP_")

    # Street lookup override; None means the first street lookup.
    lookup: Optional[str] = None
    cache_prefix: str = "geolookup:"

    timeout_seconds: float = 3.0
    user_agent: str = "geolookup"
    language: Optional[str] = None

    google_api_key: Optional[SecretStr] = None
    bing_api_key: Optional[SecretStr] = None
    yandex_api_key: Optional[SecretStr] = None

    nominatim_domain: str = "nominatim.openstreetmap.org"
    freegeoip_domain: str = "freegeoip.app"


class CacheConfig(BaseSettings):
    """Result cache configuration.

    Environment variables prefixed with GEOLOOKUP_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOLOOKUP_CACHE_")

    enabled: bool = False
    ttl_seconds: Optional[float] = Field(default=None, gt=0)
    max_size: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GEOLOOKUP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOLOOKUP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.lookups.lookup)
        print(config.cache.enabled)
    """

    model_config = SettingsConfigDict(env_prefix="GEOLOOKUP_APP_")

    lookups: LookupConfig = Field(default_factory=LookupConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
