"""
Application settings loaded from the environment / ``.env`` file.

All variables use the ``DETOUR_`` prefix, e.g. ``DETOUR_BING_MAPS_API_KEY``.
If no key is set in the environment, it is read from ``bing_maps_key_file``
(``key.txt`` in the working directory by default).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DETOUR_", env_file=".env", extra="ignore")

    app_name: str = "detour-distance"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "WARNING"

    # Routing provider
    bing_maps_api_key: SecretStr | None = None
    bing_maps_key_file: Path = Path("key.txt")
    routing_url: str = "http://dev.virtualearth.net/REST/v1/Routes/"
    http_timeout: float = 30.0

    @model_validator(mode="after")
    def _load_key_file(self) -> Settings:
        if self.bing_maps_api_key is None and self.bing_maps_key_file.is_file():
            key = self.bing_maps_key_file.read_text().strip()
            if key:
                self.bing_maps_api_key = SecretStr(key)
        return self

    @property
    def has_api_key(self) -> bool:
        return self.bing_maps_api_key is not None


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
