"""
Centralised settings loader (pydantic-settings).
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # ─── HTTP ────────────────────────────────────────────────────────
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(8000, ge=1, le=65535, validation_alias="PORT")
    # JSON list in the env var, e.g. CORS_ALLOW_ORIGINS='["https://dietdelish.in"]'
    cors_allow_origins: list[str] = Field(["*"], validation_alias="CORS_ALLOW_ORIGINS")

    # ─── meal matcher ────────────────────────────────────────────────
    meal_options_per_slot: int = Field(3, ge=1, validation_alias="MEAL_OPTIONS_PER_SLOT")

    # allow other teammates' env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
