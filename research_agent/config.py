"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (or a .env file in dev).
This is the single source of truth for configuration - nothing is hardcoded
elsewhere.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    DEV = "dev"
    PROD = "prod"
    TEST = "test"


_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class ReasoningSettings(BaseSettings):
    """Settings read by pipeline nodes.

    Kept apart from ``Settings`` so constructing a node never trips the
    production secret checks; ``Settings`` extends it.
    """

    model_config = _SETTINGS_CONFIG

    reasoning_model_probe_enabled: bool = Field(
        default=True,
        description=(
            "Ask the LLM client for its model identifier and let the model "
            "family nudge the reasoning method. Disable to score on query, "
            "intent and profile signals only."
        ),
    )


class Settings(ReasoningSettings):
    model_config = _SETTINGS_CONFIG

    # ------------------------------------------------------------------ #
    # Application
    # ------------------------------------------------------------------ #
    environment: Environment = Environment.DEV
    debug: bool = False

    # ------------------------------------------------------------------ #
    # Logging
    # ------------------------------------------------------------------ #
    log_level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of the coloured console format",
    )

    # ------------------------------------------------------------------ #
    # LiteLLM Proxy
    # ------------------------------------------------------------------ #
    litellm_base_url: str = Field(
        default="http://localhost:4000",
        description="LiteLLM proxy base URL",
    )
    litellm_api_key: SecretStr = Field(
        default=SecretStr("sk-dev-key"),
        description="API key for LiteLLM proxy",
    )
    litellm_default_model: str = Field(
        default="openai/gpt-4o-mini",
        description="Default LLM model identifier (LiteLLM format)",
    )

    # ------------------------------------------------------------------ #
    # Derived / Computed
    # ------------------------------------------------------------------ #
    @model_validator(mode="after")
    def _set_debug_from_env(self) -> Settings:
        if self.environment == Environment.DEV:
            self.debug = True
        return self

    @model_validator(mode="after")
    def _validate_production_secrets(self) -> Settings:
        """Refuse to start in production with the development LiteLLM key."""
        if self.environment != Environment.PROD:
            return self

        _insecure_tokens: set[str] = {"changeme", "default", "test", "sk-dev-key"}

        litellm_key_val = self.litellm_api_key.get_secret_value().lower()
        if any(token in litellm_key_val for token in _insecure_tokens):
            raise RuntimeError(
                "PRODUCTION STARTUP BLOCKED -- Insecure secrets detected:\n"
                "  - LITELLM_API_KEY contains an insecure default value. "
                "Set a real API key for production."
            )

        return self

    @property
    def is_prod(self) -> bool:
        return self.environment == Environment.PROD


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings singleton.

    Call directly in non-request contexts (pipeline construction, scripts).
    """
    return Settings()


@lru_cache(maxsize=1)
def get_reasoning_settings() -> ReasoningSettings:
    """Return cached node settings; no production secret checks run."""
    return ReasoningSettings()
