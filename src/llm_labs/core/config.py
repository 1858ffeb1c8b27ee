"""Configuration management using Pydantic settings.

This module provides a centralized configuration system that:
- Loads settings from environment variables
- Supports .env files via python-dotenv
- Validates configuration at startup
- Provides type-safe access to settings
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from llm_labs.core.errors import ConfigurationError

MISSING_API_KEY_MESSAGE = "Set OPENAI_API_KEY in .env"


class Settings(BaseSettings):  # type: ignore[misc]
    """Lab settings loaded from environment variables.

    Lab-specific settings use the LLM_LABS_ prefix (e.g., LLM_LABS_LOG_LEVEL=DEBUG).
    The API key, model override and log delay keep their conventional names.
    """

    model_config = SettingsConfigDict(
        env_prefix="LLM_LABS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # API key (loaded from environment without prefix for compatibility)
    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")

    # Model selection
    openai_model: str = Field(default="gpt-5-mini", alias="OPENAI_MODEL")
    default_provider: Literal["openai"] = "openai"

    # Console pacing
    log_delay_ms: int = Field(
        default=750,
        ge=0,
        validation_alias=AliasChoices("LOG_DELAY_MS", "LLM_LABS_LOG_DELAY_MS"),
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @property
    def openai_key(self) -> str | None:
        """Get OpenAI API key as string."""
        return self.openai_api_key.get_secret_value() if self.openai_api_key else None

    def require_openai_key(self) -> str:
        """Return the OpenAI API key or fail before any network activity.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is not set.
        """
        key = self.openai_key
        if not key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        return key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings singleton.
    """
    return Settings()
