"""
Configuration management using Pydantic Settings.

Type-safe, validated loading of the banking client's connection and logging
settings from environment variables (prefix ``BANKING_``).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables, defaults for everything
- Type validation via Pydantic

Usage:
    from bankclient.core.config import get_settings

    settings = get_settings()
    client = BankingClient.from_settings(settings)

Environment variables:
    BANKING_BASE_URL      Banking server base URL (default http://localhost:8123)
    BANKING_TIMEOUT       Connect/request timeout in seconds (default 30)
    BANKING_ENVIRONMENT   development | testing | ci | production
    BANKING_LOG_LEVEL     DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bankclient.core.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from bankclient.core.enums import Environment
from bankclient.core.validation import normalize_base_url

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class BankingSettings(BaseSettings):
    """
    Banking client settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (BANKING_*)
        3. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Banking server base URL (e.g., http://localhost:8123)",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Connect and per-request timeout in seconds",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="BANKING_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """
        Reject unusable URLs and remove trailing slashes.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.

        Raises:
            ValueError: If the URL is empty, malformed, not http(s) or hostless.
        """
        try:
            return normalize_base_url(v)
        except ValueError as e:
            raise ValueError(f"base_url {e}") from e

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> BankingSettings:
    """
    Get cached settings instance.

    Returns:
        BankingSettings: Settings loaded once per process.
    """
    return BankingSettings()
