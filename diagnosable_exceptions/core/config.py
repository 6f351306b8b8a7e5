"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every setting has a safe default so the library works without any
environment at all; catalog generation jobs tune it through DIAGNOSABLE_* vars.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (prefix DIAGNOSABLE_)
- Type validation via Pydantic

Usage:
    from diagnosable_exceptions.core.config import settings

    if settings.failure_behavior is FailureBehavior.STOP:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from diagnosable_exceptions.core.enums import Environment, FailureBehavior

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (DIAGNOSABLE_ prefix)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    failure_behavior: FailureBehavior = Field(
        default=FailureBehavior.CONTINUE,
        description="Catalog generation policy when a module import or documentation "
        "method fails: 'continue' logs and skips, 'stop' raises CatalogGenerationError",
    )
    walk_packages: bool = Field(
        default=True,
        description="Import every submodule of a package before discovering its errors",
    )

    model_config = SettingsConfigDict(
        env_prefix="DIAGNOSABLE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        normalized = v.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return normalized

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def uses_json_logs(self) -> bool:
        """Whether logs are rendered as JSON (every environment but development)."""
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
