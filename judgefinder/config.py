"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "JudgeFinder API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Server
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 8000

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Persisted judge records loaded into the repository at start-up
    JUDGE_SEED_FILE: Path | None = None

    @field_validator("JUDGE_SEED_FILE", mode="after")
    @classmethod
    def validate_seed_file(cls, value: Path | None) -> Path | None:
        """Fail fast on a seed file that does not exist."""
        if value is not None and not value.is_file():
            msg = f"JUDGE_SEED_FILE does not exist: {value}"
            raise ValueError(msg)
        return value


_LOG_LEVELS: dict[str, int] = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str = "development") -> None:
    """
    Configure structlog on top of stdlib logging.

    Development renders colored console lines at DEBUG, production emits one
    JSON object per line at INFO, and tests only surface warnings.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_LOG_LEVELS.get(environment, logging.INFO),
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
