"""
Logging settings for type_checker.

Only ``configure_logging`` reads these; predicate results never depend on
them. Values come from ``LOG_*`` environment variables (and .env), or from
the ``logging:`` section of a YAML file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class LoggingSettings(BaseSettings):
    """Level and renderer for the ``type_checker`` loggers."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: LogLevel = Field(default="WARNING", description="Minimum level emitted")
    log_format: LogFormat = Field(default="console", description="JSON lines or human-readable console output")

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _normalize_case(cls, v: Any, info: ValidationInfo) -> Any:
        # "debug" and "JSON" are accepted; the Literal check runs afterwards.
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "log_level" else v.lower()


class Settings(BaseSettings):
    """Root settings; nested variables such as ``LOGGING__LOG_LEVEL`` also work."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Build Settings from a YAML file with an optional ``logging:`` mapping."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        section = data.get("logging")
        if isinstance(section, dict):
            return cls(logging=LoggingSettings.model_validate(section))
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once from the environment; cached until reload_settings()."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached Settings and load them again."""
    get_settings.cache_clear()
    return get_settings()
