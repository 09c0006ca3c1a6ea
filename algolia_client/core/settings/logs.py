"""Logging settings used by ``setup_logging()``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration for applications and the CLI.

    The library only logs through ``logging.getLogger(__name__)``; these
    settings matter once something calls ``setup_logging()``.

    Environment variables use the LOG_ prefix.
    Example: LOG_LEVEL=INFO, LOG_JSON_LOGS=true, LOG_FILE_PATH=logs/algolia.jsonl
    """

    service_name: str = Field(
        default="algolia-client",
        description="Static `service` field of JSON records",
    )
    level: LogLevel = Field(default="WARNING", description="Root logger level")
    console_level: LogLevel | None = Field(
        default=None, description="Console handler level (defaults to `level`)"
    )
    http_level: LogLevel = Field(
        default="WARNING",
        description="Level of the httpx/httpcore loggers (INFO logs every request)",
    )
    json_logs: bool = Field(default=False, description="Emit JSON Lines on the console")
    console_enabled: bool = Field(default=True, description="Log to stderr")

    # Rotating JSONL file; unset disables it
    file_path: Path | None = Field(default=None, description="Log file path")
    file_level: LogLevel | None = Field(
        default=None, description="File handler level (defaults to `level`)"
    )
    file_max_bytes: int = Field(default=10_485_760, ge=1024, le=1_073_741_824)
    file_backup_count: int = Field(default=5, ge=0, le=100)

    capture_warnings: bool = Field(
        default=True,
        description="Route `warnings` (deprecated client methods included) to logging",
    )
    include_function_name: bool = Field(default=False)

    @field_validator("level", "console_level", "file_level", "http_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            return v.upper()
        return v

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``."""
        return {
            "service_name": self.service_name,
            "log_level": self.level,
            "console_level": self.console_level or self.level,
            "file_level": self.file_level or self.level,
            "http_level": self.http_level,
            "json_logs": self.json_logs,
            "console_enabled": self.console_enabled,
            "file_path": str(self.file_path) if self.file_path else None,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "capture_warnings": self.capture_warnings,
            "include_function_name": self.include_function_name,
        }

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )
