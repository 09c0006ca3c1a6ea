"""Logging configuration setup.

Provides logging configuration using:
- dictConfig for flexible configuration
- All handlers on the root logger (child loggers propagate)
- JSONL format for machine parsing, plain text for terminals

The library itself never configures logging on import; applications (and the
bundled CLI) call ``setup_logging()`` once at startup.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

if TYPE_CHECKING:
    from algolia_client.core.settings.logs import LoggingSettings

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from algolia_client.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = settings_obj.to_logging_kwargs()
    if configure_kwargs:
        log_config = {**log_config, **configure_kwargs}

    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "WARNING",
    console_level: str | None = None,
    file_level: str | None = None,
    http_level: str = "WARNING",
    file_path: str | Path | None = None,
    json_logs: bool = False,
    console_enabled: bool = True,
    capture_warnings: bool = True,
    include_function_name: bool = False,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    service_name: str = "algolia-client",
    **kwargs: Any,
) -> None:
    """Configure logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console_level: Console handler level. If None, uses log_level.
        file_level: File handler level. If None, uses log_level.
        http_level: Level of the httpx and httpcore loggers.
        file_path: Path to log file. None disables file logging.
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console/stderr logging.
        capture_warnings: Forward Python warnings (deprecations included) to logging.
        include_function_name: Include function name in records.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        service_name: Static ``service`` field of JSON records.
        **kwargs: Ignored extra settings.

    Example:
            from algolia_client.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())

        # Or: direct parameters
        configure_logging(log_level="DEBUG", json_logs=True)
    """
    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))

    if capture_warnings:
        logging.captureWarnings(True)

    path = Path(file_path) if file_path else None
    if path:
        path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(
            log_level=log_level,
            console_level=console_level or log_level,
            file_level=file_level or log_level,
            http_level=http_level,
            file_path=path,
            json_logs=json_logs,
            console_enabled=console_enabled,
            include_function_name=include_function_name,
            file_max_bytes=file_max_bytes,
            file_backup_count=file_backup_count,
            service_name=service_name,
        )
    )


def build_logging_config(
    log_level: str,
    console_level: str,
    file_level: str,
    http_level: str,
    file_path: Path | None,
    json_logs: bool,
    console_enabled: bool,
    include_function_name: bool,
    file_max_bytes: int,
    file_backup_count: int,
    service_name: str,
) -> dict[str, Any]:
    """Build the dictConfig mapping.

    Returns:
        Configuration dict accepted by logging.config.dictConfig.
    """
    formatter_name = "json" if json_logs else "text"
    handlers: dict[str, Any] = {}

    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": console_level.upper(),
            "formatter": formatter_name,
            "stream": "ext://sys.stderr",
        }

    if file_path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": file_level.upper(),
            # Files are always JSONL
            "formatter": "json",
            "filename": str(file_path),
            "maxBytes": file_max_bytes,
            "backupCount": file_backup_count,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(include_function_name, service_name),
        "handlers": handlers,
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
        "loggers": {
            # httpx logs every request at INFO; the client does its own logging
            "httpx": {"level": http_level.upper()},
            "httpcore": {"level": http_level.upper()},
        },
    }


def _build_formatters_config(
    include_function_name: bool,
    service_name: str,
) -> dict[str, Any]:
    fmt_keys = {
        "level": "levelname",
        "logger": "name",
        "message": "message",
    }
    text_format = TEXT_FORMAT
    if include_function_name:
        fmt_keys["function"] = "funcName"
        text_format = "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s - %(message)s"

    return {
        "json": {
            "()": "algolia_client.infra.logging.formatters.JSONFormatter",
            "fmt_keys": fmt_keys,
            "static": {"service": service_name},
        },
        "text": {
            "format": text_format,
            "datefmt": TEXT_DATEFMT,
        },
    }
