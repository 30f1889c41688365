"""Logging for errorcat's own diagnostic records.

errorcat emits error_logged at debug level, plus error_*_failed,
error_body_invalid and unhandled_exception when a side channel breaks. They go
through structlog; with configure_logging() they are rendered as JSON lines on
the stdlib "errorcat" logger, carrying whatever RequestIDMiddleware bound.

Nothing is configured at import time. Without configure_logging() the host's
own structlog setup (or structlog's defaults) applies.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Stamp records in UTC so reports and local logs line up."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """LOG_LEVEL for the errorcat logger."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Render errorcat records as JSON on stdout.

    Only the "errorcat" stdlib logger gets a handler; the host's root logger
    is left alone. Set LOG_LEVEL=DEBUG to see error_logged records.
    """
    settings = settings or LoggingSettings()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,  # request_id, method, path
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.processors.JSONRenderer(),
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "errorcat": {
                    "handlers": ["default"],
                    "level": settings.log_level.upper(),
                    "propagate": False,
                },
            },
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Structlog logger for an errorcat module; name is its __name__."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
