"""
Logging configuration for ach_utils.

Uses structlog for structured logging with:
- Console output to stdout
- JSON formatting (default) or human-readable formatting for development

Библиотека сама логирование не настраивает: configure_logging вызывается
приложением верхнего уровня один раз при старте.
"""

import logging
import sys
from typing import Any, Final

import structlog
from structlog.types import BindableLogger, EventDict

DEFAULT_LOG_LEVEL: Final[str] = "INFO"


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add log level to the event dict.
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL, json_logs: bool = True) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON renderer if True, console renderer otherwise
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    logging.basicConfig(
        format="%(message)s",
        handlers=[console_handler],
        level=numeric_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BindableLogger:
    """
    Get a logger instance (structured logger).

    События всегда передаются в stdlib logging.getLogger(name): пока
    приложение не вызвало configure_logging, у root logger нет handlers,
    и debug/info события никуда не выводятся.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog proxy; processors are resolved on first use
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
