"""Structured logging setup using structlog."""

import logging
import sys

import structlog

from core.config import Settings, settings as default_settings


def setup_logging(config: Settings = default_settings) -> None:
    """Configure structlog and the standard library root logger.

    Production emits JSON lines with rendered tracebacks; every other
    environment gets the colored console renderer. Request-scoped fields bound through
    ``structlog.contextvars`` are merged into every event.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.is_production:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Uvicorn, SQLAlchemy and friends log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
