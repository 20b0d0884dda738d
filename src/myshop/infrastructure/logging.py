"""Logging configuration.

Application code logs through ``structlog.get_logger(__name__)``;
``configure_logging()`` is called once by each entry point (CLI, API).
"""

from __future__ import annotations

import logging
import sys

import structlog

from myshop.infrastructure.settings import Environment, Settings

_LEVELS = {
    Environment.PRODUCTION: "INFO",
    Environment.STAGING: "INFO",
    Environment.DEVELOPMENT: "DEBUG",
    Environment.TESTING: "WARNING",
}


def get_log_level(settings: Settings) -> str:
    return (settings.log_level or _LEVELS[settings.environment]).upper()


def setup_stdlib_logging(level: str) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    # stderr keeps CLI output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def setup_structlog(environment: Environment) -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment in (Environment.PRODUCTION, Environment.STAGING):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog for the application."""
    setup_stdlib_logging(get_log_level(settings))
    setup_structlog(settings.environment)
