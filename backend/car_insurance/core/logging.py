"""
Structured logging setup (structlog on top of stdlib logging).

Usage:
    from car_insurance.core.logging import get_logger, setup_logging

    setup_logging("INFO")   # call once at startup
    logger = get_logger(__name__)
    logger.info("Claim registered", car_id=1, claim_id=42)
"""

from __future__ import annotations

import logging
import sys

import structlog

from car_insurance.core.config import settings


def setup_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        json_logs: Render JSON lines. Defaults to True outside development.
    """
    if json_logs is None:
        json_logs = settings.APP_ENV != "development"

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=log_level, stream=sys.stdout)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
