"""Centralized logging configuration using structlog.

This module provides consistent, structured logging across the service layer:
- JSON output for production (LOG_FORMAT=json)
- Colored console output for local development (default)
- stdlib logging routed through structlog so adapter logs share one format

Usage:
    from core import get_logger
    logger = get_logger(__name__)
    logger.info("review.approved", review_id=12, approval_count=3)
"""

import logging
import sys

import structlog
from structlog.types import Processor

from core.config import Settings, get_settings


def _get_log_level(level_name: str) -> int:
    """Map a level name to a logging level, defaulting to INFO."""
    return getattr(logging, level_name.upper(), logging.INFO)


def _is_json_format(log_format: str) -> bool:
    """Determine if JSON output is enabled."""
    return log_format.lower() == "json"


def _build_shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging. Call once at application startup.

    Level and format come from ``settings`` (LOG_LEVEL / LOG_FORMAT),
    defaulting to the cached process settings.

    This sets up:
    1. structlog processors for structured logging
    2. stdlib logging to use structlog's ProcessorFormatter
    3. a single stdout handler on the root logger
    """
    if settings is None:
        settings = get_settings()
    log_level = _get_log_level(settings.log_level)
    use_json = _is_json_format(settings.log_format)
    shared_processors = _build_shared_processors()

    if use_json:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True, exception_formatter=structlog.dev.plain_traceback
        )

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A structlog BoundLogger that supports structured key-value logging.

    Example:
        logger = get_logger(__name__)
        logger.info("review.created", review_id=1, pos_id=4)
        logger.warning("review.self_approval_rejected", user_id=7)
    """
    return structlog.stdlib.get_logger(name)
