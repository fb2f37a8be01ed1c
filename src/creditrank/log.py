"""
Structured logging configuration using structlog.

Usage:
    from creditrank.log import setup_logging, get_logger

    setup_logging()  # once, at process start
    logger = get_logger(__name__)
    logger.info("rating.saved", rating_id=1, order_number=4)
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from creditrank.config import config


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Configure structlog and the standard library root logger."""
    level = (level or config.log_level).upper()
    fmt = fmt or config.log_format

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structured logger bound to a module name."""
    return structlog.get_logger(name)
