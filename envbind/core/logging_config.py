"""Logging configuration for applications using envbind.

envbind itself only emits DEBUG records through stdlib loggers and
installs a ``NullHandler``. Applications that want to see them can
call `configure_logging`, which sets up structlog on top of stdlib
logging.
"""

import logging
import sys

import structlog

from envbind.core.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure structlog and the ``envbind`` logger.

    Args:
        settings: Settings to use. If None, uses global settings.

    Returns:
        The configured ``envbind`` logger.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route plain stdlib records through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("envbind")
    package_logger.handlers = [
        h for h in package_logger.handlers if not isinstance(h, logging.StreamHandler)
    ]
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    return package_logger

