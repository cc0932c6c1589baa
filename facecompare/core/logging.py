"""Logging configuration for the face template comparison service."""
import logging
import sys

import structlog
from structlog.stdlib import ProcessorFormatter

from facecompare.core.config import settings

# AWS SDK loggers are chatty at INFO (credential lookup, retries)
QUIET_LOGGERS = ("botocore", "aiobotocore", "aioboto3")


def _renderer() -> structlog.types.Processor:
    """Colored console output while developing, one JSON object per line otherwise."""
    if settings.ENVIRONMENT == "development":
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging() -> None:
    """Route structlog events through a stdout handler on the root logger."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.ENVIRONMENT != "development":
        processors.append(structlog.processors.format_exc_info)
    processors.append(ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProcessorFormatter(processor=_renderer()))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).debug(
        "Logging configured", environment=settings.ENVIRONMENT, level=settings.LOG_LEVEL
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``, typically ``__name__``."""
    return structlog.get_logger(name)
