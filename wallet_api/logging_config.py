"""
Structured logging for the wallet API.

JSON lines by default; colored console output when running at DEBUG level or
when ``LOG_JSON=false`` is set.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

_NOISY_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def setup_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Args:
        log_level: Override log level (default: from settings.log_level)
        json_logs: Force JSON (True) or console (False) rendering
            (default: from settings.log_json, then JSON unless DEBUG)
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    if json_logs is None:
        json_logs = settings.log_json
    if json_logs is None:
        json_logs = level != logging.DEBUG

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
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
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # The request middleware already logs every call
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
