"""Logging configuration using structlog.

Every module logs through ``structlog.get_logger(__name__)``; this module wires
those loggers into the stdlib root logger and binds per-request context.
"""

import logging

import structlog
from structlog import contextvars as structlog_contextvars

# Transport libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog for structured logging.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param json_logs: JSON lines when True, colored console output otherwise
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog_contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request_context(**context: object) -> None:
    """Replace the per-request context merged into every log line."""
    structlog_contextvars.clear_contextvars()
    structlog_contextvars.bind_contextvars(**context)


def clear_request_context() -> None:
    structlog_contextvars.clear_contextvars()
