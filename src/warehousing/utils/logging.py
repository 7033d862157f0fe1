"""Logging configuration and the `logged` decorator for warehousing operations.

`logged` wraps an operation with structured entry/exit logging:

    operation started    arguments="MWH.001, ZWOLLE-001, 40, 10"
    operation completed  elapsed_ms=3
    operation failed     elapsed_ms=1 error_type=ValidationError error="..."

Arguments are summarised with each value truncated, so large payloads
never flood the log.
"""

import functools
import logging
import os
import sys
import time

import structlog

from warehousing.errors import error_message, kind_of

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)

PARAM_TRUNCATE_LENGTH = 100


def get_log_level() -> str:
    """Get log level based on environment."""
    env = (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()

    level_map = {
        "production": "INFO",
        "staging": "INFO",
        "development": "DEBUG",
        "test": "WARNING",
    }

    return os.getenv("LOG_LEVEL", level_map.get(env, "INFO"))


def configure_logging() -> None:
    """Route stdlib logging to stdout and configure structlog on top of it.

    Production and staging render JSON lines; everything else gets the
    console renderer.
    """
    log_level = get_log_level()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]

    env = (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]
    if env in ["production", "staging"]:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def truncate(value) -> str:
    if value is None:
        return "null"
    text = str(value)
    if len(text) > PARAM_TRUNCATE_LENGTH:
        return text[:PARAM_TRUNCATE_LENGTH] + "…"
    return text


def summarize_arguments(args, kwargs) -> str:
    parts = [truncate(a) for a in args]
    parts.extend(f"{key}={truncate(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def logged(func):
    """Log entry, exit and failure of `func` against the logger of its module."""
    logger = structlog.get_logger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.info(
            "operation started",
            operation=func.__name__,
            arguments=summarize_arguments(args, kwargs),
        )
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            if kind_of(exc) is None:
                logger.error(
                    "operation failed",
                    operation=func.__name__,
                    elapsed_ms=elapsed_ms,
                    error_type=type(exc).__name__,
                    error=str(exc),
                    exc_info=True,
                )
            else:
                logger.warning(
                    "operation failed",
                    operation=func.__name__,
                    elapsed_ms=elapsed_ms,
                    error_type=type(exc).__name__,
                    error=error_message(exc),
                )
            raise

        logger.info(
            "operation completed",
            operation=func.__name__,
            elapsed_ms=int((time.perf_counter() - started) * 1000),
        )
        return result

    return wrapper
