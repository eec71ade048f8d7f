# faq_chat/core/logging_config.py - Structured logging for the faq_chat package
import logging
import os
import sys

from pythonjsonlogger import jsonlogger

from .. import __version__

PACKAGE_LOGGER = "faq_chat"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


def build_formatter(log_format: str) -> logging.Formatter:
    """
    Formatter for the package handler

    JSON records carry the service name and version next to the context
    fields passed to log_with_context.
    """
    if log_format.lower() == "json":
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "module"},
            static_fields={"service": "faq-chat", "version": __version__},
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )


def setup_logging(
    log_level: str | None = None, log_format: str | None = None, logger_name: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Configure the package logger

    Every logger returned by get_logger is a child of it, so one call sets
    level and format for the whole service.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to env LOG_LEVEL or INFO
        log_format: json or text. Defaults to env LOG_FORMAT or json
        logger_name: Logger to configure

    Returns:
        Configured logger instance
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = log_format or os.getenv("LOG_FORMAT", "json")

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(log_format))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def setup_logging_from_settings(settings) -> logging.Logger:
    """Configure the package logger from Settings (logging.level / logging.format)"""
    return setup_logging(settings.log_level, settings.log_format)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package logger

    Args:
        name: Logger name (usually __name__); names outside the package are nested under it

    Returns:
        Logger that propagates to the package handler
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        setup_logging()

    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context):
    """
    Log an event name with context fields

    Fields set to None are dropped so JSON records only carry what is known.

    Example:
        log_with_context(logger, "info", "answer_assembled", latency_ms=3, top_score=4)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra={k: v for k, v in context.items() if v is not None})
