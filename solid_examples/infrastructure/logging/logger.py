import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Optional

from solid_examples.config.schemas import LogDestination, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record):
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def configure_structlog() -> None:
    """Route structlog through the standard library logging module."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a module.

    Structlog is configured on first use so that importing a module never
    prints log records to stdout, which the examples reserve for their output.
    """
    if not structlog.is_configured():
        configure_structlog()
    return structlog.get_logger(name)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the schema defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    log_file = os.path.expandvars(config.file.path)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    # Configure handlers
    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        # stderr, stdout belongs to the examples
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    configure_structlog()

    logger = structlog.get_logger("solid_examples")

    # Log configuration info
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_file=log_file,
    )

    return logger
