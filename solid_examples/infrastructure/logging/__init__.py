"""Structured logging for the SOLID examples."""

from .logger import configure_structlog, get_logger, setup_logging

__all__ = ["get_logger", "setup_logging", "configure_structlog"]
