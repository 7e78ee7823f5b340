"""Configuration package with clean public API."""

from .defaults import DEFAULT_CONFIG
from .manager import ConfigurationManager
from .schemas import AppConfig, LogDestination, LoggingConfig, LogLevel, SrpConfig

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',
    'SrpConfig',
    'DEFAULT_CONFIG',
    'ConfigurationManager',
]
