"""Core domain definitions."""

from .exceptions import ConfigurationError, DomainException, ExampleNotFoundError

__all__ = ["DomainException", "ConfigurationError", "ExampleNotFoundError"]
