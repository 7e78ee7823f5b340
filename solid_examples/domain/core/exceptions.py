# solid_examples/domain/core/exceptions.py
from typing import List, Optional, Sequence

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, invalid_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.invalid_fields = invalid_fields or []

class ExampleNotFoundError(DomainException):
    """Raised when an unknown example is requested."""
    def __init__(self, name: str, available: Sequence[str]):
        super().__init__(
            f"Unknown example '{name}'. Available examples: {', '.join(available)}"
        )
        self.name = name
        self.available = list(available)
