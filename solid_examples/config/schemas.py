"""Configuration schemas for the SOLID examples."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/solid_examples.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum size before rotation")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.CONSOLE, description="Where log records are written"
    )
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, value: Any) -> Any:
        """Accept destinations in any case."""
        if isinstance(value, str):
            return value.lower()
        return value


class SrpConfig(BaseModel):
    """Settings for the single responsibility example's log files."""

    output_dir: str = Field(".", description="Directory the log files are written to")
    wrong_filename: str = Field("wrong.log", description="File saved by the journal itself")
    better_filename: str = Field("better.log", description="File saved by the writer")

    @field_validator("wrong_filename", "better_filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        """Filenames must be plain names, not paths."""
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"'{value}' is not a plain filename")
        return value


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    srp: SrpConfig = Field(default_factory=lambda: SrpConfig())

    def get_example_options(self, name: str) -> Dict[str, Any]:
        """Keyword arguments for the ``run`` function of the named example."""
        if name == "srp":
            return self.srp.model_dump()
        return {}
