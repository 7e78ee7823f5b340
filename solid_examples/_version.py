"""Version information for the SOLID examples package."""

__version__ = "1.0.0"
