"""Command-line interface for the SOLID examples."""
