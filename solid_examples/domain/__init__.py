"""Domain layer - exceptions shared by the examples and the CLI."""
