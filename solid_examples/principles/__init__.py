"""SOLID principle examples.

Each module is self-contained and pairs a design that violates one principle
with one that follows it. Every module exposes ``run`` and ``main``.
"""
import importlib
from types import ModuleType
from typing import Dict

from solid_examples.domain.core.exceptions import ExampleNotFoundError

# Ordered as the SOLID acronym
EXAMPLES: Dict[str, str] = {
    "srp": "Single Responsibility Principle",
    "ocp": "Open/Closed Principle",
    "lsp": "Liskov Substitution Principle",
    "isp": "Interface Segregation Principle",
    "dip": "Dependency Inversion Principle",
}


def load_example(name: str) -> ModuleType:
    """
    Import the module of the named example.

    Args:
        name: Example key such as ``"ocp"``

    Returns:
        The example module

    Raises:
        ExampleNotFoundError: If the name is not a known example
    """
    key = name.lower()
    if key not in EXAMPLES:
        raise ExampleNotFoundError(name, list(EXAMPLES))
    return importlib.import_module(f"{__name__}.{key}")


__all__ = ["EXAMPLES", "load_example"]
