"""SOLID Examples - Root Package.

This package collects short, self-contained examples of the five SOLID
object-oriented design principles. Each example pairs a design that violates
the principle with one that follows it, and prints the outcome of both so
they can be compared side by side.

Key Components:
    - principles: One module per principle (srp, ocp, lsp, isp, dip)
    - config: Configuration schemas, defaults and loading
    - infrastructure: Logging setup
    - cli: Command-line entry point

Usage:
    >>> python -m solid_examples list
    >>> python -m solid_examples run ocp lsp
    >>> python -m solid_examples.principles.srp
"""

from ._version import __version__

__package_name__ = "solid-examples"
