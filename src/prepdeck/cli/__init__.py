# src/prepdeck/cli/__init__.py
"""CLI package for prepdeck.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from prepdeck.cli.app import app, console

__all__ = ["app", "console"]
