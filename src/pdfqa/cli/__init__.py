# src/pdfqa/cli/__init__.py
"""CLI package for pdfqa.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from pdfqa.cli.app import app, console

__all__ = ["app", "console"]
