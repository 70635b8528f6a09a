"""
CLI package for otml.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from otml.cli.app import app, main

__all__ = [
    "app",
    "main",
]
