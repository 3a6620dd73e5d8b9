"""Command line interface (Typer + Rich)."""

from bytediff.interface.cli.app import app, main

__all__ = ["app", "main"]
