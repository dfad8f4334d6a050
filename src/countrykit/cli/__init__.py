"""Command-line interface."""

from countrykit.cli.app import app, main

__all__ = ["app", "main"]
