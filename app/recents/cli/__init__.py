"""CLI package for recents.

This package contains the Typer application.
"""

from recents.cli.main import app

__all__ = ["app"]
