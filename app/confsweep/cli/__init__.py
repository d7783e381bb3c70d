"""CLI package for confsweep.

This package contains the Typer application and all subcommands.
"""

from confsweep.cli.main import app

__all__ = ["app"]
