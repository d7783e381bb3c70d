"""CLI commands for confsweep.

This package contains all subcommand implementations.
"""

from confsweep.cli.commands import hook, settings

__all__ = ["hook", "settings"]
