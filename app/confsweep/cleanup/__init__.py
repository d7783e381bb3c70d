"""Uninstall cleanup of the settings artifact.

This module exports the cleanup context, result models and the
ConfigCleanup operator.
"""

from confsweep.cleanup.models import (
    REMOVAL_TOKEN,
    CleanupContext,
    CleanupError,
    CleanupOutcome,
    CleanupResult,
)
from confsweep.cleanup.operator import ConfigCleanup

__all__ = [
    "REMOVAL_TOKEN",
    "CleanupContext",
    "CleanupError",
    "CleanupOutcome",
    "CleanupResult",
    "ConfigCleanup",
]
