"""Package-manager lifecycle hook support.

This module exports helpers for reading how the host package manager
was invoked when it runs a lifecycle script.
"""

from confsweep.hooks.invocation import (
    NPM_ARGV_ENV,
    NPM_COMMAND_ENV,
    InvocationError,
    RecordedArgv,
    parse_recorded_argv,
    read_command_tokens,
)

__all__ = [
    "NPM_ARGV_ENV",
    "NPM_COMMAND_ENV",
    "InvocationError",
    "RecordedArgv",
    "parse_recorded_argv",
    "read_command_tokens",
]
