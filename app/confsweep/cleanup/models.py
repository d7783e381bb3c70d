"""Cleanup domain models.

Defines the per-invocation context the uninstall cleanup runs against and
the result it reports back to the CLI.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from confsweep.core.paths import APP_NAME, get_settings_path
from confsweep.hooks.invocation import InvocationError, read_command_tokens

logger = logging.getLogger(__name__)

# Token that marks an explicit removal, as opposed to an update or reinstall
REMOVAL_TOKEN = "uninstall"


class CleanupError(Exception):
    """Raised when a step of the settings cleanup fails."""


class CleanupOutcome(str, Enum):
    """Final state of a cleanup run.

    Attributes:
        SKIPPED: The invocation was not a removal; nothing was touched.
        DECLINED: The user kept the settings file.
        REMOVED: The settings file and its directory were removed.
        DIRECTORY_ONLY: No settings file existed; only the directory step ran.
        FAILED: A filesystem step failed; manual removal is required.
    """

    SKIPPED = "skipped"
    DECLINED = "declined"
    REMOVED = "removed"
    DIRECTORY_ONLY = "directory_only"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CleanupContext:
    """Inputs for a single cleanup run.

    Attributes:
        command_tokens: Command tokens recorded by the host package manager.
        config_file: Settings file to remove.
        config_dir: Directory containing ``config_file``.
    """

    command_tokens: tuple[str, ...]
    config_file: Path
    config_dir: Path

    def __post_init__(self) -> None:
        """Validate that config_dir is the parent of config_file."""
        if self.config_file.parent != self.config_dir:
            msg = f"{self.config_dir} is not the parent directory of {self.config_file}"
            raise ValueError(msg)

    @classmethod
    def for_file(cls, command_tokens: tuple[str, ...], config_file: Path) -> "CleanupContext":
        """Build a context whose directory is derived from the settings file."""
        return cls(
            command_tokens=tuple(command_tokens),
            config_file=config_file,
            config_dir=config_file.parent,
        )

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        app_name: str = APP_NAME,
        config_file: Path | None = None,
    ) -> "CleanupContext":
        """Build a context from the process environment.

        A malformed recorded invocation is logged and treated as an empty
        token list so that the package manager is never blocked.

        Args:
            environ: Environment to read. Defaults to ``os.environ``.
            app_name: Application whose settings are cleaned up.
            config_file: Explicit settings file, overriding ``app_name``.

        Returns:
            CleanupContext for this invocation.
        """
        try:
            tokens = read_command_tokens(environ)
        except InvocationError as e:
            logger.warning("Ignoring unreadable package-manager invocation: %s", e)
            tokens = ()

        return cls.for_file(tokens, config_file or get_settings_path(app_name))

    @property
    def is_removal(self) -> bool:
        """True if the recorded command explicitly removes the package."""
        return REMOVAL_TOKEN in self.command_tokens


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Result of a cleanup run.

    Attributes:
        outcome: Final state reached.
        config_file: Settings file the run targeted.
        config_dir: Settings directory the run targeted.
        file_removed: Whether the settings file was deleted.
        dir_removed: Whether the settings directory is gone afterwards.
        dry_run: Whether this was a dry-run (no actual deletion).
        error: Error message if the run failed, None otherwise.
    """

    outcome: CleanupOutcome
    config_file: Path
    config_dir: Path
    file_removed: bool = False
    dir_removed: bool = False
    dry_run: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.outcome != CleanupOutcome.FAILED
