"""Uninstall-time removal of the settings artifact.

Removes the settings file and its directory when, and only when, the
package manager is uninstalling the package. Upgrades run the same
lifecycle hook and must leave the settings untouched.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from confsweep.cleanup.models import CleanupContext, CleanupError, CleanupOutcome, CleanupResult

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]


class ConfigCleanup:
    """Deletes the settings file and directory after user confirmation.

    Filesystem failures never propagate out of :meth:`run`; they are
    reported as a FAILED result naming the directory to remove manually.

    Attributes:
        _context: Invocation context (command tokens and paths).
        _confirm: Callable asked whether to delete an existing settings file.
        _assume_yes: If True, skip the confirmation and delete.
        _dry_run: If True, report what would be done without doing it.
    """

    def __init__(
        self,
        context: CleanupContext,
        *,
        confirm: ConfirmFn | None = None,
        assume_yes: bool = False,
        dry_run: bool = False,
    ) -> None:
        """Initialize the cleanup.

        Args:
            context: Invocation context to act on.
            confirm: Yes/no question for the user. Without one, the answer
                is the default "no" unless ``assume_yes`` is set.
            assume_yes: Treat the confirmation as accepted.
            dry_run: If True, report what would be done without doing it.
        """
        self._context = context
        self._confirm = confirm
        self._assume_yes = assume_yes
        self._dry_run = dry_run

    def run(self) -> CleanupResult:
        """Run the cleanup once.

        Steps:
        1. Command gate: stop unless the invocation is an uninstall
        2. If the settings file exists, ask for confirmation (default no)
        3. Delete the file, then remove the directory
        4. Return a CleanupResult

        Returns:
            CleanupResult describing what happened.
        """
        ctx = self._context

        if not ctx.is_removal:
            logger.debug("Not an uninstall (%s); leaving settings alone", ctx.command_tokens)
            return self._result(CleanupOutcome.SKIPPED)

        try:
            has_file = self._file_exists()
        except CleanupError as e:
            return self._failed(e)

        if has_file and not self._confirmed():
            logger.info("User kept settings file %s", ctx.config_file)
            return self._result(CleanupOutcome.DECLINED)

        outcome = CleanupOutcome.REMOVED if has_file else CleanupOutcome.DIRECTORY_ONLY

        if self._dry_run:
            logger.info("Dry-run: would remove %s", ctx.config_file if has_file else ctx.config_dir)
            return self._result(outcome, dry_run=True)

        file_removed = False
        try:
            if has_file:
                self._remove_file()
                file_removed = True
            self._remove_directory()
        except CleanupError as e:
            return self._failed(e, file_removed=file_removed)

        return self._result(outcome, file_removed=has_file, dir_removed=True)

    def _confirmed(self) -> bool:
        if self._assume_yes:
            return True
        if self._confirm is None:
            return False
        return self._confirm(self._context.config_file)

    def _file_exists(self) -> bool:
        path = self._context.config_file
        try:
            return path.exists() or path.is_symlink()
        except OSError as e:
            raise CleanupError(f"Could not inspect {path}: {e}") from e

    def _remove_file(self) -> None:
        path = self._context.config_file
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CleanupError(f"Could not delete {path}: {e}") from e
        logger.debug("Deleted %s", path)

    def _remove_directory(self) -> None:
        """Remove the settings directory; an absent directory is not an error.

        Only an empty directory is removed. Anything else left inside it
        (for example files written by the user) makes the step fail.
        """
        path = self._context.config_dir
        try:
            path.rmdir()
        except FileNotFoundError:
            logger.debug("Settings directory %s already absent", path)
            return
        except OSError as e:
            raise CleanupError(f"Could not remove {path}: {e}") from e
        logger.debug("Removed directory %s", path)

    def _failed(self, error: CleanupError, *, file_removed: bool = False) -> CleanupResult:
        logger.info("Settings cleanup failed: %s", error)
        return self._result(CleanupOutcome.FAILED, file_removed=file_removed, error=str(error))

    def _result(
        self,
        outcome: CleanupOutcome,
        *,
        file_removed: bool = False,
        dir_removed: bool = False,
        dry_run: bool = False,
        error: str | None = None,
    ) -> CleanupResult:
        return CleanupResult(
            outcome=outcome,
            config_file=self._context.config_file,
            config_dir=self._context.config_dir,
            file_removed=file_removed,
            dir_removed=dir_removed,
            dry_run=dry_run,
            error=error,
        )
