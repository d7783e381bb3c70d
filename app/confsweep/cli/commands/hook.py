"""Package-manager lifecycle hook commands.

Wire into a package manifest as::

    "scripts": {"preuninstall": "confsweep hook preuninstall"}

The hook fires on both uninstall and upgrade; settings are only offered
for removal on an explicit uninstall. The command always exits 0 so the
package manager's lifecycle is never blocked.
"""

from pathlib import Path
from typing import Annotated

import typer

from confsweep.cleanup.models import CleanupContext, CleanupOutcome, CleanupResult
from confsweep.cleanup.operator import ConfigCleanup
from confsweep.core.paths import APP_NAME
from confsweep.utils.formatting import print_info, print_success, print_warning

app = typer.Typer(
    help="Package-manager lifecycle hooks.",
    no_args_is_help=True,
)


@app.callback()
def hook() -> None:
    """Package-manager lifecycle hooks."""


def confirm_removal(path: Path) -> bool:
    """Ask whether to delete the settings file, defaulting to no.

    An unanswerable prompt (closed stdin, Ctrl-C) counts as no.
    """
    try:
        return typer.confirm(f"Remove settings file {path}?", default=False)
    except typer.Abort:
        return False


@app.command()
def preuninstall(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Remove settings without asking."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    app_name: Annotated[
        str,
        typer.Option("--app-name", help="Application whose settings are removed."),
    ] = APP_NAME,
    settings_file: Annotated[
        Path | None,
        typer.Option(
            "--settings-file",
            help="Explicit settings file (overrides --app-name).",
        ),
    ] = None,
) -> None:
    """Remove stored settings when the package is being uninstalled."""
    context = CleanupContext.from_environment(app_name=app_name, config_file=settings_file)
    cleanup = ConfigCleanup(context, confirm=confirm_removal, assume_yes=yes, dry_run=dry_run)
    _report(cleanup.run())


def _report(result: CleanupResult) -> None:
    """Print the user-facing outcome of a cleanup run."""
    if result.dry_run:
        removing_file = result.outcome == CleanupOutcome.REMOVED
        target = result.config_file if removing_file else result.config_dir
        print_info(f"[DRY-RUN] Would remove {target}")
        return

    if result.outcome == CleanupOutcome.DECLINED:
        print_info(f"Settings kept at {result.config_file}")
    elif result.outcome == CleanupOutcome.REMOVED:
        print_success("Settings removed successfully.")
    elif result.outcome == CleanupOutcome.FAILED:
        print_warning(
            f"Could not remove settings ({result.error}). "
            f"Please delete {result.config_dir} manually."
        )
