"""Settings commands.

Read and write the local settings file that the preuninstall hook
cleans up.
"""

from typing import Annotated

import typer
from rich.markup import escape

from confsweep.core.settings import SettingsError, SettingsStore
from confsweep.utils.formatting import (
    console,
    create_settings_table,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Manage stored settings.",
    no_args_is_help=True,
)

KeyArg = Annotated[str, typer.Argument(help="Setting key.")]


def _open_store() -> SettingsStore:
    """Open the default settings store or exit with an error."""
    try:
        return SettingsStore()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def path() -> None:
    """Print the settings file path."""
    console.print(str(SettingsStore(create_dir=False).path), soft_wrap=True)


@app.command()
def show() -> None:
    """Show all stored settings."""
    store = _open_store()
    try:
        values = store.all()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not values:
        print_info("No settings stored.")
        return

    table = create_settings_table()
    for key, value in sorted(values.items()):
        table.add_row(escape(key), escape(value))
    console.print(table)


@app.command()
def get(key: KeyArg) -> None:
    """Print a single setting."""
    store = _open_store()
    try:
        value = store.get(key)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if value is None:
        print_error(f"Setting not found: {key}")
        raise typer.Exit(code=1)
    console.print(value, soft_wrap=True, markup=False)


@app.command("set")
def set_(
    key: KeyArg,
    value: Annotated[str, typer.Argument(help="Setting value.")],
) -> None:
    """Store a setting."""
    store = _open_store()
    try:
        store.set(key, value)
    except (SettingsError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Set {key}")


@app.command()
def unset(key: KeyArg) -> None:
    """Remove a setting."""
    store = _open_store()
    try:
        removed = store.unset(key)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not removed:
        print_error(f"Setting not found: {key}")
        raise typer.Exit(code=1)
    print_success(f"Unset {key}")
