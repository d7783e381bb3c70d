"""Unit tests for settings CLI commands."""

from pathlib import Path

from confsweep.cli.main import app
from confsweep.core.settings import SettingsStore
from typer.testing import CliRunner

runner = CliRunner()


class TestSettingsPath:
    """Tests for confsweep settings path."""

    def test_prints_path_without_creating_it(self, config_home: Path) -> None:
        """path prints the settings file location and creates nothing."""
        result = runner.invoke(app, ["settings", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(config_home / "confsweep" / "config.toml")
        assert not (config_home / "confsweep").exists()


class TestSettingsSetGet:
    """Tests for set, get and unset."""

    def test_set_then_get(self, config_home: Path) -> None:
        """A value written with set is printed by get."""
        set_result = runner.invoke(app, ["settings", "set", "editor", "vim"])
        get_result = runner.invoke(app, ["settings", "get", "editor"])

        assert set_result.exit_code == 0
        assert "Set editor" in set_result.stdout
        assert get_result.exit_code == 0
        assert get_result.stdout.strip() == "vim"

    def test_get_value_with_brackets(self, config_home: Path) -> None:
        """Values are printed literally, not as Rich markup."""
        runner.invoke(app, ["settings", "set", "prompt", "[bold]>"])

        result = runner.invoke(app, ["settings", "get", "prompt"])

        assert result.stdout.strip() == "[bold]>"

    def test_get_missing(self, config_home: Path) -> None:
        """get exits 1 for unknown keys."""
        result = runner.invoke(app, ["settings", "get", "missing"])

        assert result.exit_code == 1
        assert "Setting not found" in result.output

    def test_set_invalid_key(self, config_home: Path) -> None:
        """set rejects invalid keys."""
        result = runner.invoke(app, ["settings", "set", "bad key", "x"])

        assert result.exit_code == 1
        assert "Invalid setting key" in result.output

    def test_set_creates_file(self, config_home: Path) -> None:
        """set writes the settings file at the XDG location."""
        runner.invoke(app, ["settings", "set", "editor", "vim"])

        store = SettingsStore(config_home / "confsweep" / "config.toml")
        assert store.all() == {"editor": "vim"}

    def test_unset(self, config_home: Path) -> None:
        """unset removes an existing key."""
        runner.invoke(app, ["settings", "set", "editor", "vim"])

        result = runner.invoke(app, ["settings", "unset", "editor"])

        assert result.exit_code == 0
        assert "Unset editor" in result.stdout
        assert runner.invoke(app, ["settings", "get", "editor"]).exit_code == 1

    def test_unset_missing(self, config_home: Path) -> None:
        """unset exits 1 for unknown keys."""
        result = runner.invoke(app, ["settings", "unset", "editor"])

        assert result.exit_code == 1
        assert "Setting not found" in result.output


class TestSettingsShow:
    """Tests for confsweep settings show."""

    def test_show_empty(self, config_home: Path) -> None:
        """show reports when nothing is stored."""
        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "No settings stored." in result.stdout

    def test_show_creates_directory(self, config_home: Path) -> None:
        """Opening the store leaves the directory behind even without a file."""
        runner.invoke(app, ["settings", "show"])

        assert (config_home / "confsweep").is_dir()
        assert not (config_home / "confsweep" / "config.toml").exists()

    def test_show_table(self, config_home: Path) -> None:
        """show lists stored keys and values."""
        runner.invoke(app, ["settings", "set", "editor", "vim"])
        runner.invoke(app, ["settings", "set", "shell", "zsh"])

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "Settings" in result.stdout
        assert "editor" in result.stdout
        assert "zsh" in result.stdout

    def test_show_invalid_file(self, config_home: Path) -> None:
        """show exits 1 on an unparseable settings file."""
        path = config_home / "confsweep" / "config.toml"
        path.parent.mkdir()
        path.write_text("= broken")

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_show_value_with_closing_tag(self, config_home: Path) -> None:
        """A value that looks like a closing tag is shown, not parsed."""
        runner.invoke(app, ["settings", "set", "prompt", "a[/]b"])

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "a[/]b" in result.stdout

    def test_show_value_keeps_brackets(self, config_home: Path) -> None:
        """Bracketed text in values is printed literally."""
        runner.invoke(app, ["settings", "set", "prompt", "[bold]x"])

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "[bold]x" in result.stdout

    def test_show_hand_edited_key_with_brackets(self, config_home: Path) -> None:
        """Keys written outside the CLI are printed literally too."""
        path = config_home / "confsweep" / "config.toml"
        path.parent.mkdir()
        path.write_text('"[red]k" = "v"\n')

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "[red]k" in result.stdout
