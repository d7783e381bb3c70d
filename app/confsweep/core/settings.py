"""Local settings storage.

Settings are persisted as a flat TOML table of string keys and values.
Creating a ``SettingsStore`` creates its parent directory, so the directory
can exist on disk before any setting has ever been written.
"""

import logging
import os
import re
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w

from confsweep.core.paths import APP_NAME, ensure_dir, get_settings_path

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class SettingsError(Exception):
    """Base exception for settings storage errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


class SettingsStore:
    """TOML-backed key/value settings file.

    Attributes:
        _path: Absolute path of the settings file.
    """

    def __init__(self, path: Path | None = None, *, create_dir: bool = True) -> None:
        """Initialize the store.

        Args:
            path: Settings file path. Defaults to the confsweep settings path.
            create_dir: Create the parent directory if it does not exist.

        Raises:
            SettingsError: If the directory cannot be created.
        """
        self._path = path or get_settings_path()
        if create_dir:
            try:
                ensure_dir(self._path.parent, "settings")
            except RuntimeError as e:
                raise SettingsError(str(e)) from e

    @classmethod
    def for_app(cls, app_name: str = APP_NAME, *, create_dir: bool = True) -> "SettingsStore":
        """Create a store at the default location for an application name."""
        return cls(get_settings_path(app_name), create_dir=create_dir)

    @property
    def path(self) -> Path:
        """Path of the settings file."""
        return self._path

    @property
    def directory(self) -> Path:
        """Directory containing the settings file."""
        return self._path.parent

    def exists(self) -> bool:
        return self._path.is_file()

    def all(self) -> dict[str, str]:
        """Load every stored setting.

        Returns:
            Mapping of key to value. Empty if the file does not exist.

        Raises:
            SettingsParseError: If the file is not valid TOML.
            SettingsError: If the file cannot be read.
        """
        try:
            with open(self._path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return {}
        except tomllib.TOMLDecodeError as e:
            raise SettingsParseError(f"Invalid TOML syntax in {self._path}: {e}") from e
        except OSError as e:
            raise SettingsError(f"Failed to read settings: {e}") from e

        # Nested tables are not part of the format; keep scalar values only
        return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}

    def get(self, key: str) -> str | None:
        """Return a single setting, or None if unset."""
        return self.all().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a setting.

        Raises:
            ValueError: If the key contains unsupported characters.
            SettingsError: If the file cannot be read or written.
        """
        _validate_key(key)
        data = self.all()
        data[key] = value
        self._write(data)
        logger.debug("Set %s in %s", key, self._path)

    def unset(self, key: str) -> bool:
        """Remove a setting.

        Returns:
            True if the key was present and removed, False otherwise.
        """
        data = self.all()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        logger.debug("Unset %s in %s", key, self._path)
        return True

    def _write(self, data: dict[str, str]) -> None:
        """Write settings atomically via a temporary file and os.replace()."""
        try:
            ensure_dir(self._path.parent, "settings")
        except RuntimeError as e:
            raise SettingsError(str(e)) from e

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="wb",
                dir=self._path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                tomli_w.dump(dict(sorted(data.items())), f)
            os.replace(str(tmp_path), str(self._path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise SettingsError(f"Failed to write settings: {e}") from e


def _validate_key(key: str) -> None:
    if not _KEY_PATTERN.match(key):
        msg = f"Invalid setting key '{key}': use letters, digits, '_', '-' or '.'"
        raise ValueError(msg)
