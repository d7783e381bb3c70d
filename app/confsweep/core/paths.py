"""XDG-compliant path management for confsweep.

The settings artifact lives under the XDG configuration directory:

- Directory: ~/.config/<app>/ (or $XDG_CONFIG_HOME/<app>/)
- File: ~/.config/<app>/config.toml

``<app>`` defaults to ``confsweep``. Other tools sharing this storage layout
can be addressed by passing their name explicitly.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "confsweep"

SETTINGS_FILENAME = "config.toml"


def _get_xdg_dir(env_var: str, default_subdir: str, app_name: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").
        app_name: Application directory name.

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / app_name
    return Path.home() / default_subdir / app_name


def get_config_dir(app_name: str = APP_NAME) -> Path:
    """Get the configuration directory path.

    Args:
        app_name: Application directory name.

    Returns:
        Path to ~/.config/<app_name>/ (or XDG_CONFIG_HOME/<app_name>/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config", app_name)


def get_settings_path(app_name: str = APP_NAME) -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/<app_name>/config.toml.
    """
    return get_config_dir(app_name) / SETTINGS_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
