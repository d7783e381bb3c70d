"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def config_home(tmp_path: Path) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg-config"
    home.mkdir()
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(home)}):
        yield home


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """An existing settings file inside its own directory."""
    path = tmp_path / "confsweep" / "config.toml"
    path.parent.mkdir()
    path.write_text('editor = "vim"\n')
    return path


@pytest.fixture
def uninstall_argv() -> str:
    """npm_config_argv recorded for ``npm uninstall -g confsweep``."""
    return json.dumps(
        {
            "remain": ["confsweep"],
            "cooked": ["uninstall", "-g", "confsweep"],
            "original": ["uninstall", "-g", "confsweep"],
        }
    )


@pytest.fixture
def update_argv() -> str:
    """npm_config_argv recorded for ``npm update -g confsweep``."""
    return json.dumps(
        {
            "remain": ["confsweep"],
            "cooked": ["update", "-g", "confsweep"],
            "original": ["update", "-g", "confsweep"],
        }
    )
