"""Console color theme.

Colors come only from the bundled ``data/theme.toml``. Nothing is read from
or written to the settings directory, so uninstall cleanup finds it empty
once the settings file is gone.
"""

import logging
import tomllib
from functools import cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by the CLI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    path: str = "#69B9A1"
    key: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        if not isinstance(v, str):
            msg = "color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color.removeprefix("#")
        if color == digits or len(digits) not in (3, 6):
            msg = f"'{color}' is not a #RGB or #RRGGBB color"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"'{color}' is not a #RGB or #RRGGBB color"
            raise ValueError(msg) from None
        return color


def load_bundled_colors() -> ThemeColors:
    """Read the bundled theme, falling back to built-in defaults.

    A missing or broken bundle means a damaged installation; the CLI
    still has to print, so the defaults are used and the problem logged.
    """
    bundled = resources.files("confsweep.data").joinpath("theme.toml")
    try:
        data = tomllib.loads(bundled.read_text(encoding="utf-8"))
        return ThemeColors.model_validate(data.get("colors", {}))
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("Bundled theme unusable, using defaults: %s", e)
        return ThemeColors()


def build_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors to the Rich style names used by the CLI."""
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["path"] = f"bold {colors.path}"
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, built once per process."""
    return build_rich_theme(load_bundled_colors())
