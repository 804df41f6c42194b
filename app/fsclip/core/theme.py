"""Colors of fsclip terminal output.

Every style has a built-in color. Users can override any subset of them
in ~/.config/fsclip/theme.toml:

    [colors]
    marked = "#ff8800"
"""

import logging
import string
import tomllib
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from fsclip.core.paths import get_theme_path

logger = logging.getLogger(__name__)

# Rich style name -> (color field, bold)
_STYLES: dict[str, tuple[str, bool]] = {
    "text": ("text", False),
    "muted": ("muted", False),
    "dim": ("muted", False),
    "header": ("header", False),
    "bold_header": ("header", True),
    "border": ("border", False),
    "success": ("success", False),
    "warning": ("warning", False),
    "error": ("error", True),
    "info": ("info", False),
    "added": ("added", False),
    "marked": ("marked", True),
}


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by the Rich styles."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    # Right-hand side of "old --> new" rename diffs
    added: str = "#c1ff62"
    # Clipboard entries
    marked: str = "#faf870"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Reject anything that is not a #RGB or #RRGGBB string."""
        name = info.field_name
        if not isinstance(v, str):
            msg = f"{name}: color must be a string"
            raise ValueError(msg)

        color = v.strip()
        digits = color.removeprefix("#")
        if digits == color:
            msg = f"{name}: color must start with '#'"
            raise ValueError(msg)
        if len(digits) not in (3, 6):
            msg = f"{name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if not all(ch in string.hexdigits for ch in digits):
            msg = f"{name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Returns:
        String entries of the table, or None if the file is missing,
        unreadable or malformed.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load the theme colors, applying the user's overrides.

    Args:
        path: Theme file. Defaults to ~/.config/fsclip/theme.toml.

    Returns:
        Colors with overrides applied. Invalid overrides are logged and
        the built-in colors are used instead.
    """
    overrides = _load_toml_colors(path or get_theme_path())
    if not overrides:
        return ThemeColors()

    try:
        return ThemeColors(**overrides)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for ``colors`` (loaded from disk if omitted)."""
    colors = colors or load_theme()
    styles: dict[str, str] = {}
    for style, (field, bold) in _STYLES.items():
        color = getattr(colors, field)
        styles[style] = f"bold {color}" if bold else color
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme shared by all consoles, loaded once per process."""
    return get_rich_theme()
