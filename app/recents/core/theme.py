"""Console colours for recents.

The bundled ``data/theme.toml`` holds the default colours. A ``[colors]``
table in ``~/.config/recents/theme.toml`` may override any of them.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from recents.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _hex_color(value: str) -> str:
    """Accept #RGB and #RRGGBB colours."""
    color = value.strip()
    digits = color[1:]
    valid = color.startswith("#") and len(digits) in (3, 6) and _HEX_DIGITS.issuperset(digits)
    if not valid:
        msg = f"expected #RGB or #RRGGBB, got '{value}'"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, AfterValidator(_hex_color)]


class ThemeColors(BaseModel):
    """Colours of the recents console output."""

    model_config = ConfigDict(extra="forbid")

    # Messages
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Entries table
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    file: HexColor = "#ffffff"
    mime: HexColor = "#0ec1c8"
    timestamp: HexColor = "#b2bec3"

    def to_styles(self) -> dict[str, str]:
        """Map the colours to the style names used in markup and tables."""
        return {
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "info": self.info,
            "entry.header": f"bold {self.header}",
            "entry.border": self.border,
            "entry.file": f"bold {self.file}",
            "entry.mime": self.mime,
            "entry.time": self.timestamp,
        }


def _read_colors(path: Path) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file, empty if unusable."""
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Load the bundled colours with the user's overrides on top.

    User overrides that fail validation are dropped as a whole.

    Returns:
        Validated ThemeColors.
    """
    bundled = _read_colors(Path(str(resources.files("recents.data").joinpath("theme.toml"))))
    user = _read_colors(get_theme_path())

    for layer in ({**bundled, **user}, bundled):
        try:
            return ThemeColors.model_validate(layer)
        except ValidationError as e:
            logger.warning("Invalid theme colours, falling back: %s", e)
    return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme shared by the console instances, built once per process."""
    return Theme(load_theme().to_styles())
