"""
Styles for rfetch's own messages (errors, warnings, theme listings).

The fetch output itself is colored from the resolved Configuration, not
from here. These are only for the CLI chrome written to stderr.
"""

from rich.theme import Theme


# ── Brand ─────────────────────────────────────────────────────────────────────

from rfetch import __version__

APP_NAME = "rfetch"
APP_VERSION = __version__


# ── Color palette ─────────────────────────────────────────────────────────────

COLOR_ERROR   = "red"
COLOR_WARNING = "yellow"
COLOR_BRAND   = "cyan"
COLOR_DIM     = "bright_black"


# ── Rich Theme ────────────────────────────────────────────────────────────────

RFETCH_THEME = Theme(
    {
        "error":      f"{COLOR_ERROR} bold",
        "warning":    COLOR_WARNING,
        "brand":      f"{COLOR_BRAND} bold",
        "theme_name": f"{COLOR_BRAND} bold",
        "dim":        COLOR_DIM,
    }
)
