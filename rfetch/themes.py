"""
Theme model and the built-in theme catalog.

A Theme bundles colors for the semantic roles, display settings, layout
hints, optional custom ASCII art and effect toggles. Built-in themes are
constructed once at import time; load_builtin() hands out copies.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from rfetch.colors import Color


# ── Info keys ─────────────────────────────────────────────────────────────────

# Every field the renderer knows about, in display order.
INFO_KEYS: tuple[str, ...] = (
    "os", "kernel", "uptime", "packages", "shell", "resolution",
    "de", "wm", "theme", "icons", "font", "cursor", "terminal",
    "cpu", "gpu", "memory", "disk", "battery",
    "locale", "local_ip", "public_ip", "users", "date",
)


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass
class ThemeColors:
    title: Color
    subtitle: Color
    key: Color
    value: Color
    separator: Color
    logo: Color
    accent: Optional[Color] = None
    background: Optional[Color] = None
    border: Optional[Color] = None
    highlight: Optional[Color] = None
    error: Optional[Color] = None
    warning: Optional[Color] = None
    success: Optional[Color] = None
    custom: dict[str, Color] = field(default_factory=dict)


MANDATORY_ROLES: tuple[str, ...] = ("title", "subtitle", "key", "value", "separator", "logo")
OPTIONAL_ROLES: tuple[str, ...] = (
    "accent", "background", "border", "highlight", "error", "warning", "success",
)


@dataclass
class ThemeDisplay:
    logo_type: str = "auto"
    separator: str = ": "
    padding: int = 2
    show_borders: bool = False
    show_color_bar: bool = True
    color_bar_style: str = "blocks"
    alignment: str = "left"
    max_width: Optional[int] = None
    line_spacing: float = 1.0
    indent: int = 0
    show_icons: bool = False
    icon_style: str = "unicode"
    layout: str = "horizontal"
    border_style: Optional[str] = None
    corner_style: Optional[str] = None


@dataclass
class ThemeSection:
    name: str
    items: list[str] = field(default_factory=list)
    title: Optional[str] = None
    style: Optional[str] = None
    visible: Optional[bool] = None


@dataclass
class CustomAscii:
    logo: list[str] = field(default_factory=list)
    small_logo: list[str] = field(default_factory=list)
    decorations: dict[str, str] = field(default_factory=dict)
    frames: Optional[list[list[str]]] = None
    frame_delay: Optional[float] = None


@dataclass
class ThemeEffects:
    transitions: bool = False
    animations: bool = False
    shadows: bool = False
    glow: bool = False
    glow_intensity: float = 0.0
    particle_effects: bool = False
    sound_effects: bool = False
    terminal_title: Optional[str] = None
    cursor_style: Optional[str] = None
    typing_effect: Optional[bool] = None
    fade_in: Optional[bool] = None
    transparency: Optional[float] = None


@dataclass
class Theme:
    name: str
    description: str
    version: str
    colors: ThemeColors
    display: ThemeDisplay = field(default_factory=ThemeDisplay)
    author: Optional[str] = None
    license: Optional[str] = None
    tags: Optional[list[str]] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    info_order: list[str] = field(default_factory=lambda: list(INFO_KEYS))
    custom_labels: dict[str, str] = field(default_factory=dict)
    sections: Optional[list[ThemeSection]] = None
    columns: Optional[int] = None
    responsive: Optional[bool] = None
    custom_ascii: Optional[CustomAscii] = None
    effects: ThemeEffects = field(default_factory=ThemeEffects)
    custom: Optional[dict[str, Any]] = None


# ── Built-in themes ───────────────────────────────────────────────────────────

RFETCH_BANNER = [
    "██████╗ ███████╗███████╗████████╗ ██████╗██╗  ██╗",
    "██╔══██╗██╔════╝██╔════╝╚══██╔══╝██╔════╝██║  ██║",
    "██████╔╝█████╗  █████╗     ██║   ██║     ███████║",
    "██╔══██╗██╔══╝  ██╔══╝     ██║   ██║     ██╔══██║",
    "██║  ██║██║     ███████╗   ██║   ╚██████╗██║  ██║",
    "╚═╝  ╚═╝╚═╝     ╚══════╝   ╚═╝    ╚═════╝╚═╝  ╚═╝",
]

_RETRO_BANNER = [
    "┌─────────────────────────────────────┐",
    "│  ██████  ███████ ███████ ████████   │",
    "│  ██   ██ ██      ██         ██      │",
    "│  ██████  █████   █████      ██      │",
    "│  ██   ██ ██      ██         ██      │",
    "│  ██   ██ ██      ███████    ██      │",
    "└─────────────────────────────────────┘",
]


def _default_theme() -> Theme:
    return Theme(
        name="Default",
        description="Default rFetch theme with balanced colors",
        author="rFetch Team",
        version="1.0.0",
        colors=ThemeColors(
            title=Color.named("cyan").bold(),
            subtitle=Color.named("blue"),
            key=Color.named("yellow"),
            value=Color.named("white"),
            separator=Color.named("white"),
            logo=Color.named("cyan"),
            accent=Color.named("magenta"),
        ),
        display=ThemeDisplay(logo_type="auto", separator=": ", padding=2),
    )


def _neon_theme() -> Theme:
    return Theme(
        name="Neon",
        description="Bright neon theme with glowing effects and animations",
        author="rFetch Team",
        version="1.0.0",
        colors=ThemeColors(
            title=Color.named("bright_cyan").bold().glow().pulse(2.0),
            subtitle=Color.named("bright_magenta").italic().glow(),
            key=Color.named("bright_yellow").bold().glow(),
            value=Color.named("bright_white").glow(),
            separator=Color.named("bright_blue").glow(),
            logo=Color.named("bright_cyan").bold().glow().rainbow(3.0),
            accent=Color.named("bright_magenta").glow().pulse(1.5),
            background=Color.named("black").with_rgb(5, 5, 15),
        ),
        display=ThemeDisplay(
            logo_type="ascii",
            separator=" ▶ ",
            padding=3,
            border_style="neon",
        ),
        custom_ascii=CustomAscii(logo=list(RFETCH_BANNER)),
        effects=ThemeEffects(
            transitions=True,
            animations=True,
            glow=True,
            glow_intensity=0.8,
            shadows=True,
            transparency=0.95,
        ),
    )


def _minimal_theme() -> Theme:
    return Theme(
        name="Minimal",
        description="Clean and minimal theme with essential information only",
        author="rFetch Team",
        version="1.0.0",
        colors=ThemeColors(
            title=Color.named("white").bold(),
            subtitle=Color.named("bright_black"),
            key=Color.named("bright_black"),
            value=Color.named("white"),
            separator=Color.named("bright_black"),
            logo=Color.named("white"),
        ),
        display=ThemeDisplay(
            logo_type="small",
            separator=" ",
            padding=1,
            layout="vertical",
        ),
    )


def _retro_theme() -> Theme:
    return Theme(
        name="Retro",
        description="Vintage terminal theme with classic green colors",
        author="rFetch Team",
        version="1.0.0",
        colors=ThemeColors(
            title=Color.named("bright_green").bold(),
            subtitle=Color.named("green"),
            key=Color.named("green"),
            value=Color.named("bright_green"),
            separator=Color.named("green"),
            logo=Color.named("bright_green").bold(),
            accent=Color.named("yellow"),
            background=Color.named("black"),
        ),
        display=ThemeDisplay(
            logo_type="ascii",
            separator=": ",
            padding=2,
            border_style="classic",
        ),
        custom_ascii=CustomAscii(logo=list(_RETRO_BANNER)),
    )


# Ordered: list_builtin() reports names in this order
_BUILTIN_THEMES: dict[str, Theme] = {
    "default": _default_theme(),
    "neon": _neon_theme(),
    "minimal": _minimal_theme(),
    "retro": _retro_theme(),
}


# ── Public API ────────────────────────────────────────────────────────────────

def load_builtin(name: str) -> Optional[Theme]:
    """Return a copy of the built-in theme called `name`, or None."""
    theme = _BUILTIN_THEMES.get(name.strip().lower())
    return copy.deepcopy(theme) if theme is not None else None


def list_builtin() -> list[str]:
    """Names of all built-in themes, in catalog order."""
    return list(_BUILTIN_THEMES)
