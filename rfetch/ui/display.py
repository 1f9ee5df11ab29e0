"""
Terminal rendering for rfetch.

render() turns a Configuration + SystemInfo (+ optional Theme) into the
final text: either one JSON document, or the logo beside the info lines
with an optional header and color bar. display() writes it to stdout.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Callable, Optional

import click

from rfetch.colors import Color, EffectKind
from rfetch.config import ColorMode, Configuration, LogoType, OutputFormat
from rfetch.errors import DisplayError
from rfetch.logo import get_logo
from rfetch.system_info import UNKNOWN, SystemInfo
from rfetch.themes import Theme
from rfetch.ui.width import max_visual_width, visual_width

logger = logging.getLogger(__name__)

SWATCH = "██"
RULE_CHAR = "─"
BAR_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


# ── Color gate ────────────────────────────────────────────────────────────────

def should_use_colors(color_mode, stream=None) -> bool:
    """
    always → True, never → False, auto → whether `stream` (stdout by
    default) is a terminal. Unrecognized modes fail open to True.
    """
    mode = ColorMode.parse(color_mode)
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if isatty else False
    except ValueError:
        # closed stream
        return False


# ── Formatting helpers ────────────────────────────────────────────────────────

_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(n: int) -> str:
    """1024-based size: '512 B', '1.0 KB', '14.9 GB'."""
    size = float(n)
    unit = 0
    while size >= 1024.0 and unit < len(_UNITS) - 1:
        size /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(size)} {_UNITS[0]}"
    return f"{size:.1f} {_UNITS[unit]}"


def _usage(used: int, total: int, percentage: Optional[float]) -> str:
    return f"{format_bytes(used)} / {format_bytes(total)} ({int(percentage or 0)}%)"


def _text(value: str) -> str:
    """Plain string fields are hidden when empty or 'unknown'."""
    return "" if not value or value == UNKNOWN else value


def _memory(info: SystemInfo) -> str:
    mem = info.memory
    return _usage(mem.used, mem.total, mem.percentage) if mem.total > 0 else ""


def _disk(info: SystemInfo) -> str:
    for disk in info.disk:
        if disk.mount_point in ("/", "C:\\"):
            return _usage(disk.used, disk.total, disk.percentage)
    return ""


def _battery(info: SystemInfo) -> str:
    batt = info.battery
    return f"{batt.percentage}% ({batt.status})" if batt is not None else ""


# ── Field table ───────────────────────────────────────────────────────────────

# (info key, default label, config flag, value getter). Order is display order.
_FIELDS: tuple[tuple[str, str, str, Callable[[SystemInfo], str]], ...] = (
    ("os", "OS", "show_os", lambda i: _text(i.os)),
    ("kernel", "Kernel", "show_kernel", lambda i: _text(i.kernel)),
    ("uptime", "Uptime", "show_uptime", lambda i: _text(i.uptime)),
    ("packages", "Packages", "show_packages", lambda i: str(i.packages) if i.packages > 0 else ""),
    ("shell", "Shell", "show_shell", lambda i: _text(i.shell)),
    ("resolution", "Resolution", "show_resolution", lambda i: _text(i.resolution)),
    ("de", "DE", "show_de", lambda i: _text(i.desktop_environment)),
    ("wm", "WM", "show_wm", lambda i: _text(i.window_manager)),
    ("theme", "Theme", "show_theme", lambda i: _text(i.theme)),
    ("icons", "Icons", "show_icons", lambda i: _text(i.icons)),
    ("font", "Font", "show_font", lambda i: _text(i.font)),
    ("cursor", "Cursor", "show_cursor", lambda i: _text(i.cursor)),
    ("terminal", "Terminal", "show_terminal", lambda i: _text(i.terminal)),
    ("cpu", "CPU", "show_cpu", lambda i: _text(i.cpu)),
    ("gpu", "GPU", "show_gpu", lambda i: _text(i.gpu)),
    ("memory", "Memory", "show_memory", _memory),
    ("disk", "Disk", "show_disk", _disk),
    ("battery", "Battery", "show_battery", _battery),
    ("locale", "Locale", "show_locale", lambda i: _text(i.locale)),
    ("local_ip", "Local IP", "show_local_ip", lambda i: _text(i.local_ip)),
    ("public_ip", "Public IP", "show_public_ip", lambda i: _text(i.public_ip)),
    ("users", "Users", "show_users", lambda i: ", ".join(i.users)),
    ("date", "Date", "show_date", lambda i: i.date),
)


# ── Building blocks ───────────────────────────────────────────────────────────

def get_logo_lines(config: Configuration, os_name: str, theme: Optional[Theme] = None) -> list[str]:
    """Theme art first (when it has art for the requested size), then the catalog."""
    logo_type = LogoType.parse(config.display.logo_type)
    if logo_type is LogoType.NONE:
        return []

    custom = theme.custom_ascii if theme is not None else None
    if custom is not None:
        if logo_type is LogoType.SMALL and custom.small_logo:
            return list(custom.small_logo)
        if logo_type in (LogoType.ASCII, LogoType.AUTO) and custom.logo:
            return list(custom.logo)

    return get_logo(os_name, logo_type)


def _format_line(config: Configuration, label: str, value: str, use_colors: bool) -> str:
    separator = config.display.separator
    if not use_colors:
        return f"{label}{separator}{value}"
    colors = config.colors
    return (
        colors.key.paint(label, EffectKind.BOLD)
        + colors.separator.paint(separator)
        + colors.value.paint(value)
    )


def build_info_lines(
    config: Configuration,
    info: SystemInfo,
    theme: Optional[Theme] = None,
    use_colors: bool = False,
) -> list[str]:
    """One 'label<separator>value' line per enabled, non-empty field."""
    labels = theme.custom_labels if theme is not None else {}
    lines = []
    for key, default_label, flag, getter in _FIELDS:
        if not getattr(config.info, flag):
            continue
        value = getter(info)
        if not value:
            continue
        label = labels.get(key) or default_label
        lines.append(_format_line(config, label, value, use_colors))
    return lines


def _header(config: Configuration, info: SystemInfo, use_colors: bool) -> list[str]:
    title = f"{info.user}@{info.hostname}"
    rule = RULE_CHAR * len(title)
    if use_colors:
        color = config.colors.title
        return [color.paint(title, EffectKind.BOLD), color.paint(rule), ""]
    return [title, rule, ""]


def _color_bar(config: Configuration, info: SystemInfo, logo_width: int) -> list[str]:
    names = BAR_COLORS[: len(info.colors)]
    indent = " " * (logo_width + config.display.padding)
    normal = "".join(Color.named(name).paint(SWATCH) for name in names)
    bright = "".join(Color.named(f"bright_{name}").paint(SWATCH) for name in names)
    return [indent + normal, indent + bright]


# ── Renderers ─────────────────────────────────────────────────────────────────

def render_json(info: SystemInfo) -> str:
    try:
        return json.dumps(info.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise DisplayError(f"Failed to serialize system information: {e}") from e


def render_normal(
    config: Configuration,
    info: SystemInfo,
    theme: Optional[Theme] = None,
    use_colors: bool = False,
) -> str:
    logo_lines = get_logo_lines(config, info.os, theme)
    info_lines = build_info_lines(config, info, theme, use_colors)

    logo_width = max_visual_width(logo_lines)
    rows = max(len(logo_lines), len(info_lines))
    gap = " " * config.display.padding
    logo_color = config.colors.logo

    out: list[str] = []
    if not config.display.minimal:
        out.extend(_header(config, info, use_colors))

    for i in range(rows):
        logo_line = logo_lines[i] if i < len(logo_lines) else ""
        info_line = info_lines[i] if i < len(info_lines) else ""
        pad = " " * max(0, logo_width - visual_width(logo_line))
        painted = logo_color.paint(logo_line) if use_colors else logo_line
        out.append(f"{painted}{pad}{gap}{info_line}")

    if not config.display.minimal:
        out.append("")
        if use_colors:
            out.extend(_color_bar(config, info, logo_width))

    logger.debug("rendered %d logo rows, %d info rows", len(logo_lines), len(info_lines))
    return "\n".join(out)


def render(
    config: Configuration,
    info: SystemInfo,
    theme: Optional[Theme] = None,
    use_colors: Optional[bool] = None,
) -> str:
    """Full output text for one run. JSON mode ignores logo, theme and colors."""
    if OutputFormat.parse(config.display.output_format) is OutputFormat.JSON:
        return render_json(info)
    if use_colors is None:
        use_colors = should_use_colors(config.display.color_mode)
    return render_normal(config, info, theme, use_colors)


def display(config: Configuration, info: SystemInfo, theme: Optional[Theme] = None) -> None:
    click.echo(render(config, info, theme), color=True)
