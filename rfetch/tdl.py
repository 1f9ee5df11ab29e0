"""
Theme Definition Language (TDL) — user-authored theme documents.

A TDL document is a mapping with meta / colors / display / layout /
effects / ascii / custom sections, written as JSON, TOML or YAML.
This module sniffs the format, parses it, converts it field-for-field
into a Theme, converts a Theme back into a document, generates starter
templates, and validates raw documents.

Conversion is lenient (unknown effect names are dropped, a malformed hex
code is ignored); validate() is where such problems are reported.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

import tomli_w
import yaml

from rfetch.colors import Animation, AnimationKind, Color, is_valid_channel, is_valid_hex
from rfetch.errors import FileAccessError, ThemeParseError
from rfetch.themes import (
    MANDATORY_ROLES,
    OPTIONAL_ROLES,
    RFETCH_BANNER,
    CustomAscii,
    Theme,
    ThemeColors,
    ThemeDisplay,
    ThemeEffects,
    ThemeSection,
)

logger = logging.getLogger(__name__)

FORMATS: tuple[str, ...] = ("json", "toml", "yaml")

_HINT_ALIASES: dict[str, str] = {
    "json": "json",
    "toml": "toml",
    "yaml": "yaml",
    "yml": "yaml",
}


# ── Format detection & parsing ────────────────────────────────────────────────

def detect_format(text: str, hint: Optional[str] = None) -> str:
    """
    Decide which serialization `text` uses.

    An explicit hint wins. Otherwise: leading '{' → json, a [meta] section
    or a `name =` assignment → toml, anything else → yaml.
    """
    if hint:
        fmt = _HINT_ALIASES.get(hint.strip().lower().lstrip("."))
        if fmt:
            return fmt
    if text.lstrip().startswith("{"):
        return "json"
    if "[meta]" in text or "name =" in text:
        return "toml"
    return "yaml"


def parse_document(text: str, hint: Optional[str] = None) -> dict[str, Any]:
    """Parse `text` into a raw TDL mapping. Raises ThemeParseError."""
    fmt = detect_format(text, hint)
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "toml":
            data = tomllib.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ThemeParseError(f"Invalid {fmt.upper()} theme document: {e}") from e

    if not isinstance(data, dict):
        raise ThemeParseError(f"Theme document must be a mapping, got {type(data).__name__}")
    return data


def parse_external(text: str, hint: Optional[str] = None) -> Theme:
    """Parse a JSON / TOML / YAML theme document into a Theme."""
    return to_theme(parse_document(text, hint))


def parse_file(path: str | Path) -> Theme:
    """Read and parse a theme file; the suffix is used as the format hint."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read theme file {path}: {e}") from e
    logger.debug("parsing theme file %s", path)
    return parse_external(text, hint=path.suffix or None)


# ── Document → Theme ──────────────────────────────────────────────────────────

def _section(doc: dict, name: str, required: bool = False) -> dict[str, Any]:
    value = doc.get(name)
    if value is None:
        if required:
            raise ThemeParseError(f"Missing required section '{name}'")
        return {}
    if not isinstance(value, dict):
        raise ThemeParseError(f"Section '{name}' must be a mapping")
    return value


def _required_str(section: dict, section_name: str, key: str) -> str:
    value = section.get(key)
    if not isinstance(value, str):
        raise ThemeParseError(f"Missing required field '{section_name}.{key}'")
    return value


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ThemeParseError(f"'{where}' must be a mapping")
    return value


def _scalar_str(value: Any, where: str) -> str:
    if isinstance(value, (dict, list)):
        raise ThemeParseError(f"'{where}' must be text, got {type(value).__name__}")
    return str(value)


def _text(value: Any, where: str) -> Optional[str]:
    return None if value is None else _scalar_str(value, where)


def _lines(value: Any, where: str) -> list[str]:
    """ASCII art: a list of lines, or one block string split on newlines."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.splitlines()
    if not isinstance(value, list):
        raise ThemeParseError(f"'{where}' must be a list of lines")
    return [_scalar_str(line, where) for line in value]


def _names(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ThemeParseError(f"'{where}' must be a list")
    return [_scalar_str(item, where) for item in value]


def _labels(value: Any, where: str) -> dict[str, str]:
    return {str(k): _scalar_str(v, f"{where}.{k}") for k, v in _mapping(value, where).items()}


def _typed(value: Any, kind: type, where: str) -> Any:
    """Check a scalar against bool / int / float / str. None passes through."""
    if value is None:
        return None
    if kind is bool:
        ok = isinstance(value, bool)
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ThemeParseError(f"Invalid value for '{where}': {value!r}")
    return float(value) if kind is float else value


def _color(value: Any, role: str) -> Color:
    try:
        return Color.from_dict(value)
    except (TypeError, ValueError) as e:
        raise ThemeParseError(f"Invalid color '{role}': {e}") from e


def _convert_colors(colors: dict[str, Any]) -> ThemeColors:
    kwargs: dict[str, Any] = {}
    for role in MANDATORY_ROLES:
        if colors.get(role) is None:
            raise ThemeParseError(f"Missing required color '{role}'")
        kwargs[role] = _color(colors[role], role)
    for role in OPTIONAL_ROLES:
        if colors.get(role) is not None:
            kwargs[role] = _color(colors[role], role)

    custom = _mapping(colors.get("custom_colors"), "colors.custom_colors")
    kwargs["custom"] = {str(name): _color(value, name) for name, value in custom.items()}
    return ThemeColors(**kwargs)


_DISPLAY_TYPES: dict[str, type] = {
    "logo_type": str,
    "separator": str,
    "padding": int,
    "show_borders": bool,
    "show_color_bar": bool,
    "color_bar_style": str,
    "alignment": str,
    "max_width": int,
    "line_spacing": float,
    "indent": int,
    "show_icons": bool,
    "icon_style": str,
    "layout": str,
    "border_style": str,
    "corner_style": str,
}

_EFFECT_TYPES: dict[str, type] = {
    "transitions": bool,
    "animations": bool,
    "shadows": bool,
    "glow": bool,
    "glow_intensity": float,
    "particle_effects": bool,
    "sound_effects": bool,
    "terminal_title": str,
    "cursor_style": str,
    "typing_effect": bool,
    "fade_in": bool,
    "transparency": float,
}


def _fill(target: Any, data: dict[str, Any], types: dict[str, type], section: str) -> Any:
    """Copy known keys onto `target`; None keeps the default, unknown keys are ignored."""
    for key, value in data.items():
        if key not in types or value is None:
            continue
        setattr(target, key, _typed(value, types[key], f"{section}.{key}"))
    return target


def _convert_display(display: dict[str, Any]) -> ThemeDisplay:
    return _fill(ThemeDisplay(), display, _DISPLAY_TYPES, "display")


def _convert_effects(effects: dict[str, Any]) -> ThemeEffects:
    return _fill(ThemeEffects(), effects, _EFFECT_TYPES, "effects")


def _convert_sections(sections: Any) -> Optional[list[ThemeSection]]:
    if sections is None:
        return None
    if not isinstance(sections, list):
        raise ThemeParseError("'layout.sections' must be a list")
    result = []
    for i, s in enumerate(sections):
        where = f"layout.sections[{i}]"
        if not isinstance(s, dict):
            raise ThemeParseError(f"'{where}' must be a mapping")
        result.append(ThemeSection(
            name=_scalar_str(s.get("name", ""), f"{where}.name"),
            items=_names(s.get("items"), f"{where}.items"),
            title=_typed(s.get("title"), str, f"{where}.title"),
            style=_typed(s.get("style"), str, f"{where}.style"),
            visible=_typed(s.get("visible"), bool, f"{where}.visible"),
        ))
    return result


def _convert_ascii(ascii_doc: Optional[dict[str, Any]]) -> Optional[CustomAscii]:
    if ascii_doc is None:
        return None
    frames = ascii_doc.get("frames")
    if frames is not None:
        if not isinstance(frames, list):
            raise ThemeParseError("'ascii.frames' must be a list")
        frames = [_lines(frame, f"ascii.frames[{i}]") for i, frame in enumerate(frames)]
    return CustomAscii(
        logo=_lines(ascii_doc.get("logo"), "ascii.logo"),
        small_logo=_lines(ascii_doc.get("small_logo"), "ascii.small_logo"),
        decorations=_labels(ascii_doc.get("decorations"), "ascii.decorations"),
        frames=frames,
        frame_delay=_typed(ascii_doc.get("frame_delay"), float, "ascii.frame_delay"),
    )


def to_theme(doc: dict[str, Any]) -> Theme:
    """Convert a raw TDL mapping into a Theme. Raises ThemeParseError."""
    meta = _section(doc, "meta", required=True)
    layout = _section(doc, "layout")
    ascii_doc = doc.get("ascii")
    if ascii_doc is not None and not isinstance(ascii_doc, dict):
        raise ThemeParseError("Section 'ascii' must be a mapping")
    tags = meta.get("tags")
    custom = doc.get("custom")
    if custom is not None and not isinstance(custom, dict):
        raise ThemeParseError("Section 'custom' must be a mapping")

    return Theme(
        name=_required_str(meta, "meta", "name"),
        description=_required_str(meta, "meta", "description"),
        version=_required_str(meta, "meta", "version"),
        author=_text(meta.get("author"), "meta.author"),
        license=_text(meta.get("license"), "meta.license"),
        tags=_names(tags, "meta.tags") if tags is not None else None,
        created=_text(meta.get("created"), "meta.created"),
        updated=_text(meta.get("updated"), "meta.updated"),
        colors=_convert_colors(_section(doc, "colors", required=True)),
        display=_convert_display(_section(doc, "display")),
        info_order=_names(layout.get("info_order"), "layout.info_order"),
        custom_labels=_labels(layout.get("custom_labels"), "layout.custom_labels"),
        sections=_convert_sections(layout.get("sections")),
        columns=_typed(layout.get("columns"), int, "layout.columns"),
        responsive=_typed(layout.get("responsive"), bool, "layout.responsive"),
        custom_ascii=_convert_ascii(ascii_doc),
        effects=_convert_effects(_section(doc, "effects")),
        custom=custom,
    )


# ── Theme → document ──────────────────────────────────────────────────────────

def from_theme(theme: Theme) -> dict[str, Any]:
    """Convert a Theme into a TDL mapping (inverse of to_theme)."""
    colors: dict[str, Any] = {}
    for role in MANDATORY_ROLES + OPTIONAL_ROLES:
        color = getattr(theme.colors, role)
        colors[role] = color.to_dict(include_hex=True) if color is not None else None
    colors["custom_colors"] = (
        {name: c.to_dict(include_hex=True) for name, c in theme.colors.custom.items()}
        or None
    )

    d = theme.display
    e = theme.effects
    a = theme.custom_ascii
    return {
        "meta": {
            "name": theme.name,
            "description": theme.description,
            "version": theme.version,
            "author": theme.author,
            "license": theme.license,
            "tags": theme.tags,
            "created": theme.created,
            "updated": theme.updated,
        },
        "colors": colors,
        "display": {
            "logo_type": d.logo_type,
            "separator": d.separator,
            "padding": d.padding,
            "show_borders": d.show_borders,
            "show_color_bar": d.show_color_bar,
            "color_bar_style": d.color_bar_style,
            "alignment": d.alignment,
            "max_width": d.max_width,
            "line_spacing": d.line_spacing,
            "indent": d.indent,
            "show_icons": d.show_icons,
            "icon_style": d.icon_style,
            "layout": d.layout,
            "border_style": d.border_style,
            "corner_style": d.corner_style,
        },
        "layout": {
            "info_order": list(theme.info_order),
            "custom_labels": dict(theme.custom_labels) or None,
            "sections": [
                {
                    "name": s.name,
                    "title": s.title,
                    "items": list(s.items),
                    "style": s.style,
                    "visible": s.visible,
                }
                for s in theme.sections
            ] if theme.sections is not None else None,
            "columns": theme.columns,
            "responsive": theme.responsive,
        },
        "effects": {
            "transitions": e.transitions,
            "animations": e.animations,
            "shadows": e.shadows,
            "glow": e.glow,
            "glow_intensity": e.glow_intensity,
            "particle_effects": e.particle_effects,
            "sound_effects": e.sound_effects,
            "terminal_title": e.terminal_title,
            "cursor_style": e.cursor_style,
            "typing_effect": e.typing_effect,
            "fade_in": e.fade_in,
            "transparency": e.transparency,
        },
        "ascii": {
            "logo": list(a.logo),
            "small_logo": list(a.small_logo),
            "decorations": dict(a.decorations) or None,
            "frames": a.frames,
            "frame_delay": a.frame_delay,
        } if a is not None else None,
        "custom": theme.custom,
    }


# ── Templates ─────────────────────────────────────────────────────────────────

def template_theme() -> Theme:
    """The fully populated starter theme used by generate_template()."""
    return Theme(
        name="my_theme",
        description="My custom theme",
        version="1.0.0",
        author="Your Name",
        license="MIT",
        tags=["custom", "colorful"],
        created="2024-01-01",
        updated="2024-01-01",
        colors=ThemeColors(
            title=Color.named("cyan").with_rgb(0, 255, 255).bold().glow(128).with_animation(
                Animation(AnimationKind.PULSE, duration=2.0, repeat=True)
            ),
            subtitle=Color.named("blue"),
            key=Color.named("yellow").bold(),
            value=Color.named("white"),
            separator=Color.named("white"),
            logo=Color.named("cyan").glow(),
            accent=Color.named("magenta"),
        ),
        display=ThemeDisplay(),
        info_order=[
            "os", "kernel", "uptime", "packages", "shell", "terminal",
            "cpu", "gpu", "memory", "disk", "battery", "date",
        ],
        custom_ascii=CustomAscii(logo=list(RFETCH_BANNER), small_logo=["🎨"]),
        effects=ThemeEffects(),
    )


def strip_none(value: Any) -> Any:
    """TOML has no null: drop None-valued keys recursively."""
    if isinstance(value, dict):
        return {k: strip_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [strip_none(v) for v in value]
    return value


def dump_document(doc: dict[str, Any], fmt: str) -> str:
    """Serialize a TDL mapping. Unknown formats fall back to YAML."""
    fmt = _HINT_ALIASES.get(fmt.strip().lower(), "yaml")
    if fmt == "json":
        return json.dumps(doc, indent=2, ensure_ascii=False)
    if fmt == "toml":
        return tomli_w.dumps(strip_none(doc))
    return yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)


def generate_template(fmt: str, theme: Optional[Theme] = None) -> str:
    """Return a fully populated theme document in `fmt` (json / toml / yaml)."""
    return dump_document(from_theme(theme or template_theme()), fmt)


# ── Validation ────────────────────────────────────────────────────────────────

def _is_valid_version(version: Any) -> bool:
    if not isinstance(version, str):
        return False
    parts = version.split(".")
    return len(parts) == 3 and all(p.isdigit() for p in parts)


def _validate_color(color: Any, role: str, errors: list[str]) -> None:
    if isinstance(color, str):
        if not color:
            errors.append(f"Color '{role}' base cannot be empty")
        return
    if not isinstance(color, dict):
        errors.append(f"Color '{role}' must be a name or a table")
        return

    if not color.get("base"):
        errors.append(f"Color '{role}' base cannot be empty")

    hex_value = color.get("hex")
    if hex_value is not None and not (isinstance(hex_value, str) and is_valid_hex(hex_value)):
        errors.append(f"Invalid hex color for '{role}'")

    rgb = color.get("rgb")
    if rgb is not None:
        if not isinstance(rgb, (list, tuple)) or len(rgb) != 3:
            errors.append(f"RGB array for '{role}' must have exactly 3 values")
        elif not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
            errors.append(f"RGB values for '{role}' must be integers between 0 and 255")

    intensity = color.get("glow_intensity")
    if intensity is not None and not is_valid_channel(intensity):
        errors.append(f"Glow intensity for '{role}' must be an integer between 0 and 255")


def validate(doc: dict[str, Any]) -> list[str]:
    """
    Check a raw TDL mapping and return every problem found.

    An empty list means the document is valid. Nothing is raised; the
    caller decides whether the messages are fatal.
    """
    errors: list[str] = []

    meta = doc.get("meta")
    if not isinstance(meta, dict):
        errors.append("Missing section 'meta'")
        meta = {}
    if not meta.get("name"):
        errors.append("Theme name cannot be empty")
    if not meta.get("description"):
        errors.append("Theme description cannot be empty")
    if not _is_valid_version(meta.get("version")):
        errors.append("Invalid version format (use semantic versioning)")

    colors = doc.get("colors")
    if not isinstance(colors, dict):
        errors.append("Missing section 'colors'")
        colors = {}
    for role in MANDATORY_ROLES:
        if colors.get(role) is None:
            errors.append(f"Missing color '{role}'")
        else:
            _validate_color(colors[role], role, errors)
    for role in OPTIONAL_ROLES:
        if colors.get(role) is not None:
            _validate_color(colors[role], role, errors)
    custom = colors.get("custom_colors")
    if isinstance(custom, dict):
        for name, color in custom.items():
            _validate_color(color, str(name), errors)
    elif custom is not None:
        errors.append("Section 'colors.custom_colors' must be a mapping")

    display = doc.get("display")
    if isinstance(display, dict):
        padding = display.get("padding")
        if isinstance(padding, (int, float)) and padding > 10:
            errors.append("Padding should not exceed 10")
        spacing = display.get("line_spacing")
        if isinstance(spacing, (int, float)) and not 0.5 <= spacing <= 3.0:
            errors.append("Line spacing should be between 0.5 and 3.0")

    return errors
