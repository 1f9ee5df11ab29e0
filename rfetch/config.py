"""
Configuration loading, saving and resolution for rfetch.

Reads config.toml from the platform config directory (click.get_app_dir:
~/.config/rfetch on Linux, ~/Library/Application Support/rfetch on macOS,
%APPDATA%\rfetch on Windows) or an explicit path, and returns a fully
populated Configuration. A missing file is not an error: defaults
apply. A file that exists but does not parse raises ConfigError.

Resolution order, later wins:
    defaults < config file < theme < --logo/--color/--json < --minimal < --verbose
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Optional

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

import click
import tomli_w

from rfetch import tdl
from rfetch.colors import Color
from rfetch.errors import ConfigError, FileAccessError
from rfetch.themes import Theme, load_builtin

logger = logging.getLogger(__name__)

_APP_DIR = "rfetch"
_CONFIG_FILE = "config.toml"


# ── Selectors ─────────────────────────────────────────────────────────────────

class LogoType(str, Enum):
    AUTO = "auto"
    ASCII = "ascii"
    SMALL = "small"
    NONE = "none"

    @classmethod
    def parse(cls, raw: Any) -> "LogoType":
        """Unrecognized selectors behave like AUTO."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.AUTO


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, raw: Any) -> "ColorMode":
        """Unrecognized modes fail open to ALWAYS."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.ALWAYS


class OutputFormat(str, Enum):
    NORMAL = "normal"
    JSON = "json"

    @classmethod
    def parse(cls, raw: Any) -> "OutputFormat":
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.NORMAL


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass
class DisplayConfig:
    logo_type: LogoType = LogoType.AUTO
    color_mode: ColorMode = ColorMode.AUTO
    output_format: OutputFormat = OutputFormat.NORMAL
    minimal: bool = False
    verbose: bool = False
    separator: str = ": "
    padding: int = 2


@dataclass
class InfoConfig:
    show_os: bool = True
    show_kernel: bool = True
    show_uptime: bool = True
    show_packages: bool = True
    show_shell: bool = True
    show_resolution: bool = True
    show_de: bool = True
    show_wm: bool = True
    show_theme: bool = False
    show_icons: bool = False
    show_font: bool = False
    show_cursor: bool = False
    show_terminal: bool = True
    show_cpu: bool = True
    show_gpu: bool = True
    show_memory: bool = True
    show_disk: bool = True
    show_battery: bool = True
    show_locale: bool = False
    show_local_ip: bool = False
    show_public_ip: bool = False
    show_users: bool = False
    show_date: bool = True


@dataclass
class ColorConfig:
    title: Color = field(default_factory=lambda: Color.named("cyan"))
    subtitle: Color = field(default_factory=lambda: Color.named("blue"))
    key: Color = field(default_factory=lambda: Color.named("yellow"))
    value: Color = field(default_factory=lambda: Color.named("white"))
    separator: Color = field(default_factory=lambda: Color.named("white"))
    logo: Color = field(default_factory=lambda: Color.named("cyan"))


@dataclass
class Configuration:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    info: InfoConfig = field(default_factory=InfoConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)


def defaults() -> Configuration:
    """A fresh, fully populated default configuration."""
    return Configuration()


def default_config_path() -> Path:
    """config.toml inside the per-user config directory for this platform."""
    return Path(click.get_app_dir(_APP_DIR)) / _CONFIG_FILE


# ── Serialization ─────────────────────────────────────────────────────────────

def to_dict(config: Configuration) -> dict[str, Any]:
    """Structured form written to config.toml."""
    display = {
        f.name: getattr(config.display, f.name) for f in fields(DisplayConfig)
    }
    for key in ("logo_type", "color_mode", "output_format"):
        display[key] = display[key].value

    return {
        "display": display,
        "info": {f.name: getattr(config.info, f.name) for f in fields(InfoConfig)},
        "colors": {
            f.name: tdl.strip_none(getattr(config.colors, f.name).to_dict())
            for f in fields(ColorConfig)
        },
    }


_DISPLAY_TYPES: dict[str, type] = {
    "minimal": bool,
    "verbose": bool,
    "separator": str,
    "padding": int,
}

_DISPLAY_PARSERS = {
    "logo_type": LogoType.parse,
    "color_mode": ColorMode.parse,
    "output_format": OutputFormat.parse,
}


def _table(data: dict, name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def from_dict(data: dict[str, Any]) -> Configuration:
    """
    Overlay a parsed config document onto the defaults.

    Missing keys keep their defaults and unknown keys are ignored.
    A value of the wrong type raises ConfigError.
    """
    config = defaults()

    for key, value in _table(data, "display").items():
        if key in _DISPLAY_PARSERS:
            setattr(config.display, key, _DISPLAY_PARSERS[key](value))
        elif key in _DISPLAY_TYPES:
            expected = _DISPLAY_TYPES[key]
            # bool is an int subclass; padding = true is still an error
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(f"display.{key} must be {expected.__name__}")
            if expected is int and value < 0:
                raise ConfigError(f"display.{key} cannot be negative")
            setattr(config.display, key, value)

    info_names = {f.name for f in fields(InfoConfig)}
    for key, value in _table(data, "info").items():
        if key not in info_names:
            continue
        if not isinstance(value, bool):
            raise ConfigError(f"info.{key} must be true or false")
        setattr(config.info, key, value)

    color_names = {f.name for f in fields(ColorConfig)}
    for key, value in _table(data, "colors").items():
        if key not in color_names:
            continue
        try:
            setattr(config.colors, key, Color.from_dict(value))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"colors.{key}: {e}") from e

    return config


# ── Persistence ───────────────────────────────────────────────────────────────

def load(path: Optional[Path | str] = None) -> Configuration:
    """
    Load the configuration from `path` (or the default location).

    Returns defaults when the file does not exist.
    Raises ConfigError when it exists but cannot be read or parsed.
    """
    config_path = Path(path) if path else default_config_path()

    if not config_path.exists():
        logger.debug("no config file at %s, using defaults", config_path)
        return defaults()

    try:
        raw = config_path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    logger.debug("loaded config from %s", config_path)
    return from_dict(data)


def save(config: Configuration, path: Optional[Path | str] = None) -> Path:
    """Write `config` as TOML, creating parent directories. Returns the path."""
    config_path = Path(path) if path else default_config_path()

    try:
        content = tomli_w.dumps(to_dict(config))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Failed to serialize config: {e}") from e

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Cannot write {config_path}: {e}") from e

    logger.debug("saved config to %s", config_path)
    return config_path


# ── Presets & theme application ───────────────────────────────────────────────

def apply_minimal(config: Configuration) -> None:
    """Hide the optional fields and switch to the small logo."""
    config.info.show_theme = False
    config.info.show_icons = False
    config.info.show_font = False
    config.info.show_cursor = False
    config.info.show_locale = False
    config.info.show_local_ip = False
    config.info.show_public_ip = False
    config.info.show_users = False
    config.display.logo_type = LogoType.SMALL


def apply_verbose(config: Configuration) -> None:
    """Show the optional fields. show_public_ip is left as it was."""
    config.info.show_theme = True
    config.info.show_icons = True
    config.info.show_font = True
    config.info.show_cursor = True
    config.info.show_locale = True
    config.info.show_local_ip = True
    config.info.show_users = True


def apply_theme(config: Configuration, theme: Theme) -> None:
    """Copy the theme's six color roles and its logo / separator / padding."""
    config.colors.title = theme.colors.title
    config.colors.subtitle = theme.colors.subtitle
    config.colors.key = theme.colors.key
    config.colors.value = theme.colors.value
    config.colors.separator = theme.colors.separator
    config.colors.logo = theme.colors.logo

    config.display.logo_type = LogoType.parse(theme.display.logo_type)
    config.display.separator = theme.display.separator
    config.display.padding = theme.display.padding


def select_theme(selector: str) -> tuple[Optional[Theme], list[str]]:
    """
    Resolve a --theme argument.

    An existing path is parsed as a theme document (errors propagate) and
    validated; validation messages come back as warnings. Anything else is
    looked up in the built-in catalog; an unknown name returns (None, []).
    """
    path = Path(selector)
    if path.exists():
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Cannot read theme file {path}: {e}") from e
        doc = tdl.parse_document(text, hint=path.suffix or None)
        problems = [f"{path.name}: {msg}" for msg in tdl.validate(doc)]
        theme = tdl.to_theme(doc)
        logger.debug("loaded custom theme %r from %s", theme.name, path)
        return theme, problems

    theme = load_builtin(selector)
    if theme is not None:
        logger.debug("using built-in theme %r", selector)
    return theme, []


def resolve(
    config_path: Optional[str] = None,
    theme: Optional[str] = None,
    logo: Optional[str] = None,
    color: Optional[str] = None,
    as_json: bool = False,
    minimal: bool = False,
    verbose: bool = False,
) -> tuple[Configuration, Optional[Theme], list[str]]:
    """
    Build the effective configuration.

    Returns (configuration, theme or None, warnings). The presets run
    last, so `--logo ascii --minimal` still ends with the small logo.
    """
    config = load(config_path)
    warnings: list[str] = []

    loaded_theme: Optional[Theme] = None
    if theme:
        loaded_theme, problems = select_theme(theme)
        warnings.extend(problems)
        if loaded_theme is not None:
            apply_theme(config, loaded_theme)
        else:
            warnings.append(
                f"Unknown theme '{theme}'. Use --list-themes to see available themes."
            )

    if logo is not None:
        config.display.logo_type = LogoType.parse(logo)
    if color is not None:
        config.display.color_mode = ColorMode.parse(color)
    if as_json:
        config.display.output_format = OutputFormat.JSON

    if minimal:
        config.display.minimal = True
        apply_minimal(config)
    if verbose:
        config.display.verbose = True
        apply_verbose(config)

    return config, loaded_theme, warnings
