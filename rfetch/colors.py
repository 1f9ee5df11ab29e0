"""
Color model shared by the configuration, the built-in themes and the
theme definition language.

A Color is an immutable value: a base name (or #hex), an optional RGB
triple, an ordered tuple of effects, and optional animation / gradient
metadata. Only the base and the SGR-capable effects reach the terminal;
animation, gradient, glow and shadow are carried as data so that theme
documents round-trip without loss.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from rich.color import Color as RichColor
from rich.color import ColorSystem
from rich.style import Style


RGB = tuple[int, int, int]


# ── Enumerations ──────────────────────────────────────────────────────────────

class EffectKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    BLINK = "blink"
    REVERSE = "reverse"
    DIM = "dim"
    GLOW = "glow"
    SHADOW = "shadow"

    @classmethod
    def parse(cls, name: str) -> Optional["EffectKind"]:
        """Return the effect for `name` (case-insensitive), or None if unknown."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None


class AnimationKind(str, Enum):
    FADE = "fade"
    PULSE = "pulse"
    RAINBOW = "rainbow"
    TYPEWRITER = "typewriter"
    SLIDE = "slide"
    BOUNCE = "bounce"
    WAVE = "wave"

    @classmethod
    def parse(cls, name: str) -> "AnimationKind":
        """Unknown animation names fall back to PULSE."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return cls.PULSE


class GradientDirection(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["GradientDirection"]:
        if name is None:
            return None
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None


# ── Terminal lookup tables ────────────────────────────────────────────────────

# Semantic name → rich standard color name
_ANSI_NAMES: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "purple": "magenta",
    "cyan": "cyan",
    "white": "white",
    "bright_black": "bright_black",
    "bright_red": "bright_red",
    "bright_green": "bright_green",
    "bright_yellow": "bright_yellow",
    "bright_blue": "bright_blue",
    "bright_magenta": "bright_magenta",
    "bright_purple": "bright_magenta",
    "bright_cyan": "bright_cyan",
    "bright_white": "bright_white",
}

# Effect → rich Style attribute. GLOW and SHADOW have no SGR equivalent.
_EFFECT_ATTRS: dict[EffectKind, str] = {
    EffectKind.BOLD: "bold",
    EffectKind.ITALIC: "italic",
    EffectKind.UNDERLINE: "underline",
    EffectKind.STRIKETHROUGH: "strike",
    EffectKind.BLINK: "blink",
    EffectKind.REVERSE: "reverse",
    EffectKind.DIM: "dim",
}


# ── Hex helpers ───────────────────────────────────────────────────────────────

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_valid_hex(text: str) -> bool:
    """True for exactly six hex digits with an optional leading '#'."""
    digits = text[1:] if text.startswith("#") else text
    return len(digits) == 6 and all(c in _HEX_DIGITS for c in digits)


def hex_to_rgb(text: str) -> RGB:
    """
    Convert "#FF0000" or "FF0000" to (255, 0, 0).

    Raises ValueError for anything that is not six hex digits.
    """
    if not isinstance(text, str) or not is_valid_hex(text):
        raise ValueError(f"Invalid hex color: {text!r}")
    digits = text[1:] if text.startswith("#") else text
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def is_valid_channel(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def _coerce_rgb(value: Any) -> Optional[RGB]:
    """Accept a 3-item sequence of 0–255 ints; anything else → None."""
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        return None
    try:
        channels = tuple(int(v) for v in value)
    except (TypeError, ValueError):
        return None
    if not all(0 <= c <= 255 for c in channels):
        return None
    return channels  # type: ignore[return-value]


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Animation:
    kind: AnimationKind
    duration: float = 1.0
    repeat: bool = True
    easing: str = "ease-in-out"
    delay: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.duration > 0:
            raise ValueError("Animation duration must be positive")

    def to_dict(self) -> dict[str, Any]:
        return {
            "animation_type": self.kind.value,
            "duration": self.duration,
            "repeat": self.repeat,
            "easing": self.easing,
            "delay": self.delay,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Animation":
        kind = data.get("animation_type", data.get("kind", "pulse"))
        delay = data.get("delay")
        return cls(
            kind=AnimationKind.parse(kind),
            duration=float(data.get("duration", 1.0)),
            repeat=bool(data.get("repeat", True)),
            easing=data.get("easing") or "ease-in-out",
            delay=float(delay) if delay is not None else None,
        )


@dataclass(frozen=True)
class Gradient:
    to_color: str
    direction: Optional[GradientDirection] = None
    stops: Optional[tuple[float, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "to_color": self.to_color,
            "direction": self.direction.value if self.direction else None,
            "stops": list(self.stops) if self.stops is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Gradient":
        stops = data.get("stops")
        return cls(
            to_color=str(data.get("to_color", "")),
            direction=GradientDirection.parse(data.get("direction")),
            stops=tuple(float(s) for s in stops) if stops is not None else None,
        )


@dataclass(frozen=True)
class Color:
    base: str
    rgb: Optional[RGB] = None
    effects: tuple[EffectKind, ...] = field(default_factory=tuple)
    animation: Optional[Animation] = None
    gradient: Optional[Gradient] = None
    glow_intensity: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("Color base cannot be empty")
        if self.glow_intensity is not None and not is_valid_channel(self.glow_intensity):
            raise ValueError(f"Glow intensity must be 0-255, got {self.glow_intensity!r}")

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def named(cls, name: str) -> "Color":
        return cls(base=name)

    def with_rgb(self, r: int, g: int, b: int) -> "Color":
        return replace(self, rgb=(r, g, b))

    def with_effect(self, effect: EffectKind) -> "Color":
        return replace(self, effects=self.effects + (effect,))

    def with_effects(self, effects) -> "Color":
        return replace(self, effects=tuple(effects))

    def with_animation(self, animation: Animation) -> "Color":
        return replace(self, animation=animation)

    def with_gradient(self, gradient: Gradient) -> "Color":
        return replace(self, gradient=gradient)

    def bold(self) -> "Color":
        return self.with_effect(EffectKind.BOLD)

    def italic(self) -> "Color":
        return self.with_effect(EffectKind.ITALIC)

    def underline(self) -> "Color":
        return self.with_effect(EffectKind.UNDERLINE)

    def glow(self, intensity: Optional[int] = None) -> "Color":
        glowing = self.with_effect(EffectKind.GLOW)
        if intensity is None:
            return glowing
        return replace(glowing, glow_intensity=intensity)

    def pulse(self, duration: float) -> "Color":
        return self.with_animation(Animation(AnimationKind.PULSE, duration))

    def rainbow(self, duration: float) -> "Color":
        return self.with_animation(Animation(AnimationKind.RAINBOW, duration))

    # ── Rendering ─────────────────────────────────────────────────────────────

    def style(self, *extra: EffectKind) -> Style:
        """
        Return the rich Style for this color.

        Known names map to the 16 ANSI colors, a '#hex' base is used as
        true color, and an unknown base falls back to `rgb` or to no color.
        """
        color: Optional[RichColor] = None
        name = self.base.strip().lower()
        if name in _ANSI_NAMES:
            color = RichColor.parse(_ANSI_NAMES[name])
        elif is_valid_hex(name) and name.startswith("#"):
            color = RichColor.from_rgb(*hex_to_rgb(name))
        elif self.rgb is not None:
            color = RichColor.from_rgb(*self.rgb)

        attrs = {
            _EFFECT_ATTRS[effect]: True
            for effect in (*self.effects, *extra)
            if effect in _EFFECT_ATTRS
        }
        return Style(color=color, **attrs)

    def paint(self, text: str, *extra: EffectKind) -> str:
        """Wrap `text` in this color's escape sequences (unchanged if unstyled)."""
        return self.style(*extra).render(text, color_system=ColorSystem.TRUECOLOR)

    # ── Structured form ───────────────────────────────────────────────────────

    def to_dict(self, include_hex: bool = False) -> dict[str, Any]:
        """Structured form used by config files and theme documents."""
        data: dict[str, Any] = {
            "base": self.base,
            "rgb": list(self.rgb) if self.rgb is not None else None,
        }
        if include_hex:
            data["hex"] = rgb_to_hex(self.rgb) if self.rgb is not None else None
        data["effects"] = [e.value for e in self.effects] or None
        data["animation"] = self.animation.to_dict() if self.animation else None
        data["gradient"] = self.gradient.to_dict() if self.gradient else None
        if self.glow_intensity is not None:
            data["glow_intensity"] = self.glow_intensity
        return data

    @classmethod
    def from_dict(cls, value: Any) -> "Color":
        """
        Build a Color from a bare name or a mapping.

        RGB comes from `rgb` when valid, else from `hex` when valid.
        Unknown effect names are dropped.
        """
        if isinstance(value, str):
            return cls(base=value)
        if not isinstance(value, dict):
            raise ValueError(f"Expected a color name or table, got {type(value).__name__}")

        base = value.get("base")
        if not isinstance(base, str) or not base:
            raise ValueError("Color base cannot be empty")

        rgb = _coerce_rgb(value.get("rgb"))
        hex_value = value.get("hex")
        if rgb is None and isinstance(hex_value, str) and is_valid_hex(hex_value):
            rgb = hex_to_rgb(hex_value)

        effects = tuple(
            effect
            for effect in (EffectKind.parse(e) for e in value.get("effects") or [])
            if effect is not None
        )

        intensity = value.get("glow_intensity")
        if intensity is not None and not is_valid_channel(intensity):
            raise ValueError(f"Glow intensity must be an integer 0-255, got {intensity!r}")

        animation = value.get("animation")
        gradient = value.get("gradient")
        return cls(
            base=base,
            rgb=rgb,
            effects=effects,
            animation=Animation.from_dict(animation) if isinstance(animation, dict) else None,
            gradient=Gradient.from_dict(gradient) if isinstance(gradient, dict) else None,
            glow_intensity=intensity,
        )
