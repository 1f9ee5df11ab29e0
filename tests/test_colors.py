"""
Tests for rfetch.colors — hex helpers, Color builders, escape rendering
and the structured (dict) form.
"""

import pytest

from rfetch.colors import (
    Animation,
    AnimationKind,
    Color,
    EffectKind,
    Gradient,
    GradientDirection,
    hex_to_rgb,
    is_valid_hex,
    rgb_to_hex,
)


# ── Hex helpers ──────────────────────────────────────────────────────────────

class TestHex:
    def test_hex_with_hash(self):
        assert hex_to_rgb("#FF0000") == (255, 0, 0)

    def test_hex_without_hash_lowercase(self):
        assert hex_to_rgb("00ff80") == (0, 255, 128)

    @pytest.mark.parametrize("bad", ["#FFF", "#GG0000", "FF00000", "", "#"])
    def test_invalid_hex_raises(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)

    def test_is_valid_hex(self):
        assert is_valid_hex("#a1B2c3")
        assert not is_valid_hex("#a1B2c")

    def test_rgb_to_hex_is_uppercase(self):
        assert rgb_to_hex((0, 255, 171)) == "#00FFAB"


# ── Construction ─────────────────────────────────────────────────────────────

class TestBuilders:
    def test_empty_base_rejected(self):
        with pytest.raises(ValueError):
            Color("")

    def test_effects_keep_order(self):
        c = Color.named("cyan").bold().glow().underline()
        assert c.effects == (EffectKind.BOLD, EffectKind.GLOW, EffectKind.UNDERLINE)

    def test_builders_do_not_mutate(self):
        base = Color.named("red")
        base.bold()
        assert base.effects == ()

    def test_pulse_sets_animation(self):
        c = Color.named("cyan").pulse(2.0)
        assert c.animation == Animation(AnimationKind.PULSE, 2.0)

    def test_animation_duration_must_be_positive(self):
        with pytest.raises(ValueError):
            Animation(AnimationKind.FADE, duration=0)

    def test_unknown_animation_falls_back_to_pulse(self):
        assert AnimationKind.parse("sparkle") is AnimationKind.PULSE

    def test_unknown_effect_is_none(self):
        assert EffectKind.parse("sparkle") is None

    def test_glow_carries_intensity(self):
        c = Color.named("cyan").glow(200)
        assert c.effects == (EffectKind.GLOW,)
        assert c.glow_intensity == 200

    def test_glow_without_intensity(self):
        assert Color.named("cyan").glow().glow_intensity is None

    @pytest.mark.parametrize("bad", [-1, 256, True])
    def test_glow_intensity_range(self, bad):
        with pytest.raises(ValueError):
            Color.named("cyan").glow(bad)


# ── Rendering ────────────────────────────────────────────────────────────────

class TestPaint:
    def test_named_color_wraps_text(self):
        out = Color.named("red").paint("Hi")
        assert out.startswith("\x1b[")
        assert "31" in out
        assert "Hi" in out
        assert out.endswith("\x1b[0m")

    def test_unknown_name_without_rgb_is_plain(self):
        assert Color.named("not-a-color").paint("Hi") == "Hi"

    def test_unknown_name_still_applies_effects(self):
        out = Color.named("not-a-color").bold().paint("Hi")
        assert "\x1b[1m" in out

    def test_hex_base_is_true_color(self):
        assert "38;2;255;128;0" in Color.named("#FF8000").paint("x")

    def test_rgb_used_for_unknown_base(self):
        assert "38;2;1;2;3" in Color("custom", rgb=(1, 2, 3)).paint("x")

    def test_known_name_wins_over_rgb(self):
        out = Color.named("red").with_rgb(0, 255, 0).paint("x")
        assert "38;2;0;255;0" not in out
        assert "31" in out

    def test_extra_effect_applied(self):
        out = Color.named("yellow").paint("Key", EffectKind.BOLD)
        assert "\x1b[1;33m" in out

    def test_glow_has_no_escape(self):
        assert Color.named("nope").glow().paint("x") == "x"


# ── Structured form ──────────────────────────────────────────────────────────

class TestDictForm:
    def test_bare_string(self):
        assert Color.from_dict("cyan") == Color.named("cyan")

    def test_rgb_preferred_over_hex(self):
        c = Color.from_dict({"base": "cyan", "rgb": [1, 2, 3], "hex": "#FFFFFF"})
        assert c.rgb == (1, 2, 3)

    def test_hex_fills_missing_rgb(self):
        c = Color.from_dict({"base": "cyan", "hex": "#00FFFF"})
        assert c.rgb == (0, 255, 255)

    def test_malformed_hex_ignored(self):
        c = Color.from_dict({"base": "cyan", "hex": "#XYZ"})
        assert c.rgb is None

    def test_unknown_effects_dropped(self):
        c = Color.from_dict({"base": "red", "effects": ["bold", "sparkle", "ITALIC"]})
        assert c.effects == (EffectKind.BOLD, EffectKind.ITALIC)

    def test_missing_base_rejected(self):
        with pytest.raises(ValueError):
            Color.from_dict({"effects": ["bold"]})

    def test_to_dict_with_hex(self):
        data = Color.named("cyan").with_rgb(0, 255, 255).bold().to_dict(include_hex=True)
        assert data["hex"] == "#00FFFF"
        assert data["rgb"] == [0, 255, 255]
        assert data["effects"] == ["bold"]
        assert data["animation"] is None

    def test_animation_and_gradient_survive(self):
        c = Color.named("blue").rainbow(3.0).with_gradient(
            Gradient("magenta", GradientDirection.DIAGONAL, (0.0, 1.0))
        )
        assert Color.from_dict(c.to_dict()) == c

    def test_glow_intensity_survives(self):
        c = Color.named("cyan").bold().glow(64)
        data = c.to_dict()
        assert data["glow_intensity"] == 64
        assert Color.from_dict(data) == c

    def test_no_intensity_key_when_unset(self):
        assert "glow_intensity" not in Color.named("cyan").glow().to_dict()

    @pytest.mark.parametrize("bad", ["high", 300, [1]])
    def test_bad_glow_intensity_rejected(self, bad):
        with pytest.raises(ValueError):
            Color.from_dict({"base": "cyan", "effects": ["glow"], "glow_intensity": bad})
