"""
Tests for rfetch.themes — the built-in catalog.
"""

import pytest

from rfetch.themes import INFO_KEYS, MANDATORY_ROLES, list_builtin, load_builtin


class TestCatalog:
    def test_catalog_order(self):
        assert list_builtin() == ["default", "neon", "minimal", "retro"]

    @pytest.mark.parametrize("name", ["default", "neon", "minimal", "retro"])
    def test_every_builtin_has_mandatory_colors(self, name):
        theme = load_builtin(name)
        for role in MANDATORY_ROLES:
            assert getattr(theme.colors, role).base

    def test_lookup_is_case_insensitive(self):
        assert load_builtin("  NEON ").name == "Neon"

    def test_unknown_name_returns_none(self):
        assert load_builtin("solarized") is None

    def test_returns_independent_copies(self):
        first = load_builtin("default")
        first.display.padding = 9
        first.custom_labels["os"] = "System"
        second = load_builtin("default")
        assert second.display.padding == 2
        assert second.custom_labels == {}

    def test_default_info_order_covers_all_fields(self):
        assert load_builtin("default").info_order == list(INFO_KEYS)


class TestBuiltinSettings:
    def test_neon(self):
        neon = load_builtin("neon")
        assert neon.display.logo_type == "ascii"
        assert neon.display.separator == " ▶ "
        assert neon.display.padding == 3
        assert neon.custom_ascii is not None and neon.custom_ascii.logo
        assert neon.effects.glow_intensity == pytest.approx(0.8)

    def test_minimal(self):
        minimal = load_builtin("minimal")
        assert minimal.display.logo_type == "small"
        assert minimal.display.separator == " "
        assert minimal.display.padding == 1
        assert minimal.custom_ascii is None

    def test_retro_has_banner(self):
        retro = load_builtin("retro")
        assert retro.display.border_style == "classic"
        assert retro.custom_ascii.logo[0].startswith("┌")
