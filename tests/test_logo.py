"""
Tests for rfetch.logo — catalog selection by OS name and logo type.
"""

import pytest

from rfetch.config import LogoType
from rfetch.logo import get_logo


def _first(os_name: str) -> str:
    return get_logo(os_name, "auto")[0]


class TestAuto:
    @pytest.mark.parametrize("os_name, marker", [
        ("Arch Linux", "-`"),
        ("Ubuntu 22.04", ".-/+oossssoo+/-."),
        ("Fedora Linux 39", ".',;::::;,'."),
        ("Debian GNU/Linux 12", "_,met$$$$$gg."),
        ("macOS 14.2", "'c."),
        ("Darwin", "'c."),
        ("Windows 11", "..,"),
        ("Gentoo", "-/oyddmdhs+:."),
        ("openSUSE Tumbleweed", ".;ldkO0000Okdl;."),
        ("CentOS Stream 9", ".."),
        ("Alpine Linux v3.19", ".hdddd"),
    ])
    def test_distribution_logos(self, os_name, marker):
        assert marker in _first(os_name)

    def test_termux_beats_arch_substring(self):
        # "Termux on Arch" must still pick the termux art
        lines = get_logo("Termux on Arch", "auto")
        assert any("Android Terminal" in line for line in lines)

    def test_unknown_os_gets_generic(self):
        assert get_logo("Plan 9", "auto")[0] == "   _____   "

    def test_matching_is_case_insensitive(self):
        assert get_logo("ARCH", "auto") == get_logo("arch", "auto")


class TestTypes:
    def test_none_is_empty(self):
        assert get_logo("Arch Linux", "none") == []

    def test_small_arch(self):
        assert get_logo("Arch Linux", "small") == ["  /\\  ", " /  \\ ", "/____\\"]

    def test_small_ubuntu(self):
        assert get_logo("Ubuntu", LogoType.SMALL) == ["  ___  ", " (   ) ", "  \\_/  "]

    def test_small_macos(self):
        assert get_logo("macOS", "small") == ["   🍎   "]

    def test_small_fallback_dot(self):
        assert get_logo("Fedora", "small") == ["  ●  "]

    def test_ascii_is_block_art_regardless_of_os(self):
        assert get_logo("Arch Linux", "ascii") == get_logo("Windows", "ascii")
        assert len(get_logo("Arch Linux", "ascii")) == 5

    def test_unknown_type_behaves_like_auto(self):
        assert get_logo("Arch Linux", "giant") == get_logo("Arch Linux", "auto")

    def test_callers_get_fresh_lists(self):
        first = get_logo("Arch Linux", "auto")
        first.clear()
        assert get_logo("Arch Linux", "auto")
