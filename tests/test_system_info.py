"""
Tests for rfetch.system_info.

Probes are exercised through monkeypatched psutil/subprocess seams so the
tests never depend on the machine they run on.
"""

from collections import namedtuple
import socket

import pytest

from rfetch import config as cfg
from rfetch import system_info as si
from rfetch.errors import SystemInfoError
from rfetch.system_info import DiskInfo, MemoryInfo, SystemInfo


_Battery = namedtuple("_Battery", "percent secsleft power_plugged")
_Part = namedtuple("_Part", "device mountpoint fstype opts")
_Usage = namedtuple("_Usage", "total used free percent")
_Addr = namedtuple("_Addr", "family address netmask broadcast ptp")
_User = namedtuple("_User", "name terminal host started pid")


# ── Data model ───────────────────────────────────────────────────────────────

class TestModel:
    def test_memory_percentage_computed(self):
        assert MemoryInfo(total=200, used=50, available=150).percentage == 25.0

    def test_zero_total_is_zero_percent(self):
        assert MemoryInfo().percentage == 0.0

    def test_explicit_percentage_kept(self):
        assert DiskInfo("/dev/sda1", "/", total=100, used=10, percentage=12.5).percentage == 12.5

    def test_default_snapshot(self):
        info = SystemInfo()
        assert info.user == "unknown"
        assert info.battery is None
        assert info.colors == ["■"] * 8

    def test_to_dict_nests_records(self):
        info = SystemInfo(disk=[DiskInfo("/dev/sda1", "/", total=4, used=1)])
        data = info.to_dict()
        assert data["memory"]["total"] == 0
        assert data["disk"][0]["mount_point"] == "/"
        assert data["disk"][0]["percentage"] == 25.0
        assert data["battery"] is None


class TestFormatUptime:
    @pytest.mark.parametrize("seconds, expected", [
        (0, "0m"),
        (59, "0m"),
        (300, "5m"),
        (3600 + 120, "1h 2m"),
        (2 * 86400 + 3 * 3600 + 4 * 60, "2d 3h 4m"),
        (-5, "0m"),
    ])
    def test_format(self, seconds, expected):
        assert si.format_uptime(seconds) == expected


# ── Helpers ──────────────────────────────────────────────────────────────────

class TestHelpers:
    def test_run_missing_binary_is_empty(self):
        assert si._run(["definitely-not-a-real-binary-xyz"]) == ""

    def test_key_value_unquotes(self):
        content = 'NAME="Arch Linux"\nPRETTY_NAME="Arch Linux"\nID=arch\n'
        assert si._key_value(content, "PRETTY_NAME") == "Arch Linux"
        assert si._key_value(content, "ID") == "arch"
        assert si._key_value(content, "VERSION") == ""

    def test_read_missing_file(self, tmp_path):
        assert si._read(str(tmp_path / "absent")) == ""

    def test_termux_from_env(self, monkeypatch):
        monkeypatch.setenv("TERMUX_VERSION", "0.118")
        assert si.is_termux() is True


# ── Individual probes ────────────────────────────────────────────────────────

class TestProbes:
    def test_shell_basename(self, monkeypatch):
        monkeypatch.setenv("SHELL", "/usr/bin/zsh")
        assert si.get_shell() == "zsh"

    def test_shell_missing(self, monkeypatch):
        monkeypatch.delenv("SHELL", raising=False)
        assert si.get_shell() == "unknown"

    def test_username_from_env(self, monkeypatch):
        monkeypatch.setenv("USER", "alice")
        assert si.get_username() == "alice"

    def test_locale(self, monkeypatch):
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        assert si.get_locale() == "en_US.UTF-8"

    def test_memory_used_is_total_minus_available(self, monkeypatch):
        vm = namedtuple("vm", "total available")(1000, 400)
        monkeypatch.setattr(si.psutil, "virtual_memory", lambda: vm)
        mem = si.get_memory()
        assert (mem.total, mem.used, mem.available) == (1000, 600, 400)
        assert mem.percentage == 60.0

    def test_disks_skip_pseudo_filesystems(self, monkeypatch):
        parts = [
            _Part("/dev/sda1", "/", "ext4", "rw"),
            _Part("tmpfs", "/run", "tmpfs", "rw"),
            _Part("overlay", "/var/lib/docker", "overlay", "rw"),
        ]
        monkeypatch.setattr(si.psutil, "disk_partitions", lambda all=False: parts)
        monkeypatch.setattr(si.psutil, "disk_usage", lambda mount: _Usage(100, 40, 60, 40.0))
        disks = si.get_disks()
        assert [d.mount_point for d in disks] == ["/"]
        assert disks[0].filesystem == "ext4"
        assert disks[0].percentage == 40.0

    def test_battery_charging(self, monkeypatch):
        monkeypatch.setattr(si.psutil, "sensors_battery", lambda: _Battery(80.4, -2, True), raising=False)
        batt = si.get_battery()
        assert (batt.percentage, batt.status, batt.time_remaining) == (80, "Charging", None)

    def test_battery_full(self, monkeypatch):
        monkeypatch.setattr(si.psutil, "sensors_battery", lambda: _Battery(100, -2, True), raising=False)
        assert si.get_battery().status == "Full"

    def test_battery_discharging_time_left(self, monkeypatch):
        monkeypatch.setattr(si.psutil, "sensors_battery", lambda: _Battery(50, 5400, False), raising=False)
        batt = si.get_battery()
        assert batt.status == "Discharging"
        assert batt.time_remaining == "1:30"

    def test_no_battery_raises(self, monkeypatch):
        monkeypatch.setattr(si.psutil, "sensors_battery", lambda: None, raising=False)
        with pytest.raises(SystemInfoError):
            si.get_battery()

    def test_local_ip_skips_loopback(self, monkeypatch):
        addrs = {
            "lo": [_Addr(socket.AF_INET, "127.0.0.1", None, None, None)],
            "eth0": [_Addr(socket.AF_INET, "192.168.1.20", None, None, None)],
        }
        monkeypatch.setattr(si.psutil, "net_if_addrs", lambda: addrs)
        assert si.get_local_ip() == "192.168.1.20"

    def test_users(self, monkeypatch):
        sessions = [_User("alice", "pts/0", "", 0, 1), _User("bob", "pts/1", "", 0, 2)]
        monkeypatch.setattr(si.psutil, "users", lambda: sessions)
        assert si.get_users() == ["alice", "bob"]

    def test_window_manager_from_processes(self, monkeypatch):
        monkeypatch.setattr(si, "_process_names", lambda: frozenset({"bash", "sway"}))
        assert si.get_window_manager() == "sway"

    def test_desktop_from_env(self, monkeypatch):
        monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
        assert si.get_desktop_environment() == "gnome"

    def test_gsettings_value_unquoted(self, monkeypatch):
        monkeypatch.setattr(si, "_run", lambda cmd, timeout=5: "'Adwaita-dark'")
        assert si.get_gtk_theme() == "Adwaita-dark"

    def test_package_count_sums_managers(self, monkeypatch):
        outputs = {"pacman": "a 1\nb 2\n", "flatpak": "app\n"}
        monkeypatch.setattr(si, "_run", lambda cmd, timeout=5: outputs.get(cmd[0], ""))
        assert si.count_packages() == 3


# ── gather ───────────────────────────────────────────────────────────────────

def _stub_probes(monkeypatch):
    monkeypatch.setattr(si, "get_username", lambda: "alice")
    monkeypatch.setattr(si, "get_hostname", lambda: "box")
    monkeypatch.setattr(si, "get_os", lambda: "Arch Linux")
    monkeypatch.setattr(si, "get_kernel", lambda: "6.1.0")
    monkeypatch.setattr(si, "get_uptime", lambda: "1h 0m")
    monkeypatch.setattr(si, "count_packages", lambda: 42)
    monkeypatch.setattr(si, "get_shell", lambda: "zsh")
    monkeypatch.setattr(si, "get_resolution", lambda: "1920x1080")
    monkeypatch.setattr(si, "get_desktop_environment", lambda: "gnome")
    monkeypatch.setattr(si, "get_window_manager", lambda: "mutter")
    monkeypatch.setattr(si, "get_terminal", lambda: "kitty")
    monkeypatch.setattr(si, "get_cpu", lambda: "Ryzen 7")
    monkeypatch.setattr(si, "get_gpu", lambda: "Radeon")
    monkeypatch.setattr(si, "get_memory", lambda: MemoryInfo(total=100, used=50, available=50))
    monkeypatch.setattr(si, "get_disks", lambda: [DiskInfo("/dev/sda1", "/", total=10, used=5)])
    monkeypatch.setattr(si, "get_users", lambda: ["alice"])


class TestGather:
    def test_enabled_fields_filled(self, monkeypatch):
        _stub_probes(monkeypatch)

        def no_battery():
            raise SystemInfoError("No battery present")

        monkeypatch.setattr(si, "get_battery", no_battery)
        info = si.gather(cfg.defaults())

        assert info.user == "alice"
        assert info.hostname == "box"
        assert info.os == "Arch Linux"
        assert info.packages == 42
        assert info.memory.percentage == 50.0
        assert info.battery is None
        assert info.date

    def test_disabled_fields_stay_empty(self, monkeypatch):
        _stub_probes(monkeypatch)
        c = cfg.defaults()
        c.info.show_cpu = False
        c.info.show_packages = False
        c.info.show_users = False
        c.info.show_battery = False
        info = si.gather(c)
        assert info.cpu == ""
        assert info.packages == 0
        assert info.users == []

    def test_failed_probe_degrades_to_unknown(self, monkeypatch):
        _stub_probes(monkeypatch)

        def broken():
            raise SystemInfoError("boom")

        monkeypatch.setattr(si, "get_kernel", broken)
        monkeypatch.setattr(si, "get_memory", broken)
        c = cfg.defaults()
        c.info.show_battery = False
        info = si.gather(c)
        assert info.kernel == "unknown"
        assert info.memory.total == 0
        assert info.os == "Arch Linux"

    def test_public_ip_never_fetched(self, monkeypatch):
        _stub_probes(monkeypatch)
        c = cfg.defaults()
        c.info.show_public_ip = True
        c.info.show_battery = False
        assert si.gather(c).public_ip == ""

    def test_optional_fields_when_verbose(self, monkeypatch):
        _stub_probes(monkeypatch)
        c = cfg.defaults()
        cfg.apply_verbose(c)
        c.info.show_battery = False
        monkeypatch.setattr(si, "get_gtk_theme", lambda: "Adwaita")
        monkeypatch.setattr(si, "get_icon_theme", lambda: "Papirus")
        monkeypatch.setattr(si, "get_font", lambda: "Cantarell 11")
        monkeypatch.setattr(si, "get_cursor_theme", lambda: "")
        monkeypatch.setattr(si, "get_local_ip", lambda: "10.0.0.2")
        monkeypatch.setenv("LANG", "C.UTF-8")
        info = si.gather(c)
        assert info.theme == "Adwaita"
        assert info.icons == "Papirus"
        assert info.local_ip == "10.0.0.2"
        assert info.locale == "C.UTF-8"
        assert info.users == ["alice"]
