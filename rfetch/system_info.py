"""
System information gathering.

gather() builds a SystemInfo snapshot once per run. Each probe is small
and isolated: a probe that cannot produce a value raises SystemInfoError,
gather() logs it at DEBUG and keeps the field's empty value. Nothing here
aborts the run.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import shutil
import socket
import subprocess
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import psutil

from rfetch.errors import SystemInfoError

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN = "unknown"
COLOR_SWATCHES = 8


# ── Data model ────────────────────────────────────────────────────────────────

def _percent(used: int, total: int) -> float:
    return (used / total) * 100.0 if total > 0 else 0.0


@dataclass
class MemoryInfo:
    total: int = 0
    used: int = 0
    available: int = 0
    percentage: Optional[float] = None

    def __post_init__(self) -> None:
        if self.percentage is None:
            self.percentage = _percent(self.used, self.total)


@dataclass
class DiskInfo:
    device: str
    mount_point: str
    total: int = 0
    used: int = 0
    available: int = 0
    percentage: Optional[float] = None
    filesystem: str = UNKNOWN

    def __post_init__(self) -> None:
        if self.percentage is None:
            self.percentage = _percent(self.used, self.total)


@dataclass
class BatteryInfo:
    percentage: int
    status: str
    time_remaining: Optional[str] = None


@dataclass
class SystemInfo:
    user: str = UNKNOWN
    hostname: str = UNKNOWN
    os: str = ""
    kernel: str = ""
    uptime: str = ""
    packages: int = 0
    shell: str = ""
    resolution: str = ""
    desktop_environment: str = ""
    window_manager: str = ""
    theme: str = ""
    icons: str = ""
    font: str = ""
    cursor: str = ""
    terminal: str = ""
    cpu: str = ""
    gpu: str = ""
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    disk: list[DiskInfo] = field(default_factory=list)
    battery: Optional[BatteryInfo] = None
    locale: str = ""
    local_ip: str = ""
    public_ip: str = ""
    users: list[str] = field(default_factory=list)
    date: str = ""
    colors: list[str] = field(default_factory=lambda: ["■"] * COLOR_SWATCHES)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _run(cmd: list[str], timeout: int = 5) -> str:
    """Run a command and return stdout. Returns '' on any error."""
    if shutil.which(cmd[0]) is None:
        return ""
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
        return result.stdout.strip()
    except (OSError, subprocess.SubprocessError):
        return ""


def _read(path: str) -> str:
    """Read a small text file. Returns '' if it is missing or unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ""


def _key_value(content: str, key: str) -> str:
    """Value of KEY=value in an os-release style file, unquoted."""
    for line in content.splitlines():
        if line.startswith(f"{key}="):
            return line.split("=", 1)[1].strip().strip('"')
    return ""


def format_uptime(seconds: int) -> str:
    """Render seconds as 'Xd Yh Zm', 'Yh Zm' or 'Zm'."""
    seconds = max(0, int(seconds))
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


@lru_cache(maxsize=1)
def is_termux() -> bool:
    return (
        "TERMUX_VERSION" in os.environ
        or "com.termux" in os.environ.get("PREFIX", "")
        or Path("/data/data/com.termux").exists()
    )


@lru_cache(maxsize=1)
def _process_names() -> frozenset[str]:
    """Names of every running process we are allowed to see."""
    names = set()
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if name:
            names.add(name)
    return frozenset(names)


# ── Identity ──────────────────────────────────────────────────────────────────

def get_username() -> str:
    user = os.environ.get("USER") or os.environ.get("USERNAME")
    if user:
        return user
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return UNKNOWN


def get_hostname() -> str:
    name = _read("/proc/sys/kernel/hostname").strip() or platform.node() or socket.gethostname()
    return name or UNKNOWN


# ── OS & kernel ───────────────────────────────────────────────────────────────

def get_os() -> str:
    system = platform.system()

    if system == "Linux":
        if is_termux():
            version = os.environ.get("TERMUX_VERSION")
            return f"Termux {version}" if version else "Termux"

        os_release = _read("/etc/os-release")
        if Path("/etc/arch-release").exists():
            return _key_value(os_release, "PRETTY_NAME") or "Arch Linux"

        lsb = _read("/etc/lsb-release")
        distrib_id = _key_value(lsb, "DISTRIB_ID")
        distrib_release = _key_value(lsb, "DISTRIB_RELEASE")
        if distrib_id and distrib_release:
            return f"{distrib_id} {distrib_release}"

        pretty = _key_value(os_release, "PRETTY_NAME")
        if pretty:
            return pretty

        issue = _read("/etc/issue").splitlines()
        if issue:
            first = issue[0].replace("\\n", "").replace("\\l", "").strip()
            if first:
                return first
        return "Linux"

    if system == "Darwin":
        product = _run(["sw_vers", "-productName"])
        version = _run(["sw_vers", "-productVersion"]) or platform.mac_ver()[0]
        return f"{product or 'macOS'} {version}".strip()

    if system == "Windows":
        return f"Windows {platform.release()}".strip()

    if system:
        return f"{system} {platform.release()}".strip()
    raise SystemInfoError("Could not determine operating system")


def get_kernel() -> str:
    release = platform.release()
    if not release:
        raise SystemInfoError("Could not determine kernel release")
    return release


def get_uptime() -> str:
    try:
        boot = psutil.boot_time()
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not read boot time: {e}") from e
    return format_uptime(int(time.time() - boot))


# ── Packages ──────────────────────────────────────────────────────────────────

# (manager, args). Termux's pkg comes before FreeBSD's pkg; the first one
# that reports anything wins so packages are not counted twice.
_PACKAGE_MANAGERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pacman", ("-Q",)),
    ("dpkg-query", ("-f", "${binary:Package}\n", "-W")),
    ("rpm", ("-qa",)),
    ("emerge", ("--list-installed",)),
    ("pkg", ("list-installed",)),
    ("pkg", ("info",)),
    ("brew", ("list", "--formula")),
    ("port", ("installed",)),
    ("nix-env", ("-q",)),
    ("flatpak", ("list",)),
    ("snap", ("list",)),
)


def count_packages() -> int:
    total = 0
    pkg_counted = False
    for manager, args in _PACKAGE_MANAGERS:
        if manager == "pkg" and pkg_counted:
            continue
        out = _run([manager, *args], timeout=10)
        lines = sum(1 for line in out.splitlines() if line.strip())
        if manager == "pkg" and lines:
            pkg_counted = True
        total += lines
    logger.debug("counted %d packages", total)
    return total


# ── Session & desktop ─────────────────────────────────────────────────────────

def get_shell() -> str:
    shell = os.environ.get("SHELL")
    return Path(shell).name if shell else UNKNOWN


def get_resolution() -> str:
    for line in _run(["xrandr", "--current"]).splitlines():
        if "*" in line and "x" in line:
            parts = line.split()
            if parts:
                return parts[0]
    return UNKNOWN


_DE_VARS = (
    "XDG_CURRENT_DESKTOP",
    "DESKTOP_SESSION",
    "GDMSESSION",
    "KDE_SESSION_VERSION",
    "GNOME_DESKTOP_SESSION_ID",
)

_DE_PROCESSES = (
    "gnome-session",
    "kde-session",
    "xfce4-session",
    "lxsession",
    "mate-session",
    "cinnamon-session",
)

_WM_PROCESSES = (
    "i3", "sway", "bspwm", "dwm", "awesome", "xmonad",
    "openbox", "fluxbox", "blackbox", "fvwm", "jwm",
    "herbstluftwm", "qtile", "spectrwm", "cwm", "2bwm",
)


def get_desktop_environment() -> str:
    for var in _DE_VARS:
        value = os.environ.get(var)
        if value:
            return value.lower()
    running = _process_names()
    for proc in _DE_PROCESSES:
        if proc in running:
            return proc.replace("-session", "")
    return UNKNOWN


def get_window_manager() -> str:
    running = _process_names()
    for wm in _WM_PROCESSES:
        if wm in running:
            return wm
    return os.environ.get("WINDOW_MANAGER") or UNKNOWN


def _gsetting(key: str) -> str:
    value = _run(["gsettings", "get", "org.gnome.desktop.interface", key])
    return value.strip("'\"")


def get_gtk_theme() -> str:
    return _gsetting("gtk-theme")


def get_icon_theme() -> str:
    return _gsetting("icon-theme")


def get_font() -> str:
    return _gsetting("font-name")


def get_cursor_theme() -> str:
    return _gsetting("cursor-theme")


_TERMINAL_VARS = ("TERM_PROGRAM", "TERMINAL_EMULATOR", "TERM", "COLORTERM")
_GENERIC_TERMS = ("xterm-256color", "screen")


def get_terminal() -> str:
    if is_termux():
        return "Termux"
    for var in _TERMINAL_VARS:
        value = os.environ.get(var)
        if value and value not in _GENERIC_TERMS:
            return value
    try:
        parent = psutil.Process(os.getppid()).name()
    except (OSError, psutil.Error):
        parent = ""
    return parent or UNKNOWN


# ── Hardware ──────────────────────────────────────────────────────────────────

def get_cpu() -> str:
    system = platform.system()

    if system == "Linux":
        if is_termux():
            abi = _run(["getprop", "ro.product.cpu.abi"])
            if abi:
                model = _run(["getprop", "ro.product.model"])
                return f"{model} ({abi})" if model else abi

        for line in _read("/proc/cpuinfo").splitlines():
            if line.startswith("model name"):
                return line.split(":", 1)[1].strip()

        for line in _run(["lscpu"]).splitlines():
            if line.startswith("Model name:"):
                return line.split(":", 1)[1].strip()

    elif system == "Darwin":
        brand = _run(["sysctl", "-n", "machdep.cpu.brand_string"])
        if brand:
            return brand

    return platform.processor() or UNKNOWN


def get_gpu() -> str:
    system = platform.system()

    if system == "Darwin":
        profile = _run(["system_profiler", "SPDisplaysDataType"], timeout=10)
        name, cores = "", ""
        for line in profile.splitlines():
            stripped = line.strip()
            if stripped.startswith("Chipset Model:") and not name:
                name = stripped.split(":", 1)[1].strip()
            elif stripped.startswith("Total Number of Cores:") and not cores:
                cores = stripped.split(":", 1)[1].strip()
        if name:
            return f"{name} ({cores} cores)" if cores else name

    elif system == "Linux":
        if is_termux():
            vulkan = _run(["getprop", "ro.hardware.vulkan"])
            if vulkan and vulkan != "0":
                return f"Vulkan: {vulkan}"
            egl = _run(["getprop", "ro.hardware.egl"])
            if egl:
                return f"EGL: {egl}"
            return "Integrated"

        for line in _run(["lspci"]).splitlines():
            if "VGA" in line or "3D" in line:
                parts = line.split(":")
                if len(parts) > 2:
                    return parts[2].strip()

    return UNKNOWN


def get_memory() -> MemoryInfo:
    try:
        mem = psutil.virtual_memory()
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not read memory information: {e}") from e
    used = mem.total - mem.available
    return MemoryInfo(total=mem.total, used=used, available=mem.available)


_PSEUDO_FILESYSTEMS = frozenset({"tmpfs", "devtmpfs", "squashfs", "overlay"})


def get_disks() -> list[DiskInfo]:
    disks: list[DiskInfo] = []
    try:
        partitions = psutil.disk_partitions(all=False)
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not list disk partitions: {e}") from e

    for part in partitions:
        if part.fstype in _PSEUDO_FILESYSTEMS or part.device.startswith(("tmpfs", "devtmpfs")):
            continue
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (OSError, psutil.Error):
            logger.debug("skipping unreadable mount %s", part.mountpoint)
            continue
        disks.append(DiskInfo(
            device=part.device,
            mount_point=part.mountpoint,
            total=usage.total,
            used=usage.used,
            available=usage.free,
            percentage=usage.percent,
            filesystem=part.fstype or UNKNOWN,
        ))
    return disks


def _format_secs_left(secs: Any) -> Optional[str]:
    if not isinstance(secs, int) or secs < 0:
        return None
    hours, rest = divmod(secs, 3600)
    return f"{hours}:{rest // 60:02d}"


def get_battery() -> BatteryInfo:
    sensor = getattr(psutil, "sensors_battery", None)
    if sensor is None:
        raise SystemInfoError("Battery sensors are not supported on this platform")
    try:
        batt = sensor()
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not read battery: {e}") from e
    if batt is None:
        raise SystemInfoError("No battery present")

    percent = int(batt.percent)
    if batt.power_plugged:
        status = "Full" if percent >= 100 else "Charging"
        remaining = None
    else:
        status = "Discharging"
        remaining = _format_secs_left(batt.secsleft)
    return BatteryInfo(percentage=percent, status=status, time_remaining=remaining)


# ── Network & users ───────────────────────────────────────────────────────────

def get_locale() -> str:
    return os.environ.get("LANG") or UNKNOWN


def get_local_ip() -> str:
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not list network interfaces: {e}") from e
    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                return addr.address
    return UNKNOWN


def get_users() -> list[str]:
    try:
        sessions = psutil.users()
    except (OSError, psutil.Error) as e:
        raise SystemInfoError(f"Could not list logged-in users: {e}") from e
    return [s.name for s in sessions if s.name]


# ── Entry point ───────────────────────────────────────────────────────────────

def _probe(name: str, fn: Callable[[], T], default: T) -> T:
    """Call one probe; on SystemInfoError log it and return `default`."""
    try:
        return fn()
    except SystemInfoError as e:
        logger.debug("probe %s degraded: %s", name, e.message)
        return default


def gather(config) -> SystemInfo:
    """Run every probe whose show_* flag is enabled and return the snapshot."""
    flags = config.info
    info = SystemInfo(
        user=get_username(),
        hostname=get_hostname(),
        date=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    )

    if flags.show_os:
        info.os = _probe("os", get_os, UNKNOWN)
    if flags.show_kernel:
        info.kernel = _probe("kernel", get_kernel, UNKNOWN)
    if flags.show_uptime:
        info.uptime = _probe("uptime", get_uptime, UNKNOWN)
    if flags.show_packages:
        info.packages = _probe("packages", count_packages, 0)
    if flags.show_shell:
        info.shell = _probe("shell", get_shell, UNKNOWN)
    if flags.show_resolution:
        info.resolution = _probe("resolution", get_resolution, UNKNOWN)
    if flags.show_de:
        info.desktop_environment = _probe("de", get_desktop_environment, UNKNOWN)
    if flags.show_wm:
        info.window_manager = _probe("wm", get_window_manager, UNKNOWN)
    if flags.show_theme:
        info.theme = _probe("theme", get_gtk_theme, "")
    if flags.show_icons:
        info.icons = _probe("icons", get_icon_theme, "")
    if flags.show_font:
        info.font = _probe("font", get_font, "")
    if flags.show_cursor:
        info.cursor = _probe("cursor", get_cursor_theme, "")
    if flags.show_terminal:
        info.terminal = _probe("terminal", get_terminal, UNKNOWN)
    if flags.show_cpu:
        info.cpu = _probe("cpu", get_cpu, UNKNOWN)
    if flags.show_gpu:
        info.gpu = _probe("gpu", get_gpu, UNKNOWN)
    if flags.show_memory:
        info.memory = _probe("memory", get_memory, MemoryInfo())
    if flags.show_disk:
        info.disk = _probe("disk", get_disks, [])
    if flags.show_battery:
        info.battery = _probe("battery", get_battery, None)
    if flags.show_locale:
        info.locale = _probe("locale", get_locale, UNKNOWN)
    if flags.show_local_ip:
        info.local_ip = _probe("local_ip", get_local_ip, UNKNOWN)
    if flags.show_users:
        info.users = _probe("users", get_users, [])

    return info
