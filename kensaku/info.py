"""Gathering of system facts: CPU, memory, uptime, OS, disk, network, packages, shell, WM."""

from __future__ import annotations

import math
import os
import platform
import re
import shutil
import socket
import subprocess
from collections.abc import Mapping
from pathlib import Path

import psutil

try:
    import pwd
except ImportError:  # not available on every platform
    pwd = None

_UNSIGNED = re.compile(r"\+?\d+")
_MAX_U64 = 2**64 - 1
_TIB = 1024.0**4

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
}

_NATIVE_MANAGERS = (("pacman", ("-Q",), 0),)

_KNOWN_WMS = frozenset(
    {
        "hyprland", "sway", "i3", "bspwm", "openbox", "fluxbox",
        "xmonad", "herbstluftwm", "awesome", "kwin", "mutter", "marco",
    }
)

_DESKTOP_VARIABLES = ("XDG_CURRENT_DESKTOP", "XDG_DESKTOP_SESSION", "DESKTOP_SESSION")


def _read_text(path: Path | str) -> str | None:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _read_trimmed(path: Path | str) -> str | None:
    text = _read_text(path)
    return text.strip() if text is not None else None


def cpu_model(path: Path | str = "/proc/cpuinfo") -> str | None:
    """Model name of the first CPU listed in ``path``."""
    contents = _read_text(path)
    if contents is None:
        return None
    for line in contents.splitlines():
        if line.startswith("model name"):
            parts = line.split(":")
            return parts[1].strip() if len(parts) > 1 else None
    return None


def _kib(line: str) -> int:
    fields = line.split()
    if len(fields) > 1 and _UNSIGNED.fullmatch(fields[1]):
        value = int(fields[1])
        return value if value <= _MAX_U64 else 0
    return 0


def memory_usage(path: Path | str = "/proc/meminfo") -> tuple[int, int] | None:
    """Used and total memory in MiB."""
    contents = _read_text(path)
    if contents is None:
        return None
    total = available = free = 0
    for line in contents.splitlines():
        if line.startswith("MemTotal:"):
            total = _kib(line)
        elif line.startswith("MemAvailable:"):
            available = _kib(line)
        elif line.startswith("MemFree:"):
            free = _kib(line)
    used = max(0, total - max(available, free))
    return used // 1024, total // 1024


def uptime(path: Path | str = "/proc/uptime") -> str | None:
    """Time since boot as ``"<hours>h <minutes>m"``."""
    contents = _read_text(path)
    if contents is None:
        return None
    fields = contents.split()
    if not fields or "_" in fields[0]:
        return None
    try:
        seconds = float(fields[0])
    except ValueError:
        return None
    if math.isnan(seconds) or seconds <= 0:
        secs = 0
    elif math.isinf(seconds):
        secs = _MAX_U64
    else:
        secs = min(int(seconds), _MAX_U64)
    hours, rest = divmod(secs, 3600)
    return f"{hours}h {rest // 60}m"


def hostname(path: Path | str = "/etc/hostname") -> str | None:
    return _read_trimmed(path)


def kernel_version(path: Path | str = "/proc/sys/kernel/osrelease") -> str | None:
    return _read_trimmed(path)


def os_pretty_name(path: Path | str = "/etc/os-release") -> str | None:
    """Value of PRETTY_NAME in an os-release file, without quotes."""
    contents = _read_text(path)
    if contents is None:
        return None
    prefix = "PRETTY_NAME="
    for line in contents.splitlines():
        if line.startswith(prefix):
            while line.startswith(prefix):
                line = line[len(prefix):]
            return line.strip('"')
    return None


def arch() -> str:
    """Name of the machine architecture, e.g. ``x86_64`` or ``aarch64``."""
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def username() -> str | None:
    """Login name of the current user, if it can be found."""
    if pwd is None:
        try:
            return os.getlogin()
        except OSError:
            return None
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return None


def disk_usage() -> tuple[float, float] | None:
    """Used and total space over all mounted disks, in TiB."""
    total = available = 0
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        total += usage.total
        available += usage.free
    if total == 0:
        return None
    used = max(0, total - available)
    return used / _TIB, total / _TIB


def ip_address() -> str | None:
    """Local address that would be used to reach the internet."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(("0.0.0.0", 0))
            sock.connect(("8.8.8.8", 80))
            return sock.getsockname()[0]
    except OSError:
        return None


def _run(args: list[str]) -> str | None:
    try:
        result = subprocess.run(args, capture_output=True, check=False)
    except OSError:
        return None
    return result.stdout.decode("utf-8", errors="replace")


def _count_lines(text: str, skip: int = 0) -> int:
    return sum(1 for line in text.splitlines()[skip:] if line.strip())


def package_count() -> str | None:
    """Number of installed native and flatpak packages."""
    native = 0
    for command, args, skip in _NATIVE_MANAGERS:
        if shutil.which(command):
            stdout = _run([command, *args])
            if stdout is None:
                return None
            if command == "zypper":
                native = sum(1 for line in stdout.splitlines() if "| i " in line)
            else:
                native = _count_lines(stdout, skip)
            break

    flatpak = 0
    if shutil.which("flatpak"):
        stdout = _run(["flatpak", "list"])
        if stdout is None:
            return None
        flatpak = _count_lines(stdout)

    return f"{native} (native), {flatpak} (flatpak)"


def shell_version(environ: Mapping[str, str] | None = None) -> str:
    """First line of ``$SHELL --version``, with its first letter capitalised."""
    env = os.environ if environ is None else environ
    shell = env.get("SHELL", "/bin/sh")
    try:
        result = subprocess.run([shell, "--version"], capture_output=True, check=False)
    except OSError as exc:
        raise RuntimeError("failed to get shell version") from exc
    lines = result.stdout.decode("utf-8", errors="replace").splitlines()
    line = lines[0] if lines else ""
    return line[:1].upper() + line[1:]


def _wm_from_xinitrc(home: Path | None) -> str | None:
    if home is None:
        return None
    contents = _read_text(home / ".xinitrc")
    if not contents:
        return None
    lines = contents.splitlines()
    if not lines:
        return None
    words = lines[-1].split()
    return words[-1] if words else None


def _wm_from_processes() -> str | None:
    try:
        result = subprocess.run(["ps", "axo", "comm"], capture_output=True, check=False)
        stdout = result.stdout.decode("utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    for line in stdout.splitlines():
        name = line.strip().lower()
        if name in _KNOWN_WMS:
            return name
    return None


def window_manager(
    environ: Mapping[str, str] | None = None, home: Path | str | None = None
) -> str:
    """Desktop or window manager, from the environment, ~/.xinitrc or running processes."""
    env = os.environ if environ is None else environ
    for variable in _DESKTOP_VARIABLES:
        if variable in env:
            return env[variable]

    if home is None:
        try:
            home_dir: Path | None = Path.home()
        except RuntimeError:
            home_dir = None
    else:
        home_dir = Path(home)

    return _wm_from_xinitrc(home_dir) or _wm_from_processes() or "Unknown"