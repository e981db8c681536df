"""Layout of the fractal art next to a bordered box of system facts."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable, Sequence

from wcwidth import wcswidth, wcwidth

from . import info
from .config import WHITE, Color, Config, ConfigError, FractalType, load_config
from .fractal import generate_ascii

DEFAULT_ART_WIDTH = 60
DEFAULT_ART_HEIGHT = 20

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

_ICON_USER = "\uf007"
_ICON_OS = "\uf17c"
_ICON_KERNEL = "\U000f033d"
_ICON_SHELL = "\uf489"
_ICON_CPU = "\uf4bc"
_ICON_MEMORY = "\U000f0f59"
_ICON_UPTIME = "\U000f144b"
_ICON_DISK = "\uf0a0"
_ICON_IP = "\uf0ac"
_ICON_PACKAGES = "\U000f00be"
_ICON_WM = "\U000f05af"


def visible_width(text: str) -> int:
    """Width of ``text`` on a terminal, ignoring colour escape codes."""
    plain = _ANSI.sub("", text)
    width = wcswidth(plain)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in plain)


def format_line(icon: str, label: str, value: str, color: Color) -> str:
    """One line of the info box: coloured icon and label followed by the value."""
    return f"{color.apply(icon)}  {color.apply(label)}: {value}"


def bordered(lines: Sequence[str]) -> list[str]:
    """Surround ``lines`` with a rounded box, padding each to the widest one."""
    content_width = max((visible_width(line) for line in lines), default=0)
    edge = "─" * (content_width + 2)
    boxed = [f"╭{edge}╮"]
    for line in lines:
        pad = max(0, content_width - visible_width(line))
        boxed.append(f"│ {line}{' ' * pad} │")
    boxed.append(f"╰{edge}╯")
    return boxed


def _enabled(flag: bool | None) -> bool:
    return bool(flag)


def _fact_lines(config: Config, color: Color) -> Iterable[str]:
    if _enabled(config.user_host):
        user, host = info.username(), info.hostname()
        if user is not None and host is not None:
            yield format_line(_ICON_USER, "User", f"{user}@{host}", color)

    if _enabled(config.os):
        name = info.os_pretty_name()
        if name is not None:
            yield format_line(_ICON_OS, "OS", f"{name} {info.arch()}", color)

    if _enabled(config.kernel):
        kernel = info.kernel_version()
        if kernel is not None:
            yield format_line(_ICON_KERNEL, "Kernel", kernel, color)

    if _enabled(config.shell):
        yield format_line(_ICON_SHELL, "Shell", info.shell_version(), color)

    if _enabled(config.cpu):
        model = info.cpu_model() or "Unknown CPU"
        yield format_line(_ICON_CPU, "CPU", model, color)

    if _enabled(config.memory):
        used, total = info.memory_usage() or (0, 0)
        yield format_line(_ICON_MEMORY, "Memory", f"{used} MiB / {total} MiB", color)

    if _enabled(config.uptime):
        yield format_line(_ICON_UPTIME, "Uptime", info.uptime() or "Unknown", color)

    if _enabled(config.disk):
        usage = info.disk_usage()
        if usage is not None:
            used_disk, total_disk = usage
            yield format_line(
                _ICON_DISK, "Disk", f"{used_disk:.3f} GiB / {total_disk:.3f} TiB", color
            )

    if _enabled(config.ip):
        address = info.ip_address()
        if address is not None:
            yield format_line(_ICON_IP, "Ip", address, color)

    if _enabled(config.packages):
        packages = info.package_count()
        if packages is not None:
            yield format_line(_ICON_PACKAGES, "Packages", packages, color)

    if _enabled(config.wm):
        yield format_line(_ICON_WM, "WM", info.window_manager(), color)


def info_lines(config: Config, color: Color) -> list[str]:
    """The enabled system facts, one formatted line each, in display order."""
    return list(_fact_lines(config, color))


def _art(config: Config, color: Color, rng: random.Random | None) -> tuple[list[str], int]:
    art = config.art
    if art is None:
        return [], DEFAULT_ART_WIDTH
    width = art.max_length if art.max_length is not None else DEFAULT_ART_WIDTH
    if art.fractal is None or art.fractal is FractalType.NONE:
        return [], width
    height = art.max_breadth if art.max_breadth is not None else DEFAULT_ART_HEIGHT
    rows = generate_ascii(art.fractal, width, height, rng)
    return [color.apply(row) for row in rows], width


def render(config: Config, rng: random.Random | None = None) -> list[str]:
    """All output lines: the art on the left, the info box on the right."""
    color = config.accent_color or WHITE
    art_lines, art_width = _art(config, color, rng)
    box = bordered(info_lines(config, color))

    rows = max(len(art_lines), len(box))
    art_lines += [""] * (rows - len(art_lines))
    box += [""] * (rows - len(box))
    return [f"{left:<{art_width}}  {right}" for left, right in zip(art_lines, box)]


def print_info(config: Config) -> None:
    """Write the rendered output to standard output."""
    for line in render(config):
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the user's configuration and print the system summary."""
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"kensaku: {exc}", file=sys.stderr)
        return 1
    try:
        print_info(config)
    except RuntimeError as exc:
        print(f"kensaku: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())