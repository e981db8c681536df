"""Configuration loading: accent colour, fractal art and which fields to show."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import platformdirs

_RESET = "\x1b[0m"
_COLOR256 = re.compile(r"\+?\d+")
_MAX_USIZE = 2**64 - 1

_FLAG_FIELDS = (
    "user_host",
    "cpu",
    "memory",
    "uptime",
    "os",
    "kernel",
    "disk",
    "ip",
    "packages",
    "shell",
    "wm",
)


class ConfigError(Exception):
    """Raised when the configuration cannot be found or understood."""


@dataclass(frozen=True)
class Color:
    """A terminal foreground colour: one of the eight basic ones or a 256-colour index."""

    index: int
    extended: bool = False

    def apply(self, text: str) -> str:
        """Wrap ``text`` in the escape codes for this colour."""
        code = f"38;5;{self.index}" if self.extended else str(30 + self.index)
        return f"\x1b[{code}m{text}{_RESET}"


BLACK = Color(0)
RED = Color(1)
GREEN = Color(2)
YELLOW = Color(3)
BLUE = Color(4)
MAGENTA = Color(5)
CYAN = Color(6)
WHITE = Color(7)

_NAMED_COLORS = {
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
}


class FractalType(Enum):
    MANDELBROT_SET = "mandelbrot_set"
    JULIA_SET = "julia_set"
    NONE = "none"


@dataclass
class ArtConfig:
    max_length: int | None = None
    max_breadth: int | None = None
    fractal: FractalType | None = None


@dataclass
class Config:
    accent_color: Color | None = None
    art: ArtConfig | None = None
    user_host: bool | None = None
    cpu: bool | None = None
    memory: bool | None = None
    uptime: bool | None = None
    os: bool | None = None
    kernel: bool | None = None
    disk: bool | None = None
    ip: bool | None = None
    packages: bool | None = None
    shell: bool | None = None
    wm: bool | None = None


def parse_color(raw: str) -> Color:
    """Parse a colour name or ``color256(N)``, ignoring case."""
    name = raw.lower()
    if name in _NAMED_COLORS:
        return _NAMED_COLORS[name]
    if name.startswith("color256(") and name.endswith(")"):
        inner = name[9:-1]
        if not _COLOR256.fullmatch(inner):
            raise ConfigError(f"invalid digit found in string: {inner!r}")
        value = int(inner)
        if value > 255:
            raise ConfigError("number too large to fit in target type")
        return Color(value, extended=True)
    raise ConfigError("Invalid color")


def _bool_field(table: dict[str, Any], key: str) -> bool | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"invalid type for {key!r}: expected a boolean")
    return value


def _size_field(table: dict[str, Any], key: str) -> int | None:
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid type for {key!r}: expected an integer")
    if not 0 <= value <= _MAX_USIZE:
        raise ConfigError(f"invalid value for {key!r}: {value}")
    return value


def _parse_art(table: Any) -> ArtConfig:
    if not isinstance(table, dict):
        raise ConfigError("invalid type for 'art': expected a table")
    fractal = table.get("fractal")
    if fractal is not None:
        if not isinstance(fractal, str):
            raise ConfigError("invalid type for 'fractal': expected a string")
        try:
            fractal = FractalType(fractal)
        except ValueError:
            raise ConfigError(f"unknown fractal: {fractal!r}") from None
    return ArtConfig(
        max_length=_size_field(table, "max_length"),
        max_breadth=_size_field(table, "max_breadth"),
        fractal=fractal,
    )


def parse_config(text: str) -> Config:
    """Build a :class:`Config` from TOML text."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse config file: {exc}") from exc

    accent = data.get("accent_color")
    if accent is not None:
        if not isinstance(accent, str):
            raise ConfigError("invalid type for 'accent_color': expected a string")
        accent = parse_color(accent)

    art = data.get("art")
    flags = {key: _bool_field(data, key) for key in _FLAG_FIELDS}
    return Config(
        accent_color=accent,
        art=_parse_art(art) if art is not None else None,
        **flags,
    )


def config_path() -> Path:
    """Location of the user's configuration file."""
    return platformdirs.user_config_path(roaming=True) / "kensaku" / "config.toml"


def load_config(path: Path | str | None = None) -> Config:
    """Read and parse the configuration file (by default the one at :func:`config_path`)."""
    target = Path(path) if path is not None else config_path()
    try:
        contents = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not find config at: {target}") from exc
    return parse_config(contents)