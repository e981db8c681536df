# kensaku

`kensaku` prints a short summary of your system inside a rounded box.
To the left of the box it can draw a fractal in ASCII art, either the
Mandelbrot set or a Julia set, in an accent colour you choose.

Most of the facts come from the usual Linux locations (`/proc/cpuinfo`,
`/proc/meminfo`, `/proc/uptime`, `/proc/sys/kernel/osrelease`,
`/etc/os-release`, `/etc/hostname`).

## Installation

```
pip install .
```

## Usage

```
kensaku
```

The command takes no options. It loads the configuration file and prints
the art and the info box. If the file is missing or cannot be parsed it
prints `kensaku: <reason>` to standard error and exits with status 1.

## Configuration

The file is `kensaku/config.toml` inside your user configuration
directory, as given by `kensaku.config.config_path()`. On Linux this is
usually `~/.config/kensaku/config.toml`.

Every information line is off unless you turn it on:

```toml
accent_color = "cyan"   # black, red, green, yellow, blue, magenta, cyan, white, or "color256(N)" with N from 0 to 255

user_host = true
os = true
kernel = true
shell = true
cpu = true
memory = true
uptime = true
disk = true
ip = true
packages = true
wm = true

[art]
max_length = 60          # width of the art column (default 60)
max_breadth = 20         # number of art rows (default 20)
fractal = "julia_set"    # "mandelbrot_set", "julia_set" or "none"
```

Colour names are matched without regard to case. If `accent_color` is not
set, white is used. Without an `[art]` table, or with `fractal` unset or
`"none"`, no art is drawn. A wrong type, an unknown colour or an unknown
fractal name is reported as a `ConfigError`.

A Julia set uses a different random constant on every run, chosen on the
boundary of the Mandelbrot set's main cardioid.

### What each line shows

- **User**: login name and host name.
- **OS**: `PRETTY_NAME` from `/etc/os-release` and the machine architecture.
- **Kernel**: the kernel release.
- **Shell**: the first line of `$SHELL --version` (`/bin/sh` if `SHELL` is unset).
- **CPU**: the first `model name` in `/proc/cpuinfo`, or `Unknown CPU`.
- **Memory**: used and total memory in MiB.
- **Uptime**: hours and minutes since boot, or `Unknown`.
- **Disk**: used and total space over all mounted disks. Both numbers are
  in TiB, although the used figure carries the label `GiB`.
- **Ip**: the local address of the route to the internet, found by
  connecting a UDP socket (no packet is sent).
- **Packages**: counts from `pacman -Q` and `flatpak list`, for whichever
  of them is installed.
- **WM**: `XDG_CURRENT_DESKTOP`, `XDG_DESKTOP_SESSION` or `DESKTOP_SESSION`;
  otherwise the last word of `~/.xinitrc`; otherwise the first known
  window manager among the running processes; otherwise `Unknown`.

A line whose fact cannot be found is left out, except those that fall back
to a placeholder as noted above.

## Using it as a library

```python
import random

from kensaku.config import load_config
from kensaku.output import render

config = load_config()          # or load_config("path/to/config.toml")
for line in render(config, random.Random(1)):
    print(line)
```

- `kensaku.config` has `parse_config` (TOML text to `Config`),
  `parse_color`, `load_config` and `config_path`.
- `kensaku.fractal.generate_ascii(fractal, width, height, rng)` draws the
  art on its own; `mandelbrot` and `julia` draw one set each.
- `kensaku.info` has one function per fact. Those that read a file take
  its path as an argument, and `shell_version` and `window_manager` take
  the environment to look in.
- `kensaku.output` has `format_line`, `bordered`, `info_lines`, `render`
  and `print_info`.

## Limits

Only pacman and flatpak packages are counted. The facts read from `/proc`
and `/etc` are only available on Linux; elsewhere those lines are left out
or show their placeholder.