"""Text renderings of the Mandelbrot set and of Julia sets."""

from __future__ import annotations

import math
import random

from .config import FractalType

MAX_ITER = 80


def shade(iterations: int, max_iter: int = MAX_ITER) -> str:
    """Character for a point that escaped after ``iterations`` steps."""
    if iterations == max_iter:
        return "█"
    if iterations > max_iter // 2:
        return "▓"
    if iterations > max_iter // 4:
        return "▒"
    if iterations > max_iter // 8:
        return "░"
    return " "


def _escape_time(x: float, y: float, cx: float, cy: float) -> int:
    iterations = 0
    while x * x + y * y <= 4.0 and iterations < MAX_ITER:
        x, y = x * x - y * y + cx, 2.0 * x * y + cy
        iterations += 1
    return iterations


def _grid(width: int, height: int, x_min: float, x_max: float):
    for j in range(height):
        y0 = -1.0 + 2.0 * (j / height)
        yield [(x_min + (x_max - x_min) * (i / width), y0) for i in range(width)]


def mandelbrot(width: int, height: int) -> list[str]:
    """Render the Mandelbrot set over [-2, 1] x [-1, 1]."""
    return [
        "".join(shade(_escape_time(0.0, 0.0, x0, y0)) for x0, y0 in row)
        for row in _grid(width, height, -2.0, 1.0)
    ]


def random_julia_constant(rng: random.Random | None = None) -> complex:
    """Pick a point on the main cardioid's boundary with |Im| above 0.5."""
    rng = rng or random.Random()
    while True:
        theta = rng.random() * math.tau
        cx = 0.5 * math.cos(theta) - 0.25 * math.cos(2.0 * theta)
        cy = 0.5 * math.sin(theta) - 0.25 * math.sin(2.0 * theta)
        if abs(cy) > 0.5:
            return complex(cx, cy)


def julia(width: int, height: int, c: complex) -> list[str]:
    """Render the Julia set for ``c`` over [-1.5, 1.5] x [-1, 1]."""
    return [
        "".join(shade(_escape_time(x0, y0, c.real, c.imag)) for x0, y0 in row)
        for row in _grid(width, height, -1.5, 1.5)
    ]


def generate_ascii(
    fractal: FractalType, width: int, height: int, rng: random.Random | None = None
) -> list[str]:
    """Render the requested fractal as lines of text."""
    if fractal is FractalType.MANDELBROT_SET:
        return mandelbrot(width, height)
    if fractal is FractalType.JULIA_SET:
        return julia(width, height, random_julia_constant(rng))
    return []