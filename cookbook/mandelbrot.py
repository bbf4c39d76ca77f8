"""PNG images of the Mandelbrot fractal and a few other complex functions."""

from __future__ import annotations

import argparse
import cmath
import sys
from typing import Callable, Sequence

from PIL import Image

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y)


def _clamp(v: int) -> int:
    return max(0, min(255, v >> 16))


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy = y * 0x10101
    cb -= 128
    cr -= 128
    return (
        _clamp(yy + 91881 * cr),
        _clamp(yy - 22554 * cb - 46802 * cr),
        _clamp(yy + 116130 * cb),
    )


def mandelbrot(z: complex) -> Color:
    """Shade z by how quickly the Mandelbrot iteration escapes."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def _byte(x: float) -> int:
    return (int(x) + 127) & 0xFF


def acos(z: complex) -> Color:
    """Colour z by its complex arc cosine."""
    v = cmath.acos(z)
    return _ycbcr(192, _byte(v.real * 128), _byte(v.imag * 128))


def sqrt(z: complex) -> Color:
    """Colour z by its complex square root."""
    v = cmath.sqrt(z)
    return _ycbcr(128, _byte(v.real * 128), _byte(v.imag * 128))


def newton(z: complex) -> Color:
    """Shade z by how quickly Newton's method finds a root of z**4 - 1."""
    iterations, contrast = 37, 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except (ZeroDivisionError, OverflowError):
            return BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return BLACK


def render(
    width: int = 1024, height: int = 1024, func: Callable[[complex], Color] = mandelbrot
) -> Image.Image:
    """Plot func over the square from -2-2i to 2+2i."""
    xmin, ymin, xmax, ymax = -2, -2, 2, 2
    img = Image.new("RGB", (width, height))
    pixels = img.load()
    for py in range(height):
        y = py / height * (ymax - ymin) + ymin
        for px in range(width):
            x = px / width * (xmax - xmin) + xmin
            pixels[px, py] = func(complex(x, y))
    return img


_FUNCS = {"mandelbrot": mandelbrot, "acos": acos, "sqrt": sqrt, "newton": newton}


def main(argv: Sequence[str] | None = None) -> int:
    """Write a PNG of the chosen function to standard output."""
    parser = argparse.ArgumentParser(prog="mandelbrot")
    parser.add_argument("func", nargs="?", default="mandelbrot", choices=sorted(_FUNCS))
    ns = parser.parse_args(argv)
    render(func=_FUNCS[ns.func]).save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0