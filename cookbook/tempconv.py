"""Celsius, Fahrenheit and Kelvin temperatures and conversions between them."""

from __future__ import annotations

import argparse
import math
import re
import sys
from typing import ClassVar, Sequence

from cookbook.textfmt import format_g, quote


class _Temperature(float):
    """A temperature value that prints with its unit."""

    _suffix: ClassVar[str] = ""

    def __str__(self) -> str:
        return format_g(self) + self._suffix

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    _suffix = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    _suffix = "°F"


class Kelvin(_Temperature):
    """A temperature in kelvins."""

    _suffix = " K"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)

ABSOLUTE_ZERO_F = Fahrenheit(-459.67)
FREEZING_F = Fahrenheit(32)
BOILING_F = Fahrenheit(212)

ABSOLUTE_ZERO_K = Kelvin(0)
FREEZING_K = Kelvin(273.15)
BOILING_K = Kelvin(373.15)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def c_to_k(c: float) -> Kelvin:
    """Convert a Celsius temperature to Kelvin."""
    return Kelvin(c + 273.15)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def f_to_k(f: float) -> Kelvin:
    """Convert a Fahrenheit temperature to Kelvin."""
    return Kelvin((f + 459.67) * 5 / 9)


def k_to_c(k: float) -> Celsius:
    """Convert a Kelvin temperature to Celsius."""
    return Celsius(k - 273.15)


def k_to_f(k: float) -> Fahrenheit:
    """Convert a Kelvin temperature to Fahrenheit."""
    return Fahrenheit(k * 5 / 9 - 459.67)


_SPECIAL = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


def _parse_float(text: str) -> float:
    """Parse a floating-point literal, raising ValueError with a descriptive message."""
    if _SPECIAL.fullmatch(text):
        return float(text)
    out_of_range = ValueError(f"strconv.ParseFloat: parsing {quote(text)}: value out of range")
    try:
        if _DECIMAL.fullmatch(text):
            value = float(text)
        elif _HEX.fullmatch(text):
            value = float.fromhex(text)
        else:
            raise ValueError(
                f"strconv.ParseFloat: parsing {quote(text)}: invalid syntax"
            )
    except OverflowError:
        raise out_of_range from None
    if math.isinf(value):
        raise out_of_range
    return value


def boiling_point_line() -> str:
    """Return the boiling point of water in both scales."""
    f = 212.0
    c = (f - 32) * 5 / 9
    return f"boiling point = {format_g(f)}°F or {format_g(c)}°C"


def ftoc_lines() -> list[str]:
    """Return the freezing and boiling points converted from Fahrenheit to Celsius."""
    return [f"{format_g(f)}°F = {format_g(f_to_c(f))}°C" for f in (32.0, 212.0)]


def cf_line(value: float) -> str:
    """Interpret value as both Fahrenheit and Celsius and show each conversion."""
    f = Fahrenheit(value)
    c = Celsius(value)
    return f"{str(f)} = {str(f_to_c(f))}, {str(c)} = {str(c_to_f(c))}"


def kelvin_lines(value: float) -> list[str]:
    """Interpret value in each scale and show it converted to the other two."""
    c = Celsius(value)
    f = Fahrenheit(value)
    k = Kelvin(value)
    rows = [
        (c, c_to_f(c), c_to_k(c)),
        (f, f_to_c(f), f_to_k(f)),
        (k, k_to_c(k), k_to_f(k)),
    ]
    return [" = ".join(str(t) for t in row) + " " for row in rows]


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the boiling, ftoc, cf or kelvin commands."""
    parser = argparse.ArgumentParser(prog="tempconv")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("boiling", help="print the boiling point of water")
    sub.add_parser("ftoc", help="print two Fahrenheit-to-Celsius conversions")
    cf_parser = sub.add_parser("cf", help="convert numbers to Celsius and Fahrenheit")
    cf_parser.add_argument("values", nargs="*")
    k_parser = sub.add_parser("kelvin", help="convert numbers between all three scales")
    k_parser.add_argument("values", nargs="*")
    ns = parser.parse_args(argv)

    if ns.command == "boiling":
        print(boiling_point_line())
    elif ns.command == "ftoc":
        for line in ftoc_lines():
            print(line)
    elif ns.command == "cf":
        for arg in ns.values:
            try:
                t = _parse_float(arg)
            except ValueError as exc:
                print(f"cf: {exc}", file=sys.stderr)
                return 1
            print(cf_line(t))
    else:
        for arg in ns.values:
            try:
                t = _parse_float(arg)
            except ValueError as exc:
                print(f"ERROR: {exc}", file=sys.stderr)
                return 1
            for line in kelvin_lines(t):
                print(line)
    return 0