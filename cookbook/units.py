"""Length and weight units with conversions, plus a combined unit report."""

from __future__ import annotations

import argparse
import sys
from typing import ClassVar, Sequence

from cookbook.tempconv import Celsius, Fahrenheit, _parse_float, c_to_f, f_to_c
from cookbook.textfmt import format_g

_FEET_PER_METER = 3.2808
_POUNDS_PER_GRAM = 0.0022046
_RULE = "+" * 38
_SECTION = "+ " + "=" * 36


class _Quantity(float):
    """A measurement that prints with its unit."""

    _suffix: ClassVar[str] = ""

    def __str__(self) -> str:
        return f"{format_g(self)} {self._suffix}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Foot(_Quantity):
    """A length in feet."""

    _suffix = "ft"


class Meter(_Quantity):
    """A length in meters."""

    _suffix = "m"


class Pound(_Quantity):
    """A weight in pounds."""

    _suffix = "lb"


class Gram(_Quantity):
    """A weight in grams."""

    _suffix = "g"


def f_to_m(f: float) -> Meter:
    """Convert a length in feet to meters."""
    return Meter(f / _FEET_PER_METER)


def m_to_f(m: float) -> Foot:
    """Convert a length in meters to feet."""
    return Foot(m * _FEET_PER_METER)


def p_to_g(p: float) -> Gram:
    """Convert a weight in pounds to grams."""
    return Gram(p / _POUNDS_PER_GRAM)


def g_to_p(g: float) -> Pound:
    """Convert a weight in grams to pounds."""
    return Pound(g * _POUNDS_PER_GRAM)


def report(value: float) -> list[str]:
    """Return the temperature, length and weight conversions of value, one line each."""
    c, f = Celsius(value), Fahrenheit(value)
    meters, feet = Meter(value), Foot(value)
    grams, pounds = Gram(value), Pound(value)
    return [
        _RULE,
        "+ Temperature converter:",
        f"+ {str(c)} = {str(c_to_f(c))}",
        f"+ {str(f)} = {str(f_to_c(f))}",
        _SECTION,
        "+ Length converter:",
        f"+ {str(meters)} = {str(m_to_f(meters))}",
        f"+ {str(feet)} = {str(f_to_m(feet))}",
        _SECTION,
        "+ Weight converter:",
        f"+ {str(grams)} = {str(g_to_p(grams))}",
        f"+ {str(pounds)} = {str(p_to_g(pounds))}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print temperature, length and weight conversions for each number given."""
    parser = argparse.ArgumentParser(prog="units")
    parser.add_argument("values", nargs="*")
    ns = parser.parse_args(argv)
    for arg in ns.values:
        try:
            value = _parse_float(arg)
        except ValueError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        for line in report(value):
            print(line)
    print(_RULE)
    return 0