"""Small string helpers: base names, digit grouping and value formatting."""

from __future__ import annotations

import argparse
import math
import sys
from decimal import Decimal
from typing import Iterable, Sequence

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix.

    a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    head = len(s) % 3 or 3
    groups = [s[:head]]
    groups.extend(s[start:start + 3] for start in range(head, len(s), 3))
    return ",".join(groups)


def ints_to_string(values: Iterable[int]) -> str:
    """Format a sequence of integers like a list, with commas."""
    return "[" + ", ".join(str(int(v)) for v in values) + "]"


def quote(s: str) -> str:
    """Return s as a double-quoted literal with escapes for unprintable characters."""
    parts = []
    for ch in s:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def format_g(x: float) -> str:
    """Format a float with the shortest digits, switching to exponent form
    when the decimal exponent is below -4 or at least 6."""
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    ndigits = len(text)
    point = ndigits + exponent
    exp = point - 1
    prefix = "-" if sign else ""

    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if ndigits > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= ndigits:
        return prefix + text + "0" * (point - ndigits)
    return f"{prefix}{text[:point]}.{text[point:]}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the basename, comma or printints commands."""
    parser = argparse.ArgumentParser(prog="textfmt")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("basename", help="print the base name of each line of stdin")
    comma_parser = sub.add_parser("comma", help="group digits with commas")
    comma_parser.add_argument("numbers", nargs="*")
    ints_parser = sub.add_parser("printints", help="print integers as a list")
    ints_parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    if args.command == "basename":
        for line in sys.stdin:
            print(basename(line.rstrip("\n").rstrip("\r")))
    elif args.command == "comma":
        for number in args.numbers:
            print(f"  {comma(number)}")
    else:
        print(ints_to_string(args.values or [1, 2, 3]))
    return 0