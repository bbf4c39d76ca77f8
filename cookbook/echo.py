"""Print command-line arguments, in several styles."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Sequence, TextIO


def echo(
    args: Sequence[str], sep: str = " ", newline: bool = True, out: TextIO | None = None
) -> None:
    """Write args joined by sep to out, followed by a newline if requested."""
    out = sys.stdout if out is None else out
    out.write(sep.join(args))
    if newline:
        out.write("\n")


def concat_args(args: Sequence[str]) -> str:
    """Join args with spaces by repeated string concatenation."""
    s, sep = "", ""
    for arg in args:
        s += sep + arg
        sep = " "
    return s


def join_args(args: Sequence[str]) -> str:
    """Join args with single spaces."""
    return " ".join(args)


def numbered_args(args: Sequence[str]) -> list[str]:
    """Return one "index value" line per argument, counting from 1."""
    return [f"{index} {arg}" for index, arg in enumerate(args, start=1)]


_VARIANTS: tuple[tuple[str, Callable[[Sequence[str]], str]], ...] = (
    ("echo1", concat_args),
    ("echo2", concat_args),
    ("echo3", join_args),
)


def time_echoes(args: Sequence[str]) -> list[tuple[str, str, float]]:
    """Run each joining strategy on args, returning (name, output, seconds)."""
    results = []
    for name, variant in _VARIANTS:
        start = time.perf_counter()
        output = variant(args)
        results.append((name, output, time.perf_counter() - start))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Echo arguments; -n omits the trailing newline, -s sets the separator."""
    parser = argparse.ArgumentParser(prog="echo")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", help="separator")
    parser.add_argument("args", nargs="*")
    ns = parser.parse_args(argv)
    echo(ns.args, ns.s, not ns.n)
    return 0