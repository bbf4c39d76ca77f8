"""Find lines that appear more than once in the input."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Iterable, Sequence


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _scan_lines(text: str) -> list[str]:
    """Split text into lines the way a line scanner does."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_chomp(line) for line in lines]


def count_lines(lines: Iterable[str]) -> Counter:
    """Count each line, ignoring its line ending."""
    return Counter(_chomp(line) for line in lines)


def split_lines(data: str) -> list[str]:
    """Split data on every newline, keeping a trailing empty piece."""
    return data.split("\n")


def count_with_origins(
    sources: Iterable[tuple[str, Iterable[str]]],
) -> tuple[Counter, dict[str, list[str]]]:
    """Count lines over named sources and record the source of each occurrence."""
    counts: Counter = Counter()
    origins: dict[str, list[str]] = {}
    for name, lines in sources:
        for line in lines:
            text = _chomp(line)
            counts[text] += 1
            origins.setdefault(text, []).append(name)
    return counts, origins


def duplicates(counts: Counter) -> list[tuple[str, int]]:
    """Return (line, count) pairs for lines seen more than once."""
    return [(line, n) for line, n in counts.items() if n > 1]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the count and text of duplicated lines in stdin or named files."""
    parser = argparse.ArgumentParser(prog="dup")
    parser.add_argument(
        "-o", "--origins", action="store_true", help="also list where each line was found"
    )
    parser.add_argument(
        "-w", "--whole", action="store_true", help="split whole files on every newline"
    )
    parser.add_argument("files", nargs="*")
    ns = parser.parse_args(argv)

    splitter = split_lines if ns.whole else _scan_lines
    sources: list[tuple[str, list[str]]] = []
    if not ns.files:
        sources.append(("STDIN", splitter(sys.stdin.read())))
    for path in ns.files:
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as f:
                sources.append((path, splitter(f.read())))
        except OSError as exc:
            print(f"dup: {exc}", file=sys.stderr)

    counts, origins = count_with_origins(sources)
    for line, n in duplicates(counts):
        if ns.origins:
            print(f"{n}\t{line}\t[{' '.join(origins[line])}]")
        else:
            print(f"{n}\t{line}")
    return 0