"""Line de-duplication and word frequencies."""

from __future__ import annotations

import os
import sys
from collections import Counter
from typing import Iterable, Iterator, Sequence

from cookbook.dup import _chomp
from cookbook.textfmt import quote

DEFAULT_INPUT = "input.txt"


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, in order of first appearance."""
    seen: set[str] = set()
    for line in lines:
        text = _chomp(line)
        if text not in seen:
            seen.add(text)
            yield text


def word_counts(lines: Iterable[str]) -> Counter:
    """Count whitespace-separated words over all lines."""
    counts: Counter = Counter()
    for line in lines:
        counts.update(line.split())
    return counts


def dedup_main(argv: Sequence[str] | None = None) -> int:
    """Print only the first instance of each line of standard input."""
    try:
        for line in dedup(sys.stdin):
            print(line)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"dedup: {exc}", file=sys.stderr)
        return 1
    return 0


def _usage() -> None:
    prog = sys.argv[0].split(os.sep)[-1] if sys.argv and sys.argv[0] else "wordfreq"
    print(f"Usage: {prog} [-h] [-i file]")
    print(f"\t -i file: input file name (default: {DEFAULT_INPUT})")
    print("\t -h:      print this message")


def wordfreq_main(argv: Sequence[str] | None = None) -> int:
    """Report how often each word occurs in an input file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        input_file = DEFAULT_INPUT
    elif args[0] == "-i":
        if len(args) < 2:
            _usage()
            return 1
        input_file = args[1]
    elif args[0] == "-h":
        _usage()
        return 0
    else:
        print(f"ERROR - invalid argument: {args[0]}")
        _usage()
        return 1

    try:
        with open(input_file, encoding="utf-8", errors="replace") as f:
            counts = word_counts(f)
    except OSError as exc:
        print(f"ERROR - {quote(str(exc))}")
        return 1

    print(f"The file {input_file} has the following frequence words:")
    for word, n in counts.items():
        print(f"\t{n}\t{word}")
    return 0