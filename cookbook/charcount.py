"""Count Unicode characters, their encoded lengths and their general categories."""

from __future__ import annotations

import argparse
import sys
import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from cookbook.textfmt import quote

UTF_MAX = 4

LETTER = "Letter"
MARK = "Mark"
NUMBER = "Number"
PUNCTUATION = "Punctuation"
SYMBOL = "Symbol"
SEPARATOR = "Separator"
OTHER = "Other"

CATEGORIES = (LETTER, MARK, NUMBER, PUNCTUATION, SYMBOL, SEPARATOR, OTHER)

_MAJOR = {"L": LETTER, "M": MARK, "N": NUMBER, "P": PUNCTUATION, "S": SYMBOL}

_LABELS = {
    LETTER: "Letter\t\t",
    MARK: "Mark\t\t",
    NUMBER: "Number\t\t",
    PUNCTUATION: "Punctuation\t",
    SYMBOL: "Symbol\t\t",
    SEPARATOR: "Separator\t",
    OTHER: "Other\t\t",
}

# Characters with the White_Space property.
_WHITE_SPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000"
) | frozenset(chr(c) for c in range(0x2000, 0x200B))


@dataclass
class CharCounts:
    """Per-character counts, counts of encoded lengths and the number of invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


@dataclass
class CategoryCounts:
    """Per-character counts grouped by general category, and invalid bytes."""

    counts: dict[str, Counter] = field(
        default_factory=lambda: {name: Counter() for name in CATEGORIES}
    )
    invalid: int = 0


def _lead_size(b: int) -> int:
    if b < 0x80:
        return 1
    if 0xC0 <= b <= 0xDF:
        return 2
    if 0xE0 <= b <= 0xEF:
        return 3
    if 0xF0 <= b <= 0xF7:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, encoded length); invalid input yields (None, 1) per byte."""
    i = 0
    while i < len(data):
        size = _lead_size(data[i])
        if size:
            try:
                ch = data[i:i + size].decode("utf-8")
            except UnicodeDecodeError:
                ch = ""
            if len(ch) == 1:
                yield ch, size
                i += size
                continue
        yield None, 1
        i += 1


def _quote_rune(ch: str) -> str:
    if ch == "'":
        return "'\\''"
    if ch == '"':
        return "'\"'"
    return "'" + quote(ch)[1:-1] + "'"


def count_chars(data: bytes) -> CharCounts:
    """Count each character of UTF-8 data and the lengths of their encodings."""
    result = CharCounts()
    for ch, size in _runes(bytes(data)):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[size] += 1
    return result


def category_of(ch: str) -> str:
    """Return the name of the category group ch falls into."""
    major = unicodedata.category(ch)[0]
    if major in _MAJOR:
        return _MAJOR[major]
    if major == "Z" or ch in _WHITE_SPACE:
        return SEPARATOR
    return OTHER


def count_categories(data: bytes) -> CategoryCounts:
    """Count each character of UTF-8 data under its category group."""
    result = CategoryCounts()
    for ch, _ in _runes(bytes(data)):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[category_of(ch)][ch] += 1
    return result


def _invalid_line(invalid: int) -> str:
    return f"\n{invalid} invalid UTF-8 characters\n" if invalid > 0 else ""


def format_counts(result: CharCounts) -> str:
    """Render character counts and encoded-length counts as a report."""
    parts = ["rune\tcount\n"]
    parts.extend(f"{_quote_rune(ch)}\t{n}\n" for ch, n in result.counts.items())
    parts.append("\nlen\tcount\n")
    parts.extend(f"{i}\t{n}\n" for i, n in enumerate(result.utflen) if i > 0)
    parts.append(_invalid_line(result.invalid))
    return "".join(parts)


def format_categories(result: CategoryCounts) -> str:
    """Render category totals and the characters seen in each as a report."""
    parts = ["Category\tcount\trunes\n"]
    for name in CATEGORIES:
        counter = result.counts.get(name, Counter())
        runes = "[" + " ".join(_quote_rune(ch) for ch in counter) + "]"
        parts.append(f"{_LABELS[name]}{sum(counter.values())}\t{runes}\n")
    parts.append(_invalid_line(result.invalid))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Count the characters of standard input, by character or by category."""
    parser = argparse.ArgumentParser(prog="charcount")
    parser.add_argument(
        "-c", "--categories", action="store_true", help="count by Unicode category"
    )
    ns = parser.parse_args(argv)
    if ns.categories:
        print("Type as many Unicode characters you want. To finish, type ENTER and CTRL+D.")
        sys.stdout.flush()
    data = sys.stdin.buffer.read()
    if ns.categories:
        sys.stdout.write(format_categories(count_categories(data)))
    else:
        sys.stdout.write(format_counts(count_chars(data)))
    return 0