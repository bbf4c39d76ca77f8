"""Interface flags used as a bit field."""

from __future__ import annotations

import enum
from typing import Sequence


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the UP flag is set."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return v with the UP flag cleared."""
    return Flags(v) & ~Flags.UP


def set_broadcast(v: Flags) -> Flags:
    """Return v with the BROADCAST flag set."""
    return Flags(v) | Flags.BROADCAST


def is_cast(v: Flags) -> bool:
    """Report whether the BROADCAST or MULTICAST flag is set."""
    return bool(v & (Flags.BROADCAST | Flags.MULTICAST))


def _line(v: Flags, flag: bool) -> str:
    return f"{int(v):b} {str(flag).lower()}"


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate flag manipulation, printing bits and a test result."""
    v = Flags.MULTICAST | Flags.UP
    print(_line(v, is_up(v)))
    v = turn_down(v)
    print(_line(v, is_up(v)))
    v = set_broadcast(v)
    print(_line(v, is_up(v)))
    print(_line(v, is_cast(v)))
    return 0