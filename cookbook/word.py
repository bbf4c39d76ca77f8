"""Utilities for word games."""

from __future__ import annotations


def is_palindrome_bytes(s: str) -> bool:
    """Compare UTF-8 bytes at each character start with their mirror bytes.

    Letter case, punctuation and multi-byte characters are not handled.
    """
    data = s.encode("utf-8")
    last = len(data) - 1
    offset = 0
    for ch in s:
        if data[offset] != data[last - offset]:
            return False
        offset += len(ch.encode("utf-8"))
    return True


def _lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same both ways, ignoring case and non-letters."""
    letters = [_lower(ch) for ch in s if ch.isalpha()]
    return letters == letters[::-1]