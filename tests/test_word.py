import random

import pytest

from cookbook.word import is_palindrome, is_palindrome_bytes


@pytest.mark.parametrize("word", ["detartrated", "kayak"])
def test_bytes_palindrome(word):
    assert is_palindrome_bytes(word) is True


def test_bytes_non_palindrome():
    assert is_palindrome_bytes("palindrome") is False


def test_bytes_version_misses_french_palindrome():
    assert is_palindrome_bytes("été") is False


def test_bytes_version_misses_canal_palindrome():
    assert is_palindrome_bytes("A man, a plan, a canal: Panama") is False


@pytest.mark.parametrize(
    "text, want",
    [
        ("", True),
        ("a", True),
        ("aa", True),
        ("ab", False),
        ("kayak", True),
        ("detartrated", True),
        ("A man, a plan, a canal: Panama", True),
        ("Evil I did dwell; lewd did I live.", True),
        ("Able was I ere I saw Elba", True),
        ("été", True),
        ("Et se resservir, ivresse reste.", True),
        ("palindrome", False),
        ("desserts", False),
    ],
)
def test_is_palindrome(text, want):
    assert is_palindrome(text) is want


def _random_palindrome(rng: random.Random) -> str:
    n = rng.randrange(25)
    half = [chr(rng.randrange(0x1000)) for _ in range((n + 1) // 2)]
    mirror = half[: n // 2][::-1]
    return "".join(half + mirror)


def test_random_palindromes():
    rng = random.Random(20160101)
    for _ in range(1000):
        p = _random_palindrome(rng)
        assert is_palindrome(p), repr(p)