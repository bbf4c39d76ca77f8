from dataclasses import dataclass

import pytest

from cookbook.equal import equal


class Ref:
    def __init__(self, value):
        self.value = value


class Link:
    def __init__(self, value, tail=None):
        self.value = value
        self.tail = tail


class MyString(str):
    pass


@dataclass
class Point:
    x: int
    y: int


def noop():
    pass


cycle_slice = []
cycle_slice.append(cycle_slice)
cycle_a = []
cycle_a.append(cycle_a)
cycle_b = []
cycle_b.append(cycle_b)

one = Ref(1)


@pytest.mark.parametrize(
    "x, y, want",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyString("foo"), "foo", False),
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        ([], [], True),
        (cycle_slice, cycle_slice, True),
        (cycle_a, cycle_a, True),
        (cycle_a, cycle_b, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        ({"a": 1}, {"b": 1}, False),
        (one, one, True),
        (Ref(1), Ref(2), False),
        (Ref(1), Ref(1), True),
        (Point(1, 2), Point(1, 2), True),
        (Point(1, 2), Point(1, 3), False),
        (None, None, True),
        (None, noop, False),
        (noop, noop, True),
        (lambda: None, lambda: None, False),
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        ({1, 2}, {2, 1}, True),
    ],
)
def test_equal(x, y, want):
    assert equal(x, y) is want


def test_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False
    assert equal({}, {}) is True


def test_nan_is_not_equal_to_itself():
    nan = float("nan")
    assert equal(nan, nan) is False


def test_cyclic_linked_lists():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False