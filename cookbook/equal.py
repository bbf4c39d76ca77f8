"""Deep equality of arbitrary values, safe on cyclic structures."""

from __future__ import annotations

import types
from typing import Any

_ATOMS = (bool, int, float, complex, str, bytes)
_ROUTINES = (types.FunctionType, types.BuiltinFunctionType, type)


def equal(x: Any, y: Any) -> bool:
    """Report whether x and y are deeply equal.

    Values of different types are never equal. Dictionary keys are compared
    with ==, not deeply.
    """
    return _equal(x, y, set())


def _equal_maps(x: dict, y: dict, seen: set) -> bool:
    if len(x) != len(y):
        return False
    for key, value in x.items():
        if key not in y or not _equal(value, y[key], seen):
            return False
    return True


def _equal(x: Any, y: Any, seen: set) -> bool:
    if x is None or y is None:
        return x is y
    if type(x) is not type(y):
        return False
    if isinstance(x, _ATOMS):
        return x == y
    if isinstance(x, _ROUTINES):
        return x is y
    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)
    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        return _equal_maps(x, y, seen)
    if isinstance(x, (set, frozenset)):
        return x == y
    if hasattr(x, "__dict__") and hasattr(y, "__dict__"):
        return _equal_maps(vars(x), vars(y), seen)
    return x == y