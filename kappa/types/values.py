"""Tag predicates over runtime values.

Python's bool is a subclass of int, so `is_int` must exclude it explicitly.
"""

from __future__ import annotations

from kappa import LispValue
from kappa.types.nil import Empty

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def is_int(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_bool(value: LispValue) -> bool:
    return isinstance(value, bool)


def wrap_int64(n: int) -> int:
    """Reduce an arbitrary Python int to signed 64-bit two's complement."""
    n &= (1 << 64) - 1
    return n - (1 << 64) if n > INT64_MAX else n


def make_list(items: list[LispValue]) -> LispValue:
    """An empty spine collapses to Empty."""
    return items if items else Empty
