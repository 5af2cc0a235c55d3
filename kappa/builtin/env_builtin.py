"""Built-in procedures for the Kappa runtime environment.

Arithmetic, integer comparison and boolean negation. Each routine receives
the evaluated argument list; integer results wrap to signed 64 bits.
"""
from __future__ import annotations

import operator
from typing import Callable

from kappa import LispValue
from kappa.errors import KappaArityError, KappaTypeError, KappaZeroDivisionError
from kappa.types.environment import Environment
from kappa.types.primitive import Primitive
from kappa.types.values import is_bool, is_int, wrap_int64


def _check_ints(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not is_int(arg):
            raise KappaTypeError(f"{name}: argument type unmatched, expect integer, got {arg!r}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """Sum of all arguments, starting from 0."""
    _check_ints("+", args)
    result = 0
    for x in args:
        result = wrap_int64(result + x)
    return result


def sub(env: Environment, args: list[LispValue]) -> int:
    """First argument minus the rest; with fewer than two, subtract from 0."""
    _check_ints("-", args)
    if len(args) >= 2:
        result, rest = args[0], args[1:]
    else:
        result, rest = 0, args
    for x in rest:
        result = wrap_int64(result - x)
    return result


def mul(env: Environment, args: list[LispValue]) -> int:
    """Product of all arguments, starting from 1."""
    _check_ints("*", args)
    result = 1
    for x in args:
        result = wrap_int64(result * x)
    return result


def truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def div(env: Environment, args: list[LispValue]) -> int:
    """Divide left-to-right, truncating toward zero."""
    if not args:
        raise KappaArityError("/: needs at least one argument")
    _check_ints("/", args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise KappaZeroDivisionError("/: division by zero")
        result = wrap_int64(truncating_div(result, x))
    return result


# -------------------------------
# Comparison
# -------------------------------
def _relational(name: str, compare: Callable[[int, int], bool]):
    def relation(env: Environment, args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise KappaArityError(f"{name}: expect two operands, got {len(args)}")
        _check_ints(name, args)
        return compare(args[0], args[1])

    relation.__name__ = f"rel_{compare.__name__}"
    relation.__doc__ = f"({name} a b) on integers."
    return relation


eq = _relational("=", operator.eq)
gt = _relational(">", operator.gt)
lt = _relational("<", operator.lt)
le = _relational("<=", operator.le)
ge = _relational(">=", operator.ge)
ne = _relational("!=", operator.ne)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    """Negation of a single boolean."""
    if len(args) != 1:
        raise KappaArityError(f"not: expect one operand, got {len(args)}")
    if not is_bool(args[0]):
        raise KappaTypeError("not: expect bool expression")
    return not args[0]


BUILTINS = {
    Primitive.ADD: add,
    Primitive.SUB: sub,
    Primitive.MUL: mul,
    Primitive.DIV: div,
    Primitive.EQ: eq,
    Primitive.GT: gt,
    Primitive.LT: lt,
    Primitive.LE: le,
    Primitive.GE: ge,
    Primitive.NE: ne,
    Primitive.NOT: logical_not,
}


def register(env: Environment) -> None:
    """Bind every primitive, special forms included, under its source name."""
    env.update({prim.symbol_name: prim for prim in Primitive})
