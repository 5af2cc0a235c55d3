"""The closed catalog of built-in operators and special forms."""

from __future__ import annotations

from enum import Enum


class Primitive(Enum):
    """One member per built-in; members are the process-wide interned values.

    The value tuple is (source name, is special form). Special forms receive
    their arguments unevaluated.
    """

    ADD = ("+", False)
    SUB = ("-", False)
    MUL = ("*", False)
    DIV = ("/", False)
    EQ = ("=", False)
    GT = (">", False)
    LT = ("<", False)
    LE = ("<=", False)
    GE = (">=", False)
    NE = ("!=", False)
    NOT = ("not", False)
    IF = ("if", True)
    DEFINE = ("define", True)
    LAMBDA = ("lambda", True)

    @property
    def symbol_name(self) -> str:
        return self.value[0]

    @property
    def is_special_form(self) -> bool:
        return self.value[1]

    def __repr__(self) -> str:
        return f"Primitive({self.symbol_name!r})"
