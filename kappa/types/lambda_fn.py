"""User-defined function values for Kappa."""

from __future__ import annotations

from kappa import SExpression


class Lambda:
    """A function value: formal parameters plus a sequence of body forms.

    No environment is captured. A call's frame is linked to the frame that
    is active at the call site, so free variables in the body resolve
    dynamically.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[SExpression], body: list[SExpression]):
        self.params: list[SExpression] = params
        self.body: list[SExpression] = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"
