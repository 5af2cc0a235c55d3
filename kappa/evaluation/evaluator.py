"""Core evaluator for the Kappa interpreter.

`evaluate` walks a form in a given frame. Symbols are resolved outward along
the frame chain and the bound value is evaluated again, so a name bound to
another symbol follows the alias. A list is dispatched on its head: Lambdas
and built-in procedures get their arguments evaluated left to right, special
forms get them unevaluated.
"""

from __future__ import annotations

import logging

from kappa import SExpression, LispValue
from kappa.builtin.env_builtin import BUILTINS
from kappa.errors import KappaInvariantError, KappaUnboundSymbol
from kappa.evaluation.apply import apply_function
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import EmptyType
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def resolve(symbol: Symbol, env: Environment) -> LispValue:
    """Find the innermost binding of `symbol`, starting at `env`."""
    frame: Environment | None = env
    while frame is not None:
        value = frame.lookup(symbol)
        if value is not None:
            return value
        frame = frame.parent
    raise KappaUnboundSymbol(f"unbound symbol: {symbol}")


def evaluate_each(forms: list[SExpression], env: Environment) -> list[LispValue]:
    """Evaluate `forms` strictly left to right."""
    return [evaluate(form, env) for form in forms]


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return evaluate(resolve(expr, env), env)
        case [head, *tail]:
            op = resolve(head, env) if isinstance(head, Symbol) else evaluate(head, env)
            return _dispatch(op, tail, env)

    # --- Atoms return as-is ---
    return expr


def _dispatch(op: LispValue, tail: list[SExpression], env: Environment) -> LispValue:
    match op:
        case bool():
            raise KappaInvariantError(f"cannot apply boolean {op!r}")
        case EmptyType() | int() | list():
            return op
        case Symbol():
            return evaluate(op, env)
        case Lambda():
            return apply_function(op, evaluate_each(tail, env), env, evaluate)
        case Primitive() if op.is_special_form:
            logger.debug("special form %s", op.symbol_name)
            return SPECIAL_FORMS[op](tail, env, evaluate)
        case Primitive():
            return BUILTINS[op](env, evaluate_each(tail, env))
    raise KappaInvariantError(f"unexpected operator {op!r}")
