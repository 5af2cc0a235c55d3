"""Application engine for Kappa.

Calling a Lambda creates a new frame whose parent is the caller's active
frame (not the frame the Lambda was defined in), binds parameters pairwise
to the already-evaluated arguments, evaluates the body in order and tears
the frame down on every exit path.
"""

from __future__ import annotations

import logging

from kappa import LispValue, EvaluatorFn
from kappa.errors import KappaArityError, KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import Empty
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(fn: Lambda, args: list[LispValue], frame: Environment) -> None:
    """Bind each parameter of `fn` to the matching argument in `frame`.

    Pairs are bound first; a length mismatch is reported once the shorter
    side runs out.
    """
    for param, arg in zip(fn.params, args):
        if not isinstance(param, Symbol):
            raise KappaSyntaxError(f"parameter is not symbol: {param}")
        frame.add(param, arg)
    if fn.arity > len(args):
        raise KappaArityError(f"too few args: expected {fn.arity}, got {len(args)}")
    if fn.arity < len(args):
        raise KappaArityError(f"too many args: expected {fn.arity}, got {len(args)}")


def apply_function(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to evaluated arguments; returns the last body value."""
    frame = Environment(parent=caller_env)
    logger.debug("apply %r to %d argument(s)", fn.params, len(args))
    try:
        bind_arguments(fn, args, frame)
        result = Empty
        for form in fn.body:
            result = evaluate_fn(form, frame)
        return result
    finally:
        frame.release()
