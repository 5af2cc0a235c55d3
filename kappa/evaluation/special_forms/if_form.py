from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError, KappaTypeError
from kappa.types.environment import Environment
from kappa.types.nil import Empty
from kappa.types.values import is_bool


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise KappaSyntaxError("if: expect condition and consequent")
    if len(tail) > 3:
        raise KappaSyntaxError("if: expect at most two branches")

    cond = evaluate_fn(tail[0], env)
    if not is_bool(cond):
        raise KappaTypeError("if: expect bool expression")

    if cond:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Empty
