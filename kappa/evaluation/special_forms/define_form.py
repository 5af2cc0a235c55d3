from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def is_lambda_form(expr: SExpression) -> bool:
    return isinstance(expr, list) and expr[0] == LAMBDA


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name expr)                binds name to expr as written; a
                                      (lambda ...) form is evaluated first
    (define (name params...) body...) binds name to a new function
    Either way the binding goes into the current frame and the name is returned.

    An unevaluated binding is evaluated each time the name is looked up, so it
    may refer to names defined later and sees their current values.
    """
    if len(tail) < 2:
        raise KappaSyntaxError("define: expect expression(s)")

    target = tail[0]
    if isinstance(target, Symbol):
        expr = tail[1]
        if is_lambda_form(expr):
            expr = evaluate_fn(expr, env)
        env.add(target, expr)
        return target

    if isinstance(target, list):
        name = target[0]
        if not isinstance(name, Symbol):
            raise KappaSyntaxError(f"define: expect symbol, got {name}")
        env.add(name, Lambda(target[1:], tail[1:]))
        return name

    raise KappaSyntaxError("define: syntax error, expect symbol or list")
