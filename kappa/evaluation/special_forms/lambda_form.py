from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import Empty


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body...) needs a parameter list, possibly (),
    # and at least one body form. Parameters are checked at call time.
    if not tail or not (isinstance(tail[0], list) or tail[0] is Empty):
        raise KappaSyntaxError("lambda: expect parameter list")
    if len(tail) < 2:
        raise KappaSyntaxError("lambda: expect expression")

    params = tail[0] if tail[0] is not Empty else []
    return Lambda(list(params), tail[1:])
