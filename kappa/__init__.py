# Shared annotations for the Kappa interpreter.
# Source forms and runtime values use one representation: int, bool, list,
# Symbol, Empty, Lambda and Primitive. The aliases below only document intent.

from typing import Any, Callable

# A value produced by evaluation
LispValue = Any
# A form produced by the reader
SExpression = LispValue

# evaluate(form, env) as handed to special forms and apply
EvaluatorFn = Callable[..., LispValue]
