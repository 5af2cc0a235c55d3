"""Registry of special forms for the Kappa evaluator.

Maps Primitive tags to handlers that receive their arguments unevaluated.
"""

from kappa.types.primitive import Primitive
from kappa.evaluation.special_forms.define_form import define_form
from kappa.evaluation.special_forms.lambda_form import lambda_form
from kappa.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Primitive.DEFINE: define_form,
    Primitive.LAMBDA: lambda_form,
    Primitive.IF: if_form,
}
