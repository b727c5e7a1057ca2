"""Registry of special forms for the Risp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before any environment lookup, so a `def`
of the same name cannot shadow a special form.
"""

from risp.types.symbol import Symbol
from risp.evaluation.special_forms.if_form import if_form
from risp.evaluation.special_forms.define_form import define_form
from risp.evaluation.special_forms.lambda_form import lambda_form
from risp.evaluation.special_forms.repeat_form import repeat_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("def"): define_form,
    Symbol("fn"): lambda_form,
    Symbol("repeat"): repeat_form,
}
