"""Registry of special forms for the Parsley evaluator.

Every special form is a CTX procedure: it receives its arguments unevaluated
together with the Context. The table below becomes the immutable core
environment of each Context, so these names cannot be shadowed or re-bound.
"""

from parsley.types.procedure import Arity, Procedure
from parsley.evaluation.special_forms.quote_form import quote_form
from parsley.evaluation.special_forms.define_form import define_form
from parsley.evaluation.special_forms.set_form import set_form
from parsley.evaluation.special_forms.lambda_form import lambda_form
from parsley.evaluation.special_forms.if_form import if_form
from parsley.evaluation.special_forms.cond_form import cond_form
from parsley.evaluation.special_forms.logic_forms import and_form, or_form
from parsley.evaluation.special_forms.begin_form import begin_form
from parsley.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "quote": (quote_form, Arity.exact(1)),
    "define": (define_form, Arity.at_least(2)),
    "set!": (set_form, Arity.exact(2)),
    "lambda": (lambda_form, Arity.at_least(2)),
    "if": (if_form, Arity.between(2, 3)),
    "cond": (cond_form, Arity.at_least(0)),
    "and": (and_form, Arity.at_least(0)),
    "or": (or_form, Arity.at_least(0)),
    "begin": (begin_form, Arity.at_least(0)),
    "let": (let_form, Arity.at_least(2)),
}


def core_bindings() -> dict[str, Procedure]:
    """Build a fresh name -> Procedure table of the special forms."""
    return {
        name: Procedure.ctx(func, arity, name=name)
        for name, (func, arity) in SPECIAL_FORMS.items()
    }
