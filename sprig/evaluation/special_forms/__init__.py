"""Registry of special forms for the Sprig evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so a
keyword is recognised by shape even if the same name is bound as a variable.
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.begin_form import begin_form
from sprig.evaluation.special_forms.cond_form import cond_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.error_form import error_form
from sprig.evaluation.special_forms.eval_form import eval_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.let_form import let_form
from sprig.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("let"): let_form,
    Symbol("eval"): eval_form,
    Symbol("error"): error_form,
    Symbol("begin"): begin_form,
}
