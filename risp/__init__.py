# Core type aliases for Risp's data model.
# Plain Python values represent both code (forms) and runtime values:
# bool, float, str, list, plus Symbol, Closure and Document from risp.types.
# Native procedures are any Python callable taking the evaluated argument list.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - RispValue:   Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
RispValue = Any
# Forms and values share one representation
SExpression = RispValue

# Native procedure: receives already-evaluated arguments, returns a value
NativeFn = Callable[[list], RispValue]

# Evaluator function type: passed into special forms so they can evaluate sub-forms
EvaluatorFn = Callable[..., RispValue]

__version__ = "0.3.0"
