"""Application engine for Risp.

Centralizes procedure application so the evaluator and the special forms that
call closures themselves (e.g. `repeat`) share one set of semantics:

- Closures get a fresh frame whose outer link is the closure's captured
  environment, never the caller's; this is what makes scoping lexical.
- Native procedures are called with the evaluated argument list only.
"""

from risp import RispValue, EvaluatorFn
from risp.types.closure import Closure
from risp.types.values import is_native, type_name
from risp.errors import RispTypeError


def apply_closure(fn: Closure, args: list[RispValue], evaluate_fn: EvaluatorFn) -> RispValue:
    """Bind `args` to the closure's formals and evaluate its body."""
    call_env = fn.extend_env(args)
    return evaluate_fn(fn.body, call_env)


def apply(head: RispValue, args: list[RispValue], evaluate_fn: EvaluatorFn) -> RispValue:
    """Apply either a Closure or a native procedure.

    Raises RispTypeError when `head` is not callable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if is_native(head):
        return head(args)
    raise RispTypeError(f"first form must be a function, got {type_name(head)}")
