from risp import EvaluatorFn
from risp import SExpression, RispValue
from risp.errors import RispArityError, RispTypeError
from risp.types.environment import Environment
from risp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RispValue:
    """
    (def name value)
    Binds in the current frame only and returns the name symbol.
    """
    if not tail:
        raise RispArityError("expected first form")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise RispTypeError("expected first form to be a symbol")
    if len(tail) < 2:
        raise RispArityError("expected second form")
    if len(tail) > 2:
        raise RispArityError("def can only have two forms")

    value = evaluate_fn(tail[1], env)
    env.define(name, value)
    return name
