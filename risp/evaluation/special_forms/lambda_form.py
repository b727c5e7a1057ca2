from risp.errors import RispArityError, RispTypeError
from risp.types.closure import Closure

from risp import EvaluatorFn
from risp import SExpression, RispValue
from risp.types.environment import Environment
from risp.types.symbol import Symbol


def parse_formals(params: SExpression) -> list[Symbol]:
    """Validate an `fn` parameter list; duplicates are allowed, last one wins."""
    if not isinstance(params, list):
        raise RispTypeError("expected args form to be a list")
    for p in params:
        if not isinstance(p, Symbol):
            raise RispTypeError("expected symbols in the argument list")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> RispValue:
    # (fn (params) body): exactly one body form, captured with the current env.
    if not tail:
        raise RispArityError("expected args form")
    if len(tail) < 2:
        raise RispArityError("expected second form")
    if len(tail) > 2:
        raise RispArityError("fn definition can only have two forms")

    params, body = tail
    return Closure(parse_formals(params), body, env)
