from risp import EvaluatorFn
from risp import SExpression, RispValue
from risp.errors import RispArityError, RispTypeError
from risp.evaluation.apply import apply_closure
from risp.types.closure import Closure
from risp.types.environment import Environment
from risp.types.values import type_name


def repeat_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> list[RispValue]:
    """
    (repeat fn xs)
    Map a one-argument closure over a list, in order. The first failing
    application aborts the whole form.
    """
    if len(tail) != 2:
        raise RispArityError(f"repeat requires exactly 2 forms, got {len(tail)}")

    fn = evaluate_fn(tail[0], env)
    if not isinstance(fn, Closure):
        raise RispTypeError(f"repeat expects a function, got {type_name(fn)}")
    if fn.arity != 1:
        raise RispArityError(
            f"repeat expects a function of one argument, got {fn.arity}"
        )

    xs = evaluate_fn(tail[1], env)
    if not isinstance(xs, list):
        raise RispTypeError(f"repeat expects a list, got {type_name(xs)}")

    return [apply_closure(fn, [x], evaluate_fn) for x in xs]
