from risp import EvaluatorFn
from risp import SExpression, RispValue
from risp.errors import RispArityError, RispTypeError
from risp.printer import to_display
from risp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RispValue:
    """
    (if test then else)
    The test must produce a boolean; only the chosen branch is evaluated.
    """
    if not tail:
        raise RispArityError("expected test form")

    test_form = tail[0]
    cond = evaluate_fn(test_form, env)
    if not isinstance(cond, bool):
        raise RispTypeError(f"unexpected test form='{to_display(test_form)}'")

    form_idx = 1 if cond else 2
    if form_idx >= len(tail):
        raise RispArityError(f"expected form idx={form_idx}")
    return evaluate_fn(tail[form_idx], env)
