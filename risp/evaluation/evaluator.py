"""Core evaluator for the Risp interpreter.

A plain recursive evaluator: special forms are dispatched on the head symbol
before anything is evaluated, every other list is an application. The head is
evaluated first and must be a procedure; only then are the arguments evaluated,
left to right. Errors are never caught here; the first one aborts the whole
evaluation.
"""

from __future__ import annotations

from risp import SExpression, RispValue
from risp.errors import RispSyntaxError, RispTypeError
from risp.evaluation.apply import apply
from risp.evaluation.special_forms import SPECIAL_FORMS
from risp.types.document import Document
from risp.types.environment import Environment
from risp.types.symbol import Symbol
from risp.types.values import is_procedure, type_name


def evaluate(expr: SExpression, env: Environment) -> RispValue:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case bool() | int() | float() | str() | Document():
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            raise RispSyntaxError("empty form cannot be evaluated")

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            if not is_procedure(fn):
                raise RispTypeError(f"first form must be a function, got {type_name(fn)}")
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

        case _ if is_procedure(expr):
            # procedures are values, never forms
            raise RispSyntaxError("unexpected form")

    raise RispTypeError(f"unknown form {expr!r}")
