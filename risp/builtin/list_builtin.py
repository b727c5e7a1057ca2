"""List natives: construction, head/tail access and number sequences."""

from __future__ import annotations

import math

from risp import RispValue
from risp.errors import RispArityError, RispTypeError
from risp.types.values import is_number


def list_builtin(args: list[RispValue]) -> list[RispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def _list_arg(args: list[RispValue]) -> list[RispValue]:
    if not args:
        raise RispArityError("pass a list")
    xs = args[0]
    if not isinstance(xs, list):
        raise RispTypeError("arg is not a list")
    if not xs:
        raise RispTypeError("empty list")
    return xs


def car(args: list[RispValue]) -> RispValue:
    """First element of a non-empty list."""
    return _list_arg(args)[0]


def cdr(args: list[RispValue]) -> list[RispValue]:
    """All but the first element of a non-empty list, as a new list."""
    return _list_arg(args)[1:]


def _int_arg(value: RispValue) -> int:
    if not is_number(value) or not math.isfinite(value):
        raise RispTypeError("arg is not a number")
    # truncates toward zero
    return int(value)


def number_sequence(args: list[RispValue]) -> list[float]:
    """(num max [start]) -> (start start+1 ... max-1)"""
    if not args:
        raise RispArityError("pass a max value")
    stop = _int_arg(args[0])
    start = _int_arg(args[1]) if len(args) > 1 else 0
    return [float(n) for n in range(start, stop)]
