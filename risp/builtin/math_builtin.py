"""Numeric natives: arithmetic and the chainable comparison family."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from risp import RispValue, NativeFn
from risp.errors import RispArityError, RispTypeError
from risp.types.values import is_number


def parse_single_float(value: RispValue) -> float:
    if not is_number(value):
        raise RispTypeError("expected a number")
    return float(value)


def parse_list_of_floats(args: list[RispValue]) -> list[float]:
    return [parse_single_float(x) for x in args]


def _first_and_rest(args: list[RispValue]) -> tuple[float, list[float]]:
    floats = parse_list_of_floats(args)
    if not floats:
        raise RispArityError("expected at least one number")
    return floats[0], floats[1:]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[RispValue]) -> float:
    """Sum of all arguments; 0 for none."""
    return sum(parse_list_of_floats(args), 0.0)


def sub(args: list[RispValue]) -> float:
    """First argument minus the sum of the rest."""
    first, rest = _first_and_rest(args)
    return first - sum(rest, 0.0)


def mul(args: list[RispValue]) -> float:
    """Product of all arguments; needs at least one."""
    first, rest = _first_and_rest(args)
    return reduce(operator.mul, rest, first)


# -------------------------------
# Comparison
# -------------------------------
def ensure_tonicity(check: Callable[[float, float], bool]) -> NativeFn:
    """Build a chainable comparison: true iff `check` holds for every adjacent pair."""

    def compare(args: list[RispValue]) -> bool:
        first, rest = _first_and_rest(args)
        prev = first
        for x in rest:
            if not check(prev, x):
                return False
            prev = x
        return True

    return compare


eq = ensure_tonicity(operator.eq)
gt = ensure_tonicity(operator.gt)
gte = ensure_tonicity(operator.ge)
lt = ensure_tonicity(operator.lt)
lte = ensure_tonicity(operator.le)
