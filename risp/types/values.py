"""Variant predicates over the Python values that make up a Risp expression."""

from __future__ import annotations

from risp import RispValue
from risp.types.closure import Closure
from risp.types.document import Document
from risp.types.symbol import Symbol


def is_number(value: RispValue) -> bool:
    # bool is an int subclass but is its own variant here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_native(value: RispValue) -> bool:
    return callable(value) and not isinstance(value, (Closure, type))


def is_procedure(value: RispValue) -> bool:
    return isinstance(value, Closure) or is_native(value)


def type_name(value: RispValue) -> str:
    """Name of the variant of `value`, for error messages."""
    match value:
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case list():
            return "list"
        case Closure():
            return "lambda"
        case Document():
            return "document"
        case _ if is_native(value):
            return "function"
        case _:
            return type(value).__name__
