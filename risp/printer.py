"""Printable forms of Risp values.

`to_display` is what the REPL shows after `=>`. `lisp_value` is the raw value
natives use when they need text (a string without its quotes).
"""

from __future__ import annotations

import json
import math
from decimal import Decimal

from risp import RispValue
from risp.types.closure import Closure
from risp.types.document import Document
from risp.types.symbol import Symbol
from risp.types.values import is_native

JSON_INDENT = 2


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    n = float(n)
    if n.is_integer():
        # keep the sign of negative zero
        return "-0" if n == 0 and math.copysign(1.0, n) < 0 else str(int(n))
    text = repr(n)
    if "e" in text:
        # positional notation, never an exponent
        return format(Decimal(text), "f")
    return text


def format_document(doc: Document) -> str:
    return json.dumps(doc.data, indent=JSON_INDENT, ensure_ascii=False)


def to_display(value: RispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int() | float():
            return format_number(value)
        case str():
            return f'"{value}"'
        case Symbol():
            return value.id
        case list():
            return "(" + ",".join(to_display(x) for x in value) + ")"
        case Closure():
            return "Lambda {}"
        case Document():
            return format_document(value)
        case _ if is_native(value):
            return "Function {}"
        case _:
            return str(value)


def lisp_value(value: RispValue) -> str:
    if isinstance(value, str):
        return value
    return to_display(value)
