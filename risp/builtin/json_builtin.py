"""JSON document natives.

Documents are opaque to the evaluator; these natives are the only code that
looks inside them. Objects and arrays stay wrapped, scalars come back as plain
Risp values and JSON null becomes the keyword :null.
"""

from __future__ import annotations

import json
import math
from typing import Any

from risp import RispValue
from risp.errors import RispArityError, RispError, RispTypeError
from risp.printer import format_document, format_number
from risp.types.document import Document
from risp.types.symbol import Symbol
from risp.types.values import is_number, type_name

NULL = Symbol(":null")


def from_json(data: Any) -> RispValue:
    """Convert a decoded JSON value into the Risp value `json-get` returns."""
    match data:
        case None:
            return NULL
        case bool() | str():
            return data
        case int() | float():
            return float(data)
        case _:
            return Document(data)


def loads(text: str) -> Document:
    try:
        return Document(json.loads(text))
    except json.JSONDecodeError as e:
        raise RispError(f"invalid json: {e}") from e


def _document_arg(args: list[RispValue], name: str) -> Document:
    if not args:
        raise RispArityError(f"{name} expects a document")
    doc = args[0]
    if not isinstance(doc, Document):
        raise RispTypeError(f"{name} expects a document, got {type_name(doc)}")
    return doc


def json_parse(args: list[RispValue]) -> Document:
    """(json-parse text) -> document"""
    if len(args) != 1:
        raise RispArityError("json-parse requires exactly 1 argument")
    text = args[0]
    if not isinstance(text, str):
        raise RispTypeError(f"json-parse expects a string, got {type_name(text)}")
    return loads(text)


def json_get(args: list[RispValue]) -> RispValue:
    """(json-get doc key) for objects, (json-get doc index) for arrays."""
    doc = _document_arg(args, "json-get")
    if len(args) != 2:
        raise RispArityError("json-get requires a document and a key or index")
    key = args[1]
    data = doc.data

    if isinstance(key, str):
        if not isinstance(data, dict):
            raise RispTypeError("json-get with a string key expects an object")
        if key not in data:
            raise RispError(f"key not found: {key}")
        return from_json(data[key])

    if is_number(key):
        if not isinstance(data, list):
            raise RispTypeError("json-get with a number index expects an array")
        if not (math.isfinite(key) and float(key).is_integer()) or not 0 <= key < len(data):
            raise RispError(f"index out of range: {format_number(key)}")
        return from_json(data[int(key)])

    raise RispTypeError(f"json-get key must be a string or number, got {type_name(key)}")


def json_pretty(args: list[RispValue]) -> str:
    """(json-pretty doc) -> indented JSON text"""
    return format_document(_document_arg(args, "json-pretty"))
