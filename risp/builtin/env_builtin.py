"""Root environment builder.

Collects the native procedures of the sibling builtin modules and registers
them under their invocation names. This is the only place natives enter the
language; after startup the evaluator sees them as ordinary bound values.
"""
from __future__ import annotations

from risp import NativeFn
from risp.types.environment import Environment
from risp.types.symbol import Symbol
from risp.builtin import http_builtin, json_builtin, list_builtin, math_builtin


BUILTINS: dict[str, NativeFn] = {
    "+": math_builtin.add,
    "-": math_builtin.sub,
    "*": math_builtin.mul,
    "=": math_builtin.eq,
    ">": math_builtin.gt,
    ">=": math_builtin.gte,
    "<": math_builtin.lt,
    "<=": math_builtin.lte,
    "list": list_builtin.list_builtin,
    "car": list_builtin.car,
    "cdr": list_builtin.cdr,
    "num": list_builtin.number_sequence,
    "httpget": http_builtin.httpget,
    "json-parse": json_builtin.json_parse,
    "json-get": json_builtin.json_get,
    "json-pretty": json_builtin.json_pretty,
}


def register(env: Environment, extra: dict[str, NativeFn] | None = None) -> None:
    """Register all builtin natives, plus any `extra` ones, into the given environment."""
    natives = dict(BUILTINS)
    if extra:
        natives.update(extra)
    env.update({Symbol(name): fn for name, fn in natives.items()})
