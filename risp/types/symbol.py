from __future__ import annotations
import sys

# Leading character of self-evaluating keyword symbols, e.g. :name
KEYWORD_MARKER = ":"


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned so frame lookups hash and compare cheaply
        self.id = sys.intern(name)

    @property
    def is_keyword(self) -> bool:
        return self.id.startswith(KEYWORD_MARKER)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
