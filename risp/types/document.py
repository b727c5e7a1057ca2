from __future__ import annotations

from typing import Any


class Document:
    """Opaque wrapper around a decoded JSON value.

    The evaluator only stores and forwards documents; reading them is left to
    the json natives in risp.builtin.json_builtin.
    """

    __slots__ = ("data",)

    def __init__(self, data: Any):
        self.data = data

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Document) and self.data == other.data

    def __repr__(self):
        return f"Document({self.data!r})"
