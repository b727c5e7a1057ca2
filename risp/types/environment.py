"""Runtime environment for Risp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
keeps the frame it was created in (and therefore the whole chain above it)
alive, and later `def`s made in that frame are visible through the closure.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional, Sequence

from risp import RispValue
from risp.errors import RispArityError, RispInvalidSymbol, RispUnboundSymbol
from risp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, RispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: RispValue) -> None:
        """Bind `name` to `value` in this frame only, never in an outer one.

        Raises RispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise RispInvalidSymbol(f"Cannot define {name} as a symbol")
        logger.debug("define %s in frame %#x", name, id(self))
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, RispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> RispValue:
        """Look up the value bound to `name`.

        Keywords (symbols starting with ':') evaluate to themselves and never
        touch the frames. Otherwise the chain is searched innermost first.
        Raises RispUnboundSymbol if not found.
        """
        if name.is_keyword:
            return name
        env = self.find(name)
        if env is None:
            raise RispUnboundSymbol(f"unexpected symbol k='{name}'")
        return env.vars[name]

    def child_for_call(
        self, formals: Sequence[Symbol], args: Sequence[RispValue]
    ) -> Environment:
        """Return a new frame under this one binding `formals` to `args` positionally."""
        if len(formals) != len(args):
            raise RispArityError(
                f"expected {len(formals)} arguments, got {len(args)}"
            )
        child = Environment(outer=self)
        for formal, value in zip(formals, args):
            child.vars[formal] = value
        return child

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
