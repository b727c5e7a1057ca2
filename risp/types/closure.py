"""User-defined function values created by the `fn` special form."""

from __future__ import annotations

from io import StringIO

from risp import SExpression, RispValue
from risp.types.environment import Environment
from risp.types.symbol import Symbol


class Closure:
    """A function with formal parameters, an unevaluated body, and its defining env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference, not copied
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(self, args: list[RispValue]) -> Environment:
        """Bind argument values to the formals in a frame under the captured env."""
        return self.env.child_for_call(self.formals, args)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"
