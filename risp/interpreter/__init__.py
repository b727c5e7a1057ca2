from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Literal

from risp import NativeFn, RispValue
from risp.errors import RispRecursionError
from risp.reader.parser import parse_all, tokenize
from risp.evaluation.evaluator import evaluate
from risp.types.environment import Environment
from risp.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Risp code against one root Environment.
    Definitions persist across calls, including calls that end in an error.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        natives: dict[str, NativeFn] | None = None,
    ):
        self.env: Environment = Environment()
        register(self.env, natives)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from risp.modules.prelude_loader import load_prelude
            load_prelude(self)
        else:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_iter(code):
            pass

    def eval_iter(self, code: str) -> Iterator[RispValue]:
        """Yield the value of each top-level form in `code`, in order."""
        for expr in parse_all(tokenize(code)):
            try:
                value = evaluate(expr, self.env)
            except RecursionError as e:
                raise RispRecursionError("maximum recursion depth exceeded") from e
            yield value

    def eval(self, code: str) -> RispValue | None:
        """Evaluate every form in `code`; return the last value, or None if there were no forms."""
        result = None
        for result in self.eval_iter(code):
            pass
        return result

    def eval_file(self, path: str | Path) -> RispValue | None:
        path = Path(path)
        logger.info("evaluating %s", path)
        return self.eval(path.read_text(encoding='utf-8'))
