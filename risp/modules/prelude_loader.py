from __future__ import annotations
import logging
from typing import Protocol

from risp.config import get_prelude_files

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


# Evaluate each configured prelude file in order; missing files are skipped

def load_prelude(itp: _HasEvalPrelude) -> None:
    for path in get_prelude_files():
        if not path.is_file():
            logger.warning("prelude file not found: %s", path)
            continue
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
