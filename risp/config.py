from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return os.pathsep


# Resolve installation dir (risp package directory)
_RISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILES = [_RISP_DIR / 'prelude' / 'core.risp']
_DEFAULT_HTTP_TIMEOUT = 10.0
_DEFAULT_TEST_URL = 'https://jsonplaceholder.typicode.com/posts/1'
_DEFAULT_PROMPT = 'risp> '
_DEFAULT_LOG_LEVEL = 'WARNING'
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('RISP_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_http_timeout() -> float:
    raw = os.environ.get('RISP_HTTP_TIMEOUT')
    if not raw:
        return _DEFAULT_HTTP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_HTTP_TIMEOUT
    return value if value > 0 else _DEFAULT_HTTP_TIMEOUT


def get_test_url() -> str:
    return os.environ.get('RISP_TEST_URL') or _DEFAULT_TEST_URL


def get_prompt() -> str:
    return os.environ.get('RISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    level = (os.environ.get('RISP_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).upper()
    return level if level in _LOG_LEVELS else _DEFAULT_LOG_LEVEL
