import pytest

from risp.builtin.env_builtin import register
from risp.interpreter import Interpreter
from risp.types.environment import Environment


@pytest.fixture(autouse=True)
def _clean_risp_config(monkeypatch):
    # Tests never pick up settings from the developer's shell
    for var in ("RISP_PRELUDE_PATH", "RISP_HTTP_TIMEOUT", "RISP_TEST_URL", "RISP_PROMPT", "RISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with builtins only, no prelude."""
    return Interpreter(prelude=None)
