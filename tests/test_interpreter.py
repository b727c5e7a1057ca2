import logging
import os
from pathlib import Path

import pytest

from risp import config
from risp.errors import RispError, RispRecursionError, RispUnboundSymbol
from risp.interpreter import Interpreter
from risp.types.symbol import Symbol


def test_default_prelude_is_loaded():
    interp = Interpreter()
    assert interp.eval("(inc 41)") == 42.0
    assert interp.eval("(square 3)") == 9.0
    assert interp.eval("(not false)") is True
    assert interp.eval("(zero? 0)") is True
    assert interp.eval("(max 2 5)") == 5.0
    assert interp.eval("(min 2 5)") == 2.0
    assert interp.eval("(map dec (list 1 2 3))") == [0.0, 1.0, 2.0]
    assert interp.eval("(first (rest (list 1 2 3)))") == 2.0


def test_no_prelude():
    interp = Interpreter(prelude=None)
    with pytest.raises(RispUnboundSymbol):
        interp.eval("(inc 1)")
    # builtins are still there
    assert interp.eval("(+ 1 1)") == 2.0


def test_prelude_from_string():
    interp = Interpreter(prelude="(def two 2) (def double (fn (n) (* two n)))")
    assert interp.eval("(double 4)") == 8.0


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    first = tmp_path / "a.risp"
    second = tmp_path / "b.risp"
    first.write_text("(def base 10)", encoding="utf-8")
    second.write_text("(def derived (+ base 1))", encoding="utf-8")
    monkeypatch.setenv("RISP_PRELUDE_PATH", os.pathsep.join([str(first), str(second)]))
    assert Interpreter().eval("derived") == 11.0


def test_missing_prelude_file_is_skipped(tmp_path, monkeypatch, caplog):
    present = tmp_path / "present.risp"
    present.write_text("(def here true)", encoding="utf-8")
    missing = tmp_path / "missing.risp"
    monkeypatch.setenv("RISP_PRELUDE_PATH", os.pathsep.join([str(missing), str(present)]))
    with caplog.at_level(logging.WARNING, logger="risp.modules.prelude_loader"):
        interp = Interpreter()
    assert interp.eval("here") is True
    assert "prelude file not found" in caplog.text


def test_broken_prelude_raises(tmp_path, monkeypatch):
    broken = tmp_path / "broken.risp"
    broken.write_text("(def x", encoding="utf-8")
    monkeypatch.setenv("RISP_PRELUDE_PATH", str(broken))
    with pytest.raises(RispError):
        Interpreter()


def test_extra_natives():
    interp = Interpreter(prelude=None, natives={"echo": lambda args: args})
    assert interp.eval('(echo 1 "a")') == [1.0, "a"]


def test_extra_natives_override_builtins():
    interp = Interpreter(prelude=None, natives={"+": lambda args: "plus"})
    assert interp.eval("(+ 1 2)") == "plus"


def test_eval_returns_last_value(interp):
    assert interp.eval("(def a 1) (def b 2) (+ a b)") == 3.0


def test_eval_of_nothing_is_none(interp):
    assert interp.eval("") is None
    assert interp.eval("; nothing here") is None


def test_eval_iter_yields_each_value(interp):
    assert list(interp.eval_iter("1 (list 2) :k")) == [1.0, [2.0], Symbol(":k")]


def test_definitions_survive_errors(interp):
    values = interp.eval_iter("(def kept 1) (car 5) (def lost 2)")
    assert next(values) == Symbol("kept")
    with pytest.raises(RispError):
        next(values)
    assert interp.eval("kept") == 1.0
    with pytest.raises(RispUnboundSymbol):
        interp.eval("lost")


def test_eval_file(tmp_path, interp):
    source = tmp_path / "prog.risp"
    source.write_text("; a program\n(def sq (fn (n) (* n n)))\n(sq 12)\n", encoding="utf-8")
    assert interp.eval_file(source) == 144.0
    assert interp.eval_file(str(source)) == 144.0


def test_eval_file_missing(tmp_path, interp):
    with pytest.raises(OSError):
        interp.eval_file(tmp_path / "nope.risp")


def test_interpreters_do_not_share_state():
    a = Interpreter(prelude=None)
    b = Interpreter(prelude=None)
    a.eval("(def only-a 1)")
    with pytest.raises(RispUnboundSymbol):
        b.eval("only-a")


def test_runaway_recursion_is_a_risp_error(interp):
    interp.eval("(def kept 1)")
    interp.eval("(def loop (fn (n) (loop (+ n 1))))")
    with pytest.raises(RispRecursionError, match="maximum recursion depth exceeded"):
        interp.eval("(loop 0)")
    assert interp.eval("(+ kept 1)") == 2.0


# --- configuration ---

def test_config_defaults():
    assert config.get_prelude_files() == [Path(config.__file__).resolve().parent / "prelude" / "core.risp"]
    assert config.get_http_timeout() == 10.0
    assert config.get_test_url() == "https://jsonplaceholder.typicode.com/posts/1"
    assert config.get_prompt() == "risp> "
    assert config.get_log_level() == "WARNING"


@pytest.mark.parametrize("raw,expected", [("3", 3.0), ("0.5", 0.5), ("0", 10.0), ("-1", 10.0), ("soon", 10.0)])
def test_http_timeout_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("RISP_HTTP_TIMEOUT", raw)
    assert config.get_http_timeout() == expected


@pytest.mark.parametrize("raw,expected", [("debug", "DEBUG"), ("Info", "INFO"), ("loud", "WARNING")])
def test_log_level_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("RISP_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


def test_prompt_may_be_empty(monkeypatch):
    monkeypatch.setenv("RISP_PROMPT", "")
    assert config.get_prompt() == ""


def test_paths_from_env_ignores_blank_entries(monkeypatch):
    monkeypatch.setenv("RISP_PRELUDE_PATH", os.pathsep.join(["a.risp", "", " b.risp "]))
    assert config.get_prelude_files() == [Path("a.risp"), Path("b.risp")]