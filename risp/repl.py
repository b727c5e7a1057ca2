"""Line-oriented read/evaluate/print loop.

One input line is one unit: every form on it is evaluated in order and each
result is printed as `=> <value>`. A RispError prints its reason instead and
the loop carries on; definitions made before the error are kept.
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from risp.config import get_prompt
from risp.errors import RispError
from risp.interpreter import Interpreter
from risp.printer import to_display


def eval_line(interp: Interpreter, line: str, out: TextIO) -> bool:
    """Evaluate one line, printing results or the error reason. Returns False on error."""
    try:
        for value in interp.eval_iter(line):
            print(f"=> {to_display(value)}", file=out)
    except RispError as e:
        print(f"=> {e}", file=out)
        return False
    return True


def run_repl(
    interp: Interpreter,
    read_line: Callable[[str], str] | None = None,
    out: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Read lines until EOF, evaluating each against `interp`."""
    read_line = read_line or input
    out = out or sys.stdout
    prompt = get_prompt() if prompt is None else prompt
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            # newline to clear up the terminal
            print(file=out)
            break
        eval_line(interp, line, out)
