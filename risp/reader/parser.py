"""
  Risp Reader: tokenizer and recursive-descent parser

- Character-driven tokenizer, no regex table: the only token kinds are
  parentheses, atoms and double-quoted strings.
- Emits Python primitives:

    - true / false -> bool
    - "text"       -> str (quotes stripped)
    - numbers      -> float
    - lists        -> Python list
    - anything else -> Symbol

  Strings have no escape mechanism, so a string cannot contain '"'.
  Number-looking tokens that do not match the float grammar (1.2.3, 1e, 1_0)
  are read as symbols rather than rejected.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Sequence

from risp import SExpression
from risp.errors import RispSyntaxError
from risp.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"
QUOTE = '"'
COMMENT_CHARS = frozenset(";#")
SEPARATORS = frozenset(" \t\r\n")
TOO_DEEP = "maximum nesting depth exceeded"

FLOAT_RE = re.compile(
    r"[+-]?"
    r"(?:"
    r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"  # 1, 1., 1.5, .5, 1e3
    r"|inf(?:inity)?"
    r"|nan"
    r")",
    re.IGNORECASE,
)


def scan(source: str) -> list[tuple[str, int]]:
    """Split `source` into (token, offset) pairs, offset being the index of
    the token's first character.

    String tokens keep both quote characters so the parser can tell "x" from x.
    Never fails; an unterminated string is flushed as whatever was collected.
    """
    spans: list[tuple[str, int]] = []
    buf: list[str] = []
    start = 0
    in_quote = False
    in_comment = False

    def flush() -> None:
        if buf:
            spans.append(("".join(buf), start))
            buf.clear()

    for i, ch in enumerate(source):
        if in_comment:
            if ch == "\n":
                in_comment = False
            continue

        if in_quote:
            buf.append(ch)
            if ch == QUOTE:
                in_quote = False
                flush()
            continue

        if ch == QUOTE:
            flush()
            start = i
            buf.append(ch)
            in_quote = True
        elif ch in (LPAREN, RPAREN):
            flush()
            spans.append((ch, i))
        elif ch in COMMENT_CHARS:
            flush()
            in_comment = True
        elif ch in SEPARATORS:
            flush()
        else:
            if not buf:
                start = i
            buf.append(ch)

    flush()
    return spans


def tokenize(source: str) -> list[str]:
    """Split `source` into parenthesis, atom and string tokens."""
    tokens = [token for token, _ in scan(source)]
    logger.debug("tokenized %d chars into %d tokens", len(source), len(tokens))
    return tokens


def parse_atom(token: str) -> SExpression:
    """Classify a single non-parenthesis token."""
    if token == "true":
        return True
    if token == "false":
        return False
    if token.startswith(QUOTE):
        return token[1:-1]
    if FLOAT_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def parse(tokens: Sequence[str]) -> tuple[SExpression, Sequence[str]]:
    """Read one form from the front of `tokens`.

    Returns the form and the unconsumed remainder of the token sequence.
    """
    try:
        form, pos = _parse_at(tokens, 0)
    except RecursionError as e:
        raise RispSyntaxError(TOO_DEEP) from e
    return form, tokens[pos:]


def _parse_at(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    if pos >= len(tokens):
        raise RispSyntaxError("could not get token")
    token = tokens[pos]
    if token == LPAREN:
        return _read_seq(tokens, pos + 1)
    if token == RPAREN:
        raise RispSyntaxError("unexpected closing parenthesis")
    return parse_atom(token), pos + 1


def _read_seq(tokens: Sequence[str], pos: int) -> tuple[list[SExpression], int]:
    items: list[SExpression] = []
    while True:
        if pos >= len(tokens):
            raise RispSyntaxError("could not find closing parenthesis")
        if tokens[pos] == RPAREN:
            return items, pos + 1
        form, pos = _parse_at(tokens, pos)
        items.append(form)


def parse_all(tokens: Sequence[str]) -> Iterator[SExpression]:
    """Yield every top-level form in `tokens`; yields nothing for no tokens."""
    pos = 0
    while pos < len(tokens):
        try:
            form, pos = _parse_at(tokens, pos)
        except RecursionError as e:
            raise RispSyntaxError(TOO_DEEP) from e
        yield form


def read(source: str) -> list[SExpression]:
    """Tokenize and parse all of `source`."""
    return list(parse_all(tokenize(source)))
