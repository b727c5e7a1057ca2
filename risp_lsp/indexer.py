"""
Lightweight indexer for Risp files without evaluating code.

Tokens come from the reader's own scanner, with each offset mapped to a
line and column, and are used to build an index of:
- definitions: (def name ...), with kind 'function' when the value is an (fn ...)
- paren balance and unterminated strings
- the reader's own syntax error, if the buffer does not parse

The scanner never raises, so partial buffers are fine.
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from risp.errors import RispSyntaxError
from risp.reader.parser import LPAREN, QUOTE, RPAREN, read, scan


@dataclass
class Token:
    text: str
    line: int
    col: int


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    has_unmatched_quote: bool = False
    unmatched_quote_at: Optional[Tuple[int, int]] = None
    parse_error: Optional[str] = None


def iter_tokens(text: str) -> Iterator[Token]:
    # reader tokens, with offsets turned into (line, col)
    line_starts = [0] + [i + 1 for i, ch in enumerate(text) if ch == "\n"]
    for token, offset in scan(text):
        line = bisect_right(line_starts, offset) - 1
        yield Token(token, line, offset - line_starts[line])


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(iter_tokens(text))

    for i, tok in enumerate(tokens):
        if tok.text == LPAREN:
            idx.paren_balance += 1
            # (def name value)
            if i + 2 < len(tokens) and tokens[i + 1].text == "def":
                name_tok = tokens[i + 2]
                if name_tok.text in (LPAREN, RPAREN) or name_tok.text.startswith(QUOTE):
                    continue
                is_fn = (
                    i + 4 < len(tokens)
                    and tokens[i + 3].text == LPAREN
                    and tokens[i + 4].text == "fn"
                )
                idx.symbols[name_tok.text] = SymbolDef(
                    name=name_tok.text,
                    kind="function" if is_fn else "var",
                    line=name_tok.line,
                    col=name_tok.col,
                )
        elif tok.text == RPAREN:
            idx.paren_balance -= 1
        elif tok.text.startswith(QUOTE) and (len(tok.text) == 1 or not tok.text.endswith(QUOTE)):
            idx.has_unmatched_quote = True
            idx.unmatched_quote_at = (tok.line, tok.col)

    try:
        read(text)
    except RispSyntaxError as e:
        idx.parse_error = str(e)

    return idx


# Builtin and special form signatures for hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "if": "(if test then else)",
    "def": "(def name value)",
    "fn": "(fn (params) body)",
    "repeat": "(repeat f xs)",
    "+": "(+ nums)",
    "-": "(- x nums)",
    "*": "(* x nums)",
    "=": "(= x nums)",
    ">": "(> x nums)",
    ">=": "(>= x nums)",
    "<": "(< x nums)",
    "<=": "(<= x nums)",
    "list": "(list xs)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "num": "(num max start)",
    "httpget": "(httpget url)",
    "json-parse": "(json-parse text)",
    "json-get": "(json-get doc key)",
    "json-pretty": "(json-pretty doc)",
}
