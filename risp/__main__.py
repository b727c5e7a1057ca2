from __future__ import annotations

import argparse
import logging
import sys

from risp import __version__
from risp.config import get_log_level
from risp.errors import RispError
from risp.interpreter import Interpreter
from risp.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="risp", description="Risp interpreter")
    parser.add_argument("file", nargs="?", help="source file to evaluate; starts a REPL when omitted")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    except RispError as e:
        print(f"prelude failed: {e}", file=sys.stderr)
        return 1

    if args.file is None:
        run_repl(interp)
        return 0

    try:
        interp.eval_file(args.file)
    except OSError as e:
        print(f"cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    except RispError as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
