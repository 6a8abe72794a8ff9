"""Command-line driver that prints the tokens of a source file."""

import argparse
import logging
import sys
from pathlib import Path

from monkey.errors import IllegalCharacterError
from monkey.lexer import lex

logger = logging.getLogger(__name__)

SAMPLE_PROGRAM = """\
let five = 5;
let ten = 10;

if (five != ten) {
    return true;
};

if (five == ten) {
    return false;
};
"""


def _read_source(path: str | None) -> str:
    if path is None:
        return SAMPLE_PROGRAM
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="monkey-lex", description="Print the tokens of a source file")
    parser.add_argument(
        "path",
        nargs="?",
        help="source file to lex, or - for stdin (default: built-in sample program)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on the first illegal character instead of printing an illegal token",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("monkey").setLevel(level)

    try:
        source = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    logger.debug("Lexing %d characters", len(source))

    if args.strict:
        try:
            tokens = lex(source, strict=True)
        except IllegalCharacterError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        tokens = lex(source)

    for token in tokens:
        print(token)
    return 0
