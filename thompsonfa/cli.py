"""Command line: tokenize and parse a regular expression and show the results."""

from __future__ import annotations

import argparse
import sys

from thompsonfa.syntax import ParseError, lex, parse

DEFAULT_PATTERN = "(a*b*)|(ab*)"


def main(argv: list[str] | None = None) -> int:
    """Print the tokens and syntax tree of a pattern; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="thompsonfa", description="Tokenize and parse a regular expression."
    )
    parser.add_argument("pattern", nargs="?", default=DEFAULT_PATTERN)
    args = parser.parse_args(argv)

    stream = lex(args.pattern)
    print(stream)
    try:
        regex = parse(stream)
    except ParseError as error:
        print(error, file=sys.stderr)
        return 1
    print(repr(regex))
    return 0


if __name__ == "__main__":
    sys.exit(main())