"""jyx command-line entry point.

Usage:
    jyx tokenize <file.jyx>         Display the token stream (debug)
    jyx --version                   Show the version
    jyx --help, -h                  Show this message

Options:
    -v, --verbose                   Log scanner progress to stderr
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from jyx.lexer.errors import ErrorCollector
from jyx.lexer.scanner import scan

# sysexits.h EX_DATAERR, the status the reference interpreter uses for bad input
EXIT_DATA_ERROR = 65


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in args)
    args = [a for a in args if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from jyx import __version__
        print(f"jyx {__version__}")
        return 0

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    source = filepath.read_text(encoding="utf-8")
    return _cmd_tokenize(source)


def _cmd_tokenize(source: str) -> int:
    """Display the token stream, reporting lexical errors on stderr."""
    errors = ErrorCollector()
    tokens = scan(source, errors)

    for err in errors.errors:
        print(err, file=sys.stderr)

    for tok in tokens:
        print(tok)

    return EXIT_DATA_ERROR if errors.had_error else 0


if __name__ == "__main__":
    sys.exit(main())
