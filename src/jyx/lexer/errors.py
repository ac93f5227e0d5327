"""Lexical diagnostics for the jyx scanner.

The scanner never raises on malformed input. It hands each problem to an
injected reporter, a plain callable taking ``(line, message)``, and keeps
going so one pass can surface every lexical error in the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

log = logging.getLogger(__name__)

UNTERMINATED_STRING = "Unterminated string."
UNEXPECTED_CHARACTER = "Unexpected character"


class ErrorReporter(Protocol):
    """Anything that can receive a lexical diagnostic."""

    def __call__(self, line: int, message: str) -> None: ...


@dataclass(frozen=True)
class LexError:
    """A single lexical diagnostic."""

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


def log_reporter(line: int, message: str) -> None:
    """Default reporter: write the diagnostic to this module's logger."""
    log.error("%s", LexError(line, message))


@dataclass
class ErrorCollector:
    """Reporter that keeps every diagnostic it receives.

    Usage::

        errors = ErrorCollector()
        tokens = scan(source, errors)
        if errors.had_error:
            ...
    """

    errors: list[LexError] = field(default_factory=list)

    def __call__(self, line: int, message: str) -> None:
        self.errors.append(LexError(line, message))

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        self.errors.clear()


class LexerError(Exception):
    """Raised by :func:`raise_on_error` when a scan reported diagnostics."""

    def __init__(self, errors: list[LexError], file: str = "<unknown>"):
        self.errors = list(errors)
        self.file = file
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{file}: {len(self.errors)} lexical error(s): {details}")


def raise_on_error(collector: ErrorCollector, file: str = "<unknown>") -> None:
    """Turn collected diagnostics into a :class:`LexerError`, if there are any."""
    if collector.had_error:
        raise LexerError(collector.errors, file)
