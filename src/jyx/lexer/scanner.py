"""jyx scanner: single forward pass from source text to a flat token list.

Design decisions:
- One character of lookahead (two for the decimal point in numbers).
- ``//`` comments and whitespace are discarded, not tokenized.
- Malformed input is reported through an injected reporter and skipped,
  so a single pass surfaces every lexical error.
- Only ASCII letters, digits and ``_`` are word characters.
"""

from __future__ import annotations

import logging

from jyx.lexer.errors import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    ErrorReporter,
    log_reporter,
)
from jyx.lexer.tokens import KEYWORDS, Literal, Token, TokenType

log = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by "=".
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \r\t")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_alphanumeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


class Scanner:
    """Turns jyx source text into a list of `Token` objects.

    Usage::

        scanner = Scanner(source_text, reporter=errors)
        tokens = scanner.scan_tokens()

    A scanner runs once. Build a new one for each source text.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else log_reporter
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.error_count = 0
        self._done = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan_tokens(self) -> list[Token]:
        """Scan the entire source and return the token list, ending in EOF."""
        if self._done:
            raise RuntimeError("Scanner has already consumed its source")
        self._done = True
        log.debug("Scanning %d characters", len(self.source))

        while not self._at_end():
            # Beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        log.debug(
            "Scanned %d token(s) over %d line(s), %d error(s)",
            len(self.tokens), self.line, self.error_count,
        )
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one character and whatever lexeme it starts."""
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
        elif ch in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(double if self._match("=") else single)
        elif ch == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in WHITESPACE:
            pass
        elif ch == "\n":
            self.line += 1
        elif ch == '"':
            self._scan_string()
        elif is_digit(ch):
            self._scan_number()
        elif is_alpha(ch):
            self._scan_identifier()
        else:
            self._error(f"{UNEXPECTED_CHARACTER}: {ch!r}.")

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal. No escape sequences."""
        while self._peek() != '"' and not self._at_end():
            # Strings may span lines
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._at_end():
            self._error(UNTERMINATED_STRING)
            return

        self._advance()  # consume closing quote
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _scan_number(self) -> None:
        """Scan digits with an optional fractional part."""
        while is_digit(self._peek()):
            self._advance()

        # A trailing "." without a digit after it is left for the next token.
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # consume the "."
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _scan_identifier(self) -> None:
        """Scan an identifier or keyword."""
        while is_alphanumeric(self._peek()):
            self._advance()

        word = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(word, TokenType.IDENTIFIER))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it, "" at end."""
        if self._at_end():
            return ""
        return self.source[self.current]

    def _peek_next(self) -> str:
        """Return the character after the current one, "" past end."""
        idx = self.current + 1
        if idx >= len(self.source):
            return ""
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _at_end(self) -> bool:
        return self.current >= len(self.source)

    def _skip_comment(self) -> None:
        """Skip from // to end of line, leaving the newline in place."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _add_token(self, token_type: TokenType, literal: Literal = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _error(self, message: str) -> None:
        self.error_count += 1
        self.reporter(self.line, message)


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan ``source`` in one pass and return its tokens.

    Lexical errors go to ``reporter`` (the logging reporter by default) and
    never stop the scan; the returned list always ends with one EOF token.
    """
    return Scanner(source, reporter).scan_tokens()
