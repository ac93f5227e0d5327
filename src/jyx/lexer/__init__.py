"""jyx lexer: single-pass scanner with error accumulation."""

from jyx.lexer.errors import ErrorCollector, ErrorReporter, LexError, LexerError, raise_on_error
from jyx.lexer.scanner import Scanner, scan
from jyx.lexer.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "KEYWORDS",
    "ErrorCollector",
    "ErrorReporter",
    "LexError",
    "LexerError",
    "Scanner",
    "Token",
    "TokenType",
    "raise_on_error",
    "scan",
]
