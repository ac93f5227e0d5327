"""Tests for lexical diagnostics and reporters."""

import pytest

from jyx.lexer.errors import (
    UNTERMINATED_STRING,
    ErrorCollector,
    LexError,
    LexerError,
    raise_on_error,
)
from jyx.lexer.scanner import scan


class TestLexError:
    def test_format(self):
        assert str(LexError(7, "Unexpected character: '@'.")) == (
            "[line 7] Error: Unexpected character: '@'."
        )


class TestErrorCollector:
    def test_starts_empty(self):
        errors = ErrorCollector()
        assert errors.errors == []
        assert not errors.had_error

    def test_collects_in_order(self):
        errors = ErrorCollector()
        errors(1, "first")
        errors(4, "second")
        assert errors.errors == [LexError(1, "first"), LexError(4, "second")]
        assert errors.had_error

    def test_clear(self):
        errors = ErrorCollector()
        errors(1, "oops")
        errors.clear()
        assert not errors.had_error

    def test_one_collector_across_scans(self):
        errors = ErrorCollector()
        scan("@", errors)
        scan('"open', errors)
        assert [e.message for e in errors.errors][1] == UNTERMINATED_STRING
        assert len(errors.errors) == 2


class TestRaiseOnError:
    def test_no_errors_no_raise(self):
        errors = ErrorCollector()
        scan("var ok = true;", errors)
        raise_on_error(errors)

    def test_raises_with_all_errors(self):
        errors = ErrorCollector()
        scan("@\n#", errors)
        with pytest.raises(LexerError, match="2 lexical error") as exc_info:
            raise_on_error(errors, file="demo.jyx")
        assert exc_info.value.file == "demo.jyx"
        assert [e.line for e in exc_info.value.errors] == [1, 2]
        assert "demo.jyx" in str(exc_info.value)
