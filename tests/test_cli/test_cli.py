"""Tests for the jyx command-line entry point."""

from jyx import __version__
from jyx.cli import EXIT_DATA_ERROR, main


def write_source(tmp_path, text: str) -> str:
    path = tmp_path / "sample.jyx"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestTokenize:
    def test_prints_token_stream(self, tmp_path, capsys):
        path = write_source(tmp_path, "var x = 1;")
        assert main(["tokenize", path]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "VAR var null",
            "IDENTIFIER x null",
            "EQUAL = null",
            "NUMBER 1 1.0",
            "SEMICOLON ; null",
            "EOF  null",
        ]

    def test_lexical_errors_exit_with_data_error(self, tmp_path, capsys):
        path = write_source(tmp_path, 'print @;\n"open')
        assert main(["tokenize", path]) == EXIT_DATA_ERROR
        captured = capsys.readouterr()
        assert "[line 1] Error: Unexpected character: '@'." in captured.err
        assert "[line 2] Error: Unterminated string." in captured.err
        assert captured.out.splitlines()[-1] == "EOF  null"

    def test_verbose_flag_is_accepted(self, tmp_path, capsys):
        path = write_source(tmp_path, "nil")
        assert main(["-v", "tokenize", path]) == 0
        assert "NIL nil null" in capsys.readouterr().out


class TestUsage:
    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        out = capsys.readouterr().out
        assert "tokenize" in out
        assert "--help, -h" in out

    def test_short_help(self, capsys):
        assert main(["-h"]) == 0
        assert "Usage" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"jyx {__version__}"

    def test_unknown_command(self, capsys):
        assert main(["parse", "x.jyx"]) == 1
        assert "unknown command" in capsys.readouterr().out

    def test_missing_file_argument(self, capsys):
        assert main(["tokenize"]) == 1
        assert "requires a file" in capsys.readouterr().out

    def test_file_not_found(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "missing.jyx")]) == 1
        assert "file not found" in capsys.readouterr().out
