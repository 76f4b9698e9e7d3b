# =============================================================================
# test_cli.py - pl0c Command-Line Tests
# =============================================================================
# Runs the pl0c command through click's CliRunner and checks the token
# dump, diagnostics and exit codes.
# =============================================================================

from pathlib import Path

import pytest
from click.testing import CliRunner

from pl0c import __version__
from pl0c.cli.errors import ExitCode
from pl0c.cli.pl0c import format_token, main
from pl0c.lexer import Token, TokenKind


@pytest.fixture
def runner():
    return CliRunner()


def run_on_source(runner, source: str, *args: str, name: str = "prog.pl0"):
    """Write source to name in an isolated directory and run pl0c on it."""
    with runner.isolated_filesystem():
        Path(name).write_text(source)
        return runner.invoke(main, [*args, name])


class TestPackage:
    """Test the cli package exports."""

    def test_command_module_exported(self):
        import pl0c.cli
        assert pl0c.cli.pl0c.main is main
        assert pl0c.cli.__all__ == ["pl0c"]


class TestFormatToken:
    """Test the token dump line format."""

    def test_identifier(self):
        token = Token(TokenKind.IDENTIFIER, "x", 3, 1)
        assert format_token(token) == "3:\tIDENT, x"

    def test_hyphenated_name(self):
        token = Token(TokenKind.LPAREN, "(", 1, 5)
        assert format_token(token) == "1:\tLEFT-PAREN, ("


class TestDump:
    """Test successful runs."""

    def test_token_dump(self, runner):
        result = run_on_source(runner, "x := 5.")
        assert result.exit_code == ExitCode.SUCCESS, result.output
        assert result.output.splitlines() == [
            "1:\tIDENT, x",
            "1:\tASSIGN, :=",
            "1:\tNUMBER, 5",
            "1:\tDOT, .",
            "done",
        ]

    def test_implicit_final_dot(self, runner):
        result = run_on_source(runner, "var x;\n")
        assert result.exit_code == 0
        assert result.output.splitlines()[-2:] == ["2:\tDOT, .", "done"]

    def test_lines_across_comments(self, runner):
        result = run_on_source(runner, "{ comment\nspans lines } abc.")
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "2:\tIDENT, abc"

    def test_operator_names(self, runner):
        result = run_on_source(runner, "a < b > c # d = (e).")
        names = [line.split("\t")[1].split(",")[0] for line in result.output.splitlines()[:-1]]
        assert names == [
            "IDENT", "LESS-THAN", "IDENT", "GREATER-THAN", "IDENT", "HASH",
            "IDENT", "EQUAL", "LEFT-PAREN", "IDENT", "RIGHT-PAREN", "DOT",
        ]

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLexicalErrors:
    """Test diagnostics for bad source."""

    def test_malformed_assign(self, runner):
        result = run_on_source(runner, ":x")
        assert result.exit_code == ExitCode.ERROR
        assert "pl0c: error: 1: unknown token" in result.output

    def test_no_tokens_printed_on_error(self, runner):
        result = run_on_source(runner, "var x;\nx := 1 % 2.")
        assert result.exit_code == 1
        assert "IDENT" not in result.output
        assert "done" not in result.output
        assert "pl0c: error: 2: unknown token '%'" in result.output

    def test_unterminated_comment(self, runner):
        result = run_on_source(runner, "{unterminated")
        assert result.exit_code == 1
        assert "pl0c: error: 1: unterminated comment" in result.output

    def test_invalid_number(self, runner):
        result = run_on_source(runner, "99999999999999999999")
        assert result.exit_code == 1
        assert "invalid number" in result.output

    def test_very_long_number(self, runner):
        result = run_on_source(runner, "9" * 5000)
        assert result.exit_code == ExitCode.ERROR
        assert "pl0c: error: 1: invalid number" in result.output
        assert "internal error" not in result.output

    def test_very_long_zero_padded_number(self, runner):
        result = run_on_source(runner, "0" * 5000 + "7.")
        assert result.exit_code == 0, result.output
        assert result.output.endswith("DOT, .\ndone\n")

    def test_bits_option(self, runner):
        result = run_on_source(runner, "40000.", "--bits", "16")
        assert result.exit_code == 1
        assert "invalid number '40000'" in result.output

    def test_strict_option(self, runner):
        result = run_on_source(runner, "x := 1", "--strict")
        assert result.exit_code == 1
        assert "expected '.' at end of program" in result.output

    def test_strict_accepts_terminated_program(self, runner):
        result = run_on_source(runner, "x := 1.", "--strict")
        assert result.exit_code == 0
        assert result.output.endswith("done\n")

    def test_verbose_shows_context(self, runner):
        result = run_on_source(runner, "x := 1 % 2.", "-v")
        assert result.exit_code == 1
        assert "    x := 1 % 2." in result.output
        assert "prog.pl0:1:8: error:" in result.output


class TestUsageErrors:
    """Test argument and input file handling."""

    def test_no_arguments(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 1
        assert "pl0c: error: usage: pl0c <file>.pl0" in result.output

    def test_two_arguments(self, runner):
        result = runner.invoke(main, ["a.pl0", "b.pl0"])
        assert result.exit_code == 1
        assert "pl0c: error: usage" in result.output

    def test_unknown_option(self, runner):
        result = runner.invoke(main, ["--nope", "a.pl0"])
        assert result.exit_code == 1
        assert "pl0c: error:" in result.output

    def test_bad_bits_value(self, runner):
        result = runner.invoke(main, ["--bits", "1", "a.pl0"])
        assert result.exit_code == 1
        assert "pl0c: error:" in result.output

    def test_wrong_suffix(self, runner):
        result = run_on_source(runner, "x.", name="prog.txt")
        assert result.exit_code == 1
        assert "pl0c: error: File must end in '.pl0'" in result.output

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["missing.pl0"])
        assert result.exit_code == 1
        assert "pl0c: error: Unable to open file 'missing.pl0'" in result.output


EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class TestExamples:
    """The bundled example programs tokenize cleanly in strict mode."""

    @pytest.mark.parametrize("name", ["square.pl0", "primes.pl0"])
    def test_example(self, runner, name):
        result = runner.invoke(main, ["--strict", str(EXAMPLES_DIR / name)])
        assert result.exit_code == 0, result.output
        assert result.output.endswith("DOT, .\ndone\n")
