"""Тесты оболочки: evaluate_line, render_caret и команда archcalc.

Coverage:
- Пустая строка: no-op
- Успех / синтаксическая / математическая ошибка
- Каретка под позицией ошибки
- CLI: аргументы командной строки, коды выхода, --json, --verbose
- REPL: несколько строк, продолжение после ошибки, EOF
"""

import json

from click.testing import CliRunner

from archcalc.core.contracts import ErrorKind, validate_evaluation_result
from archcalc.core.domain.formatting import FormatConfig
from archcalc.shell.cli import cli
from archcalc.shell.evaluate import evaluate_line, render_caret


class TestEvaluateLine:
    """evaluate_line"""

    def test_blank_is_noop(self):
        assert evaluate_line("") is None
        assert evaluate_line("  \t ") is None

    def test_success(self):
        result = evaluate_line("9' - 20\"")
        assert result.ok
        assert result.display == "7' 4\""
        assert result.error is None

    def test_verbose(self):
        result = evaluate_line("13\"", verbose=True)
        assert result.display == "1' 1\" = 13\""

    def test_config_passed_through(self):
        result = evaluate_line("2 / 3", verbose=True, config=FormatConfig(decimal_places=3))
        assert result.display == "2/3 ≈ 0.667"

    def test_syntax_error(self):
        result = evaluate_line("1 + +")
        assert not result.ok
        assert result.error.kind == ErrorKind.SYNTAX
        assert result.error.pos == 4
        assert result.error.message == "unexpected `+`"

    def test_math_error(self):
        result = evaluate_line("1' + 1")
        assert result.error.kind == ErrorKind.MATH
        assert result.error.pos == 3

    def test_deep_nesting_is_syntax_error(self):
        result = evaluate_line("(" * 400 + "1" + ")" * 400)
        assert result.error.kind == ErrorKind.SYNTAX
        assert result.error.pos == 100

    def test_tokenizer_error(self):
        result = evaluate_line("1 ~ 2")
        assert result.error.kind == ErrorKind.SYNTAX
        assert result.error.message == "unexpected token"
        assert result.error.pos == 2


class TestRenderCaret:
    """render_caret"""

    def test_caret_under_position(self):
        assert render_caret("1 + +", 4) == "\t1 + +\n\t    ^"

    def test_caret_at_start(self):
        assert render_caret("~", 0) == "\t~\n\t^"

    def test_caret_past_end(self):
        assert render_caret("1 +", 3) == "\t1 +\n\t   ^"


class TestCommandLine:
    """archcalc с аргументами"""

    def test_single_argument(self):
        result = CliRunner().invoke(cli, ["9' - 20\""])
        assert result.exit_code == 0
        assert result.output.strip() == "7' 4\""

    def test_arguments_joined_with_spaces(self):
        result = CliRunner().invoke(cli, ["2", "*", "(3", "+", "4)"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    def test_mixed_number_from_separate_arguments(self):
        result = CliRunner().invoke(cli, ["8'", "1", "1/2\"", "/", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "4' 3/4\""

    def test_error_exit_code_and_caret(self):
        result = CliRunner().invoke(cli, ["1 + +"])
        assert result.exit_code == 1
        assert "error: unexpected `+`" in result.output
        assert "\t    ^" in result.output

    def test_math_error_exit_code(self):
        result = CliRunner().invoke(cli, ["1 / 0"])
        assert result.exit_code == 1
        assert "error: division by zero" in result.output

    def test_verbose_flag(self):
        result = CliRunner().invoke(cli, ["-v", "3/128\""])
        assert result.exit_code == 0
        assert result.output.strip() == "3/128\" ≈ 1/32\""

    def test_round_to_option(self):
        result = CliRunner().invoke(cli, ["--round-to", "16", "-v", "3/64\""])
        assert result.output.strip() == "3/64\" ≈ 1/16\""

    def test_negative_expression_argument(self):
        result = CliRunner().invoke(cli, ["--", "-1", "*", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "-2"

    def test_json_success(self):
        result = CliRunner().invoke(cli, ["--json", "2 * (3 + 4)"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        validate_evaluation_result(payload)
        assert payload["ok"] is True
        assert payload["display"] == "14"

    def test_json_error(self):
        result = CliRunner().invoke(cli, ["--json", "1' + 1"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["error"]["kind"] == "math"
        assert payload["error"]["pos"] == 3

    def test_deep_nesting_reported_as_error(self):
        result = CliRunner().invoke(cli, ["(" * 400 + "1" + ")" * 400])
        assert result.exit_code == 1
        assert "error: expression too deeply nested" in result.output

    def test_blank_argument_is_noop(self):
        result = CliRunner().invoke(cli, ["   "])
        assert result.exit_code == 0
        assert result.output == ""


class TestRepl:
    """Интерактивный режим"""

    def test_evaluates_each_line(self):
        result = CliRunner().invoke(cli, [], input="1 + 1\n9' - 20\"\n")
        assert result.exit_code == 0
        assert "2\n" in result.output
        assert "7' 4\"" in result.output

    def test_continues_after_error(self):
        result = CliRunner().invoke(cli, [], input="1 / 0\n\n2 * 3\n")
        assert result.exit_code == 0
        assert "error: division by zero" in result.output
        assert "6\n" in result.output

    def test_continues_after_deep_nesting(self):
        line = "(" * 400 + "1" + ")" * 400
        result = CliRunner().invoke(cli, [], input=f"{line}\n{'-' * 1500}1\n2 * 3\n")
        assert result.exit_code == 0
        assert "error: expression too deeply nested" in result.output
        assert "6\n" in result.output

    def test_eof_ends_session(self):
        result = CliRunner().invoke(cli, [], input="")
        assert result.exit_code == 0
