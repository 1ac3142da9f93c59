"""
Командная строка archcalc

С аргументами: аргументы склеиваются через пробел и вычисляются один раз,
при ошибке код завершения 1:

    archcalc "9' - 20\\""
    7' 4"

Без аргументов: интерактивный режим (REPL) с приглашением "➤ ";
ошибка в строке не завершает сессию, выход по EOF или Ctrl-C.
"""

import json
import logging
from typing import Optional

import click

from archcalc.core.contracts import EvaluationResult, validate_evaluation_result
from archcalc.core.domain.formatting import (
    DECIMAL_PLACES_DEFAULT,
    ROUNDING_DENOMINATOR_DEFAULT,
    FormatConfig,
)
from archcalc.shell.evaluate import evaluate_line, render_caret

try:
    import readline  # noqa: F401  (редактирование строки и история для input())
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

PROMPT = "➤ "
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def emit(result: Optional[EvaluationResult], as_json: bool) -> bool:
    """
    Вывод результата одной строки.

    Args:
        result: Результат evaluate_line (None для пустой строки)
        as_json: Печатать JSON, проверенный по схеме evaluation_result

    Returns:
        False, если результат содержит ошибку
    """
    if result is None:
        return True

    if as_json:
        payload = result.model_dump(mode="json")
        validate_evaluation_result(payload)
        click.echo(json.dumps(payload, ensure_ascii=False))
        return result.ok

    if result.ok:
        click.echo(result.display)
        return True

    error = result.error
    click.echo(f"error: {error.message}", err=True)
    if error.pos is not None:
        click.echo(render_caret(result.input, error.pos), err=True)
    return False


def repl(verbose: bool, config: FormatConfig, as_json: bool) -> None:
    """Цикл чтения и вычисления строк до EOF или Ctrl-C."""
    if readline is None:
        logger.debug("readline unavailable, line editing disabled")

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            click.echo()
            break
        emit(evaluate_line(line, verbose, config), as_json)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1, type=click.UNPROCESSED)
@click.option("-v", "--verbose", is_flag=True, help="Show inch totals, 1/32 rounding and decimals.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option(
    "--precision",
    type=click.IntRange(min=1),
    default=DECIMAL_PLACES_DEFAULT,
    show_default=True,
    help="Digits after the point in decimal approximations.",
)
@click.option(
    "--round-to",
    type=click.IntRange(min=1),
    default=ROUNDING_DENOMINATOR_DEFAULT,
    show_default=True,
    help="Denominator of the inch rounding grid.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    expression: tuple,
    verbose: bool,
    as_json: bool,
    precision: int,
    round_to: int,
    log_level: str,
) -> None:
    """Architectural calculator over exact fractions, feet and inches.

    Вычисляет EXPRESSION или, без аргументов, запускает интерактивный режим.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )
    config = FormatConfig(rounding_denominator=round_to, decimal_places=precision)

    if expression:
        if not emit(evaluate_line(" ".join(expression), verbose, config), as_json):
            ctx.exit(1)
        return

    repl(verbose, config, as_json)


def main() -> None:
    cli()
