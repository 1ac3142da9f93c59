"""
Вычисление одной строки для интерактивной оболочки и командной строки.

- Пустая строка или строка из пробелов: no-op (None)
- Ошибка синтаксиса в приоритете над математической
- render_caret: исходная строка и каретка под позицией ошибки
"""

import logging
from typing import Optional

from archcalc.core.contracts.result import ErrorKind, EvaluationError, EvaluationResult
from archcalc.core.domain.formatting import FormatConfig
from archcalc.core.errors import CalculatorError, ExpressionSyntaxError
from archcalc.parser.parser import parse

logger = logging.getLogger(__name__)


def evaluate_line(
    text: str,
    verbose: bool = False,
    config: Optional[FormatConfig] = None,
) -> Optional[EvaluationResult]:
    """
    Вычисление строки.

    Args:
        text: Строка, введённая пользователем
        verbose: Добавлять справочные приближения к результату
        config: Параметры verbose-вывода

    Returns:
        EvaluationResult, либо None для пустой строки
    """
    if not text.strip():
        return None

    logger.debug("evaluating %r", text)
    try:
        value = parse(text)
    except CalculatorError as e:
        kind = ErrorKind.SYNTAX if isinstance(e, ExpressionSyntaxError) else ErrorKind.MATH
        return EvaluationResult(
            input=text,
            ok=False,
            error=EvaluationError(kind=kind, message=e.message, pos=e.pos),
        )

    return EvaluationResult(input=text, ok=True, display=value.format(verbose, config))


def render_caret(text: str, pos: int) -> str:
    """
    Строка ввода и каретка под символом pos (обе с отступом табуляцией).

    Examples:
        >>> print(render_caret("1 + +", 4))
        \t1 + +
        \t    ^
    """
    return f"\t{text}\n\t{' ' * pos}^"
