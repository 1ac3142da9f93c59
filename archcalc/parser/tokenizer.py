"""
Tokenizer: входная строка → поток токенов с позициями

Распознаёт:
- Числа: "<digits>/<digits>" (дробь) или "<digits>[.<digits>]" (десятичное,
  переводится в точную дробь)
- Односимвольные токены: ( ) + - * / ' "
- Смешанные числа: дробь сразу после целого/десятичного числа прибавляется
  к нему ("1 1/2" → 3/2). Слияние не цепочечное и сбрасывается любым
  нечисловым токеном

Поток всегда завершается токеном END с позицией len(text).
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction
from typing import Final, List, Optional, Pattern

from archcalc.core.errors import ExpressionSyntaxError
from archcalc.core.math.rational import parse_rational


class TokenKind(str, Enum):
    """Вид токена (значение совпадает с символом пунктуации)"""

    END = ""
    NUMBER = "n"
    LPAREN = "("
    RPAREN = ")"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    FEET = "'"
    INCHES = '"'


@dataclass(frozen=True)
class Token:
    """Токен: позиция во входной строке, вид, значение (только для NUMBER)"""

    pos: int
    kind: TokenKind
    value: Optional[Fraction] = None

    def describe(self) -> str:
        """Имя токена для сообщений об ошибках: end, number, `+`."""
        if self.kind == TokenKind.END:
            return "end"
        if self.kind == TokenKind.NUMBER:
            return "number"
        return f"`{self.kind.value}`"


NUMBER_RE: Final[Pattern[str]] = re.compile(r"[0-9]+/[0-9]+|[0-9]+(?:\.[0-9]+)?")

WHITESPACE: Final[str] = " \t\n\v\f\r"

PUNCTUATION: Final[dict] = {
    kind.value: kind for kind in TokenKind if kind not in (TokenKind.END, TokenKind.NUMBER)
}


def tokenize(text: str) -> List[Token]:
    """
    Разбор строки на токены.

    Args:
        text: Входное выражение

    Returns:
        Список токенов, последний всегда END

    Raises:
        ExpressionSyntaxError: "unexpected token" для неизвестного символа,
            "malformed number" для числа, которое не удалось перевести в дробь
    """
    tokens: List[Token] = []
    merge_frac = False
    pos = 0

    while True:
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        if pos >= len(text):
            break

        match = NUMBER_RE.match(text, pos)
        if match:
            literal = match.group()
            try:
                value = parse_rational(literal)
            except ValueError:
                raise ExpressionSyntaxError("malformed number", pos)

            is_frac = "/" in literal
            if is_frac and merge_frac:
                # Дробная часть смешанного числа
                merge_frac = False
                prev = tokens[-1]
                tokens[-1] = replace(prev, value=prev.value + value)
            else:
                merge_frac = not is_frac
                tokens.append(Token(pos, TokenKind.NUMBER, value))
            pos = match.end()
            continue

        merge_frac = False
        kind = PUNCTUATION.get(text[pos])
        if kind is None:
            raise ExpressionSyntaxError("unexpected token", pos)
        tokens.append(Token(pos, kind))
        pos += 1

    tokens.append(Token(len(text), TokenKind.END))
    return tokens
