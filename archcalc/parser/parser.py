"""
Parser: рекурсивный спуск над потоком токенов

Грамматика (от низшего приоритета к высшему):

    expr    := addExpr END
    addExpr := mulExpr (('+'|'-') mulExpr)*
    mulExpr := numExpr (('*'|'/') numExpr)*
    numExpr := '(' addExpr ')' | number | '-' numExpr
    number  := N | N "'" [N '"'] | N '"'

Ошибки накапливаются в двух независимых слотах:
- syntax_error: сохраняется ошибка с наибольшей позицией (самая глубокая
  точка продвижения разбора); ошибка на той же или более ранней позиции
  не заменяет уже записанную
- math_error: сохраняется первая; разбор после неё продолжается с
  безразмерным нулём, чтобы найти синтаксические ошибки дальше по строке

Неожиданный токен в numExpr не поглощается. После синтаксической ошибки
циклы операторов больше не продвигаются, разбор сворачивается к вызывающему
на том же токене, поэтому ошибка указывает на место первого сбоя.

Цепочка унарных минусов разбирается циклом; вложенность скобок ограничена
MAX_NESTING_DEPTH, глубже записывается синтаксическая ошибка, так что
стек вызовов не переполняется ни на каком входе.
"""

import logging
from typing import Final, List, Optional

from archcalc.core.domain.units import LENGTH_FEET, LENGTH_INCHES, Unit
from archcalc.core.domain.value import Value
from archcalc.core.errors import ExpressionSyntaxError, MathError
from archcalc.parser.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# Каждый уровень скобок занимает четыре кадра стека (numExpr, operand, addExpr, mulExpr)
MAX_NESTING_DEPTH: Final[int] = 100


class Parser:
    """
    Парсер одного выражения.

    Каждый экземпляр обрабатывает один поток токенов: всё рабочее
    состояние локально, поэтому параллельные разборы независимы.
    """

    def __init__(self, tokens: List[Token]):
        """
        Args:
            tokens: Поток токенов, завершённый END (результат tokenize)
        """
        if not tokens or tokens[-1].kind != TokenKind.END:
            raise ValueError("token stream must end with an END token")
        self.tokens = tokens
        self.index = 0
        self.depth = 0
        self.syntax_error: Optional[ExpressionSyntaxError] = None
        self.math_error: Optional[MathError] = None

    # =========================================================================
    # ПУБЛИЧНЫЙ API
    # =========================================================================

    def parse(self) -> Value:
        """
        Разбор всего выражения (expr).

        Возвращает значение даже при ошибках; проверяйте syntax_error
        и math_error.
        """
        x = self._add_expr()
        tok = self._peek()
        if tok.kind != TokenKind.END:
            self._error(tok, "expected end")
        return x

    @property
    def error(self) -> Optional[Exception]:
        """Ошибка для пользователя: синтаксическая в приоритете."""
        return self.syntax_error or self.math_error

    # =========================================================================
    # НАКОПЛЕНИЕ ОШИБОК
    # =========================================================================

    def _error(self, tok: Token, message: str) -> None:
        if self.syntax_error is not None and self.syntax_error.pos >= tok.pos:
            return
        logger.debug("syntax error at %d: %s", tok.pos, message)
        self.syntax_error = ExpressionSyntaxError(message, tok.pos)

    def _math_error(self, tok: Token, err: MathError) -> None:
        if self.math_error is not None:
            return
        logger.debug("math error at %d: %s", tok.pos, err.message)
        self.math_error = err.at(tok.pos)

    # =========================================================================
    # ТОКЕНЫ
    # =========================================================================

    def _peek(self, offset: int = 0) -> Token:
        i = min(self.index + offset, len(self.tokens) - 1)
        return self.tokens[i]

    def _next(self) -> Token:
        tok = self._peek()
        if tok.kind != TokenKind.END:
            self.index += 1
        return tok

    # =========================================================================
    # ГРАММАТИКА
    # =========================================================================

    def _at_operator(self, *kinds: TokenKind) -> bool:
        return self.syntax_error is None and self._peek().kind in kinds

    def _add_expr(self) -> Value:
        x = self._mul_expr()
        while self._at_operator(TokenKind.PLUS, TokenKind.MINUS):
            op = self._next()
            y = self._mul_expr()
            if op.kind == TokenKind.MINUS:
                y = y.neg()
            try:
                x = x.add(y)
            except MathError as e:
                self._math_error(op, e)
                x = Value()
        return x

    def _mul_expr(self) -> Value:
        x = self._num_expr()
        while self._at_operator(TokenKind.STAR, TokenKind.SLASH):
            op = self._next()
            y = self._num_expr()
            try:
                x = x.mul(y) if op.kind == TokenKind.STAR else x.div(y)
            except MathError as e:
                self._math_error(op, e)
                x = Value()
        return x

    def _num_expr(self) -> Value:
        negate = False
        while self._peek().kind == TokenKind.MINUS:
            self._next()
            negate = not negate

        x = self._operand()
        return x.neg() if negate else x

    def _operand(self) -> Value:
        tok = self._peek()

        if tok.kind == TokenKind.END:
            self._error(tok, "unexpected end")
            return Value()

        if tok.kind == TokenKind.LPAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                self._error(tok, "expression too deeply nested")
                return Value()
            self._next()
            self.depth += 1
            x = self._add_expr()
            self.depth -= 1
            close = self._peek()
            if self.syntax_error is None and close.kind == TokenKind.RPAREN:
                self._next()
                return x
            self._error(close, "expected `)`")
            return Value()

        if tok.kind == TokenKind.NUMBER:
            return self._number()

        self._error(tok, "unexpected " + tok.describe())
        return Value()

    def _number(self) -> Value:
        n = self._next()
        mark = self._peek()

        if mark.kind == TokenKind.FEET:
            self._next()
            magnitude = n.value * LENGTH_FEET
            if self._peek().kind == TokenKind.NUMBER and self._peek(1).kind == TokenKind.INCHES:
                inches = self._next()
                self._next()
                magnitude += inches.value * LENGTH_INCHES
            return Value(magnitude, Unit.length(imperial=True))

        if mark.kind == TokenKind.INCHES:
            self._next()
            return Value(n.value * LENGTH_INCHES, Unit.length(imperial=True))

        return Value(n.value)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse(text: str) -> Value:
    """
    Разбор и вычисление выражения.

    Args:
        text: Входное выражение, например "8' 1 1/2\\" / 2"

    Returns:
        Вычисленное значение

    Raises:
        ExpressionSyntaxError: Структурная ошибка (в приоритете)
        MathError: Семантическая ошибка при отсутствии синтаксических
    """
    parser = Parser(tokenize(text))
    value = parser.parse()
    if parser.syntax_error is not None:
        raise parser.syntax_error
    if parser.math_error is not None:
        raise parser.math_error
    return value
