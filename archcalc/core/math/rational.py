"""
Rational: точная рациональная арифметика

Все вычисления калькулятора выполняются над fractions.Fraction
(произвольная точность, всегда сокращённая дробь). Модуль содержит
примитивы, которых нет у Fraction напрямую:
- Точный разбор десятичных и дробных литералов
- floor div/mod над дробями
- Разложение на целую и дробную части
- Десятичное представление с фиксированной точностью

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких float: десятичный литерал "0.1" даёт ровно 1/10
2. Все функции чистые, входные значения не изменяются
"""

import math
from fractions import Fraction
from typing import Final, Tuple

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ONE: Final[Fraction] = Fraction(1)
HALF: Final[Fraction] = Fraction(1, 2)


# =============================================================================
# РАЗБОР ЛИТЕРАЛОВ
# =============================================================================


def parse_rational(text: str) -> Fraction:
    """
    Точный разбор числового литерала.

    Поддерживаются формы "<digits>/<digits>" и "<digits>[.<digits>]".

    Args:
        text: Текст литерала

    Returns:
        Точное рациональное значение

    Raises:
        ValueError: Если текст не является корректным числом
            (включая дробь с нулевым знаменателем)

    Examples:
        >>> parse_rational("1.25")
        Fraction(5, 4)
        >>> parse_rational("3/6")
        Fraction(1, 2)
    """
    try:
        return Fraction(text)
    except ZeroDivisionError:
        raise ValueError(f"zero denominator in {text!r}")


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ОПЕРАЦИИ
# =============================================================================


def floor_divmod(a: Fraction, b: Fraction) -> Tuple[int, Fraction]:
    """
    floor-деление дробей.

    Args:
        a: Делимое
        b: Делитель (ненулевой)

    Returns:
        (q, r), где q = floor(a / b), r = a - q * b
    """
    q = math.floor(a / b)
    return q, a - q * b


def split_whole(value: Fraction) -> Tuple[int, Fraction]:
    """
    Разложение неотрицательного значения на целую и дробную части.

    Examples:
        >>> split_whole(Fraction(7, 2))
        (3, Fraction(1, 2))
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return floor_divmod(value, ONE)


def round_to_denominator(value: Fraction, denominator: int) -> Fraction:
    """
    Округление до ближайшего кратного 1/denominator (half-up).

    floor(value * denominator + 1/2) / denominator

    Args:
        value: Исходное значение
        denominator: Знаменатель сетки округления (> 0)

    Returns:
        Округлённое значение
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    scaled = value * denominator + HALF
    return Fraction(math.floor(scaled), denominator)


def is_multiple_of(value: Fraction, denominator: int) -> bool:
    """Проверка, что value кратно 1/denominator."""
    return (value * denominator).denominator == 1


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


def rat_string(value: Fraction) -> str:
    """
    Каноническая запись: "a/b", либо "a" для целых.

    Examples:
        >>> rat_string(Fraction(3, 2))
        '3/2'
        >>> rat_string(Fraction(14))
        '14'
    """
    return str(value)


def decimal_string(value: Fraction, places: int) -> str:
    """
    Десятичная запись с фиксированным числом знаков после точки.

    Последний знак округляется половиной от нуля, как при ручном счёте.

    Args:
        value: Исходное значение
        places: Количество знаков после точки (>= 0)

    Returns:
        Строка вида "-1.50000"

    Examples:
        >>> decimal_string(Fraction(3, 2), 5)
        '1.50000'
        >>> decimal_string(Fraction(-2, 3), 2)
        '-0.67'
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    scale = 10**places
    q, r = divmod(abs(value.numerator) * scale, value.denominator)
    if 2 * r >= value.denominator:
        q += 1

    sign = "-" if value < 0 and q != 0 else ""
    if places == 0:
        return f"{sign}{q}"
    whole, frac = divmod(q, scale)
    return f"{sign}{whole}.{frac:0{places}d}"
