"""
Formatting: вывод значений с учётом подсказки отображения

Два пути:
- Imperial length (длина¹ + imperial): смешанная запись футы/дюймы
  с дробями дюйма, например 7' 4 1/2"
- Generic: точная дробь в масштабе единицы и строка единицы,
  например "3/2 ft^2"

В verbose-режиме добавляются справочные представления:
полное число дюймов (" = "), округление до 1/32" (" ≈ ")
и десятичное приближение для generic-пути.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Final, List, Optional

from archcalc.core.domain.units import LENGTH_INCHES, Unit
from archcalc.core.math.rational import (
    decimal_string,
    floor_divmod,
    is_multiple_of,
    rat_string,
    round_to_denominator,
    split_whole,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

INCHES_PER_FOOT: Final[Fraction] = Fraction(12)

# Сетка округления дюймов по умолчанию (1/32")
ROUNDING_DENOMINATOR_DEFAULT: Final[int] = 32

# Знаков после точки в десятичном приближении по умолчанию
DECIMAL_PLACES_DEFAULT: Final[int] = 5


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация verbose-вывода.

    - rounding_denominator: сетка округления дюймов (32 → 1/32")
    - decimal_places: знаков в десятичном приближении
    """

    rounding_denominator: int = ROUNDING_DENOMINATOR_DEFAULT
    decimal_places: int = DECIMAL_PLACES_DEFAULT

    def __post_init__(self) -> None:
        if self.rounding_denominator <= 0:
            raise ValueError(
                f"rounding_denominator must be positive, got {self.rounding_denominator}"
            )
        if self.decimal_places <= 0:
            raise ValueError(f"decimal_places must be positive, got {self.decimal_places}")


DEFAULT_FORMAT_CONFIG: Final[FormatConfig] = FormatConfig()


# =============================================================================
# ОБЩИЙ ВХОД
# =============================================================================


def format_quantity(
    magnitude: Fraction,
    unit: Unit,
    verbose: bool = False,
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Строковое представление величины.

    Args:
        magnitude: Значение в базовых единицах
        unit: Размерность и подсказка отображения
        verbose: Добавлять справочные приближения
        config: Параметры verbose-вывода (default: DEFAULT_FORMAT_CONFIG)

    Returns:
        Строка для вывода пользователю
    """
    config = config or DEFAULT_FORMAT_CONFIG
    if unit.is_imperial_length:
        return format_imperial_length(magnitude, verbose, config)
    return format_generic(magnitude, unit, verbose, config)


# =============================================================================
# GENERIC
# =============================================================================


def format_generic(magnitude: Fraction, unit: Unit, verbose: bool, config: FormatConfig) -> str:
    unit_str, scale = unit.format()
    value = magnitude / scale

    out = [rat_string(value)]
    if unit_str:
        out.append(" " + unit_str)
    if verbose and value.denominator != 1:
        out.append(" ≈ ")
        out.append(decimal_string(value, config.decimal_places))
        if unit_str:
            out.append(" " + unit_str)
    return "".join(out)


# =============================================================================
# IMPERIAL LENGTH
# =============================================================================


def _whole_and_frac(value: Fraction) -> str:
    """
    Целая часть и остаток: "1 1/2", "3", "1/2", "0".

    value >= 0.
    """
    whole, frac = split_whole(value)
    if whole == 0:
        return rat_string(frac)
    if frac == 0:
        return str(whole)
    return f"{whole} {rat_string(frac)}"


def _feet_and_inches(inches: Fraction) -> str:
    """Смешанная запись 7' 4 1/2" для inches >= 0."""
    feet, rem = floor_divmod(inches, INCHES_PER_FOOT)
    if feet == 0:
        return _whole_and_frac(rem) + '"'
    if rem == 0:
        return f"{feet}'"
    return f"{feet}' {_whole_and_frac(rem)}\""


def format_imperial_length(magnitude: Fraction, verbose: bool, config: FormatConfig) -> str:
    """
    Футы и дюймы с дробной частью дюйма.

    Args:
        magnitude: Длина в метрах
        verbose: Добавить полное число дюймов и округление до сетки
        config: Сетка округления

    Returns:
        Например: 7' 4", -1 1/2", 1' = 12", 3/128" ≈ 1/32"
    """
    if magnitude == 0:
        return '0"'

    inches = magnitude / LENGTH_INCHES
    neg = inches < 0
    if neg:
        inches = -inches
    sign = "-" if neg else ""

    out: List[str] = [sign + _feet_and_inches(inches)]
    if not verbose:
        return out[0]

    # Полное число дюймов
    if inches >= INCHES_PER_FOOT:
        out.append(f' = {sign}{_whole_and_frac(inches)}"')

    # Округление до сетки
    grid = config.rounding_denominator
    if not is_multiple_of(inches, grid):
        rounded = round_to_denominator(inches, grid)
        rounded_sign = sign if rounded != 0 else ""
        out.append(f' ≈ {rounded_sign}{_whole_and_frac(rounded)}"')

    return "".join(out)
