"""
Units: алгебра физических размерностей

Значения нормализуются в базовую единицу размерности (длина: метры).
Unit хранит разреженный вектор показателей степени по базовым
размерностям и подсказку отображения (metric/imperial), которая влияет
только на вывод, но не на совместимость.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. terms отсортированы по base, без нулевых показателей (каноническая форма)
2. Два Unit совместимы для сложения тогда и только тогда, когда их terms
   поэлементно равны; display при этом не учитывается
3. Нулевой Unit (без terms) безразмерный и является значением по умолчанию
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from fractions import Fraction
from typing import Final, List, NamedTuple, Optional, Tuple

# =============================================================================
# КОЭФФИЦИЕНТЫ ПЕРЕВОДА В БАЗОВУЮ ЕДИНИЦУ
# =============================================================================

# Метров в одном дюйме (точно, по определению международного дюйма)
LENGTH_INCHES: Final[Fraction] = Fraction(254, 10000)

# Метров в одном футе
LENGTH_FEET: Final[Fraction] = Fraction(3048, 10000)


# =============================================================================
# ENUMS
# =============================================================================


class BaseDimension(IntEnum):
    """Базовая размерность. Порядок значений задаёт порядок terms."""

    LENGTH = 0  # метры


class DisplayHint(str, Enum):
    """Предпочтение отображения (на совместимость не влияет)"""

    DEFAULT = "default"
    METRIC = "metric"
    IMPERIAL = "imperial"


# =============================================================================
# UNIT
# =============================================================================


class UnitTerm(NamedTuple):
    """Базовая размерность и её ненулевой показатель степени"""

    base: BaseDimension
    power: int


Terms = Tuple[UnitTerm, ...]


def merge_terms(x: Terms, y: Terms, y_mul: int) -> Terms:
    """
    Слияние двух отсортированных наборов terms.

    Показатели y умножаются на y_mul (1 для умножения, -1 для деления),
    общие базы суммируются, нулевые результаты отбрасываются.
    Линейный проход, как при слиянии двух разреженных многочленов.

    Args:
        x: Левый набор terms (отсортирован)
        y: Правый набор terms (отсортирован)
        y_mul: Множитель показателей y

    Returns:
        Отсортированный набор без нулевых показателей
    """
    z: List[UnitTerm] = []
    xi = yi = 0
    while xi < len(x) or yi < len(y):
        if xi >= len(x) or (yi < len(y) and y[yi].base < x[xi].base):
            z.append(UnitTerm(y[yi].base, y[yi].power * y_mul))
            yi += 1
        elif yi >= len(y) or x[xi].base < y[yi].base:
            z.append(x[xi])
            xi += 1
        else:
            power = x[xi].power + y[yi].power * y_mul
            if power != 0:
                z.append(UnitTerm(x[xi].base, power))
            xi += 1
            yi += 1
    return tuple(z)


def merge_display_hint(a: DisplayHint, b: DisplayHint) -> DisplayHint:
    """Побеждает первая явная подсказка, левый операнд в приоритете."""
    if a == DisplayHint.DEFAULT:
        return b
    return a


@dataclass(frozen=True)
class Unit:
    """
    Размерность значения.

    Immutable: все операции возвращают новый Unit.
    """

    terms: Terms = ()
    display: DisplayHint = DisplayHint.DEFAULT

    def __post_init__(self) -> None:
        for prev, cur in zip(self.terms, self.terms[1:]):
            if prev.base >= cur.base:
                raise ValueError(f"Unit terms must be sorted by base without duplicates: {self.terms}")
        for term in self.terms:
            if term.power == 0:
                raise ValueError(f"Unit terms must not contain zero powers: {self.terms}")

    @classmethod
    def length(cls, imperial: bool = True) -> "Unit":
        """Длина в первой степени с подсказкой metric или imperial."""
        display = DisplayHint.IMPERIAL if imperial else DisplayHint.METRIC
        return cls(terms=(UnitTerm(BaseDimension.LENGTH, 1),), display=display)

    @property
    def is_dimensionless(self) -> bool:
        return not self.terms

    @property
    def is_imperial_length(self) -> bool:
        """Ровно длина¹ с подсказкой imperial (вывод в футах и дюймах)."""
        return (
            self.terms == (UnitTerm(BaseDimension.LENGTH, 1),)
            and self.display == DisplayHint.IMPERIAL
        )

    def multiply(self, other: "Unit") -> "Unit":
        return Unit(
            merge_terms(self.terms, other.terms, 1),
            merge_display_hint(self.display, other.display),
        )

    def divide(self, other: "Unit") -> "Unit":
        return Unit(
            merge_terms(self.terms, other.terms, -1),
            merge_display_hint(self.display, other.display),
        )

    def add_compatible(self, other: "Unit") -> Optional["Unit"]:
        """
        Совместимость для сложения/вычитания.

        Returns:
            Объединённый Unit, если terms поэлементно равны, иначе None
        """
        if self.terms != other.terms:
            return None
        return Unit(self.terms, merge_display_hint(self.display, other.display))

    def format(self) -> Tuple[str, Fraction]:
        """
        Строка единицы и масштаб отображения.

        Returns:
            (строка, scale): значение в базовых единицах делится на scale
            перед выводом рядом со строкой
        """
        return format_unit(self)

    def __str__(self) -> str:
        if self.is_dimensionless:
            return "<none>"
        return format_unit(self)[0]


DIMENSIONLESS: Final[Unit] = Unit()


# =============================================================================
# СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def format_term(base: BaseDimension, exp: int, display: DisplayHint) -> Tuple[str, Fraction]:
    """
    Символ одного term и его вклад в масштаб.

    Args:
        base: Базовая размерность
        exp: Показатель степени (> 0)
        display: Подсказка отображения

    Returns:
        (символ, масштаб): "ft^2" и LENGTH_FEET**2 для imperial,
        "m" и 1 для metric/default
    """
    assert base == BaseDimension.LENGTH, f"unit term base must be a known BaseDimension, got {base!r}"

    if display == DisplayHint.IMPERIAL:
        symbol, scale = "ft", LENGTH_FEET**exp
    else:
        symbol, scale = "m", Fraction(1)

    if exp == 1:
        return symbol, scale
    return f"{symbol}^{exp}", scale


def format_unit(unit: Unit) -> Tuple[str, Fraction]:
    """
    Строка единицы: термы числителя через "·", затем "/" и термы знаменателя.

    Returns:
        (строка, scale). Для безразмерного Unit: ("", 1)
    """
    parts: List[str] = []
    scale = Fraction(1)

    sep = ""
    for term in unit.terms:
        if term.power > 0:
            symbol, term_scale = format_term(term.base, term.power, unit.display)
            parts.append(sep + symbol)
            sep = "·"
            scale *= term_scale

    sep = "/"
    for term in unit.terms:
        if term.power < 0:
            symbol, term_scale = format_term(term.base, -term.power, unit.display)
            parts.append(sep + symbol)
            sep = "·"
            scale /= term_scale

    return "".join(parts), scale
