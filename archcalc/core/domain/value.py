"""
Value: рациональная величина с размерностью

Immutable значение: точная дробь в базовых единицах + Unit.
Арифметика следует алгебре размерностей:
- add: только при поэлементно равных terms, иначе MathError
- mul: всегда успешно, показатели складываются
- div: показатели вычитаются; деление на точный ноль → MathError

Бинарный минус реализуется парсером как neg + add.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Optional, Union

from archcalc.core.domain.formatting import FormatConfig, format_quantity
from archcalc.core.domain.units import DIMENSIONLESS, LENGTH_FEET, LENGTH_INCHES, Unit
from archcalc.core.errors import MathError

Number = Union[int, Fraction]


@dataclass(frozen=True)
class Value:
    """
    Величина: magnitude (в базовых единицах) и unit.

    Все операции возвращают новый Value.
    """

    magnitude: Fraction = field(default_factory=Fraction)
    unit: Unit = DIMENSIONLESS

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def dimensionless(cls, n: Number) -> "Value":
        return cls(Fraction(n), DIMENSIONLESS)

    @classmethod
    def feet(cls, n: Number) -> "Value":
        return cls(Fraction(n) * LENGTH_FEET, Unit.length(imperial=True))

    @classmethod
    def inches(cls, n: Number) -> "Value":
        return cls(Fraction(n) * LENGTH_INCHES, Unit.length(imperial=True))

    @classmethod
    def meters(cls, n: Number) -> "Value":
        return cls(Fraction(n), Unit.length(imperial=False))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Value") -> "Value":
        """
        Сумма.

        Raises:
            MathError: Если размерности различаются
        """
        unit = self.unit.add_compatible(other.unit)
        if unit is None:
            raise MathError(f"cannot add dimensions with different units: {self} and {other}")
        return Value(self.magnitude + other.magnitude, unit)

    def mul(self, other: "Value") -> "Value":
        return Value(self.magnitude * other.magnitude, self.unit.multiply(other.unit))

    def div(self, other: "Value") -> "Value":
        """
        Частное.

        Raises:
            MathError: Если other.magnitude точно равен нулю
        """
        if other.magnitude == 0:
            raise MathError("division by zero")
        return Value(self.magnitude / other.magnitude, self.unit.divide(other.unit))

    def neg(self) -> "Value":
        return Value(-self.magnitude, self.unit)

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def format(self, verbose: bool = False, config: Optional[FormatConfig] = None) -> str:
        return format_quantity(self.magnitude, self.unit, verbose, config)

    def __str__(self) -> str:
        return self.format()
