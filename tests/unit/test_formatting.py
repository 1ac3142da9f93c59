"""
Тесты форматирования величин

Проверяет:
1. Imperial length: футы/дюймы, дроби дюйма, знак
2. Verbose: полное число дюймов, округление до 1/32"
3. Generic: масштаб единицы, показатели, десятичное приближение
4. FormatConfig: сетка округления и точность
"""

from fractions import Fraction

import pytest

from archcalc.core.domain.formatting import (
    FormatConfig,
    format_imperial_length,
    format_quantity,
)
from archcalc.core.domain.units import DIMENSIONLESS, LENGTH_FEET, LENGTH_INCHES, Unit
from archcalc.core.domain.value import Value

IMPERIAL = Unit.length(imperial=True)


def inches(text: str) -> Fraction:
    """Длина в метрах для заданного числа дюймов."""
    return Fraction(text) * LENGTH_INCHES


class TestImperialLength:
    """Смешанная запись футы/дюймы (non-verbose)"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("88", "7' 4\""),
            ("97/2", "4' 1/2\""),
            ("1", "1\""),
            ("1/2", "1/2\""),
            ("3/2", "1 1/2\""),
            ("12", "1'"),
            ("13", "1' 1\""),
            ("147/2", "6' 1 1/2\""),
        ],
    )
    def test_positive(self, value: str, expected: str) -> None:
        assert format_quantity(inches(value), IMPERIAL) == expected

    def test_zero(self) -> None:
        assert format_quantity(Fraction(0), IMPERIAL) == '0"'
        assert format_quantity(Fraction(0), IMPERIAL, verbose=True) == '0"'

    def test_negative_prefix(self) -> None:
        """Знак ставится перед всей записью"""
        assert format_quantity(-inches("88"), IMPERIAL) == "-7' 4\""
        assert format_quantity(-inches("1/2"), IMPERIAL) == '-1/2"'


class TestImperialVerbose:
    """Verbose: " = " полное число дюймов, " ≈ " округление до 1/32" """

    @pytest.mark.parametrize(
        "value, expected, expected_neg",
        [
            ("0", '0"', '0"'),
            ("1", '1"', '-1"'),
            ("1/2", '1/2"', '-1/2"'),
            ("3/2", '1 1/2"', '-1 1/2"'),
            ("12", "1' = 12\"", "-1' = -12\""),
            ("13", "1' 1\" = 13\"", "-1' 1\" = -13\""),
            ("1/128", '1/128" ≈ 0"', '-1/128" ≈ 0"'),
            ("3/128", '3/128" ≈ 1/32"', '-3/128" ≈ -1/32"'),
        ],
    )
    def test_verbose(self, value: str, expected: str, expected_neg: str) -> None:
        assert format_quantity(inches(value), IMPERIAL, verbose=True) == expected
        assert format_quantity(-inches(value), IMPERIAL, verbose=True) == expected_neg

    def test_total_and_rounding_together(self) -> None:
        """Оба справочных представления в одной строке"""
        got = format_quantity(inches("1201/100"), IMPERIAL, verbose=True)
        assert got == "1' 1/100\" = 12 1/100\" ≈ 12\""

    def test_custom_rounding_grid(self) -> None:
        """Сетка 1/16" вместо 1/32\" """
        config = FormatConfig(rounding_denominator=16)
        got = format_imperial_length(inches("3/64"), True, config)
        assert got == '3/64" ≈ 1/16"'

    def test_multiple_of_grid_not_rounded(self) -> None:
        assert format_quantity(inches("5/32"), IMPERIAL, verbose=True) == '5/32"'


class TestGeneric:
    """Generic-путь: дробь в масштабе единицы + строка единицы"""

    def test_dimensionless(self) -> None:
        assert format_quantity(Fraction(14), DIMENSIONLESS) == "14"
        assert format_quantity(Fraction(3, 2), DIMENSIONLESS) == "3/2"
        assert format_quantity(Fraction(-1, 3), DIMENSIONLESS) == "-1/3"

    def test_dimensionless_verbose(self) -> None:
        assert format_quantity(Fraction(3, 2), DIMENSIONLESS, verbose=True) == "3/2 ≈ 1.50000"
        assert format_quantity(Fraction(14), DIMENSIONLESS, verbose=True) == "14"

    def test_square_feet_verbose(self) -> None:
        """Площадь: масштаб ft^2 и десятичное приближение"""
        area_unit = IMPERIAL.multiply(IMPERIAL)
        area = LENGTH_FEET * LENGTH_FEET * Fraction(3, 2)
        assert format_quantity(area, area_unit, verbose=True) == "3/2 ft^2 ≈ 1.50000 ft^2"
        assert format_quantity(area, area_unit) == "3/2 ft^2"

    def test_tiny_negative_verbose(self) -> None:
        """Приближение, округлённое до нуля, печатается без знака"""
        got = format_quantity(Fraction(-1, 300000), DIMENSIONLESS, verbose=True)
        assert got == "-1/300000 ≈ 0.00000"

    def test_metric_length(self) -> None:
        assert format_quantity(Fraction(5, 2), Unit.length(imperial=False)) == "5/2 m"

    def test_inverse_feet(self) -> None:
        value = Value.dimensionless(1).div(Value.feet(1))
        assert value.format() == "1 /ft"

    def test_precision_config(self) -> None:
        config = FormatConfig(decimal_places=2)
        got = format_quantity(Fraction(2, 3), DIMENSIONLESS, verbose=True, config=config)
        assert got == "2/3 ≈ 0.67"


class TestFormatConfig:
    """Валидация конфигурации"""

    def test_defaults(self) -> None:
        config = FormatConfig()
        assert config.rounding_denominator == 32
        assert config.decimal_places == 5

    def test_invalid_grid(self) -> None:
        with pytest.raises(ValueError, match="rounding_denominator must be positive"):
            FormatConfig(rounding_denominator=0)

    def test_invalid_precision(self) -> None:
        with pytest.raises(ValueError, match="decimal_places must be positive"):
            FormatConfig(decimal_places=0)
