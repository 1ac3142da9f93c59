"""
Core math modules для archcalc

Точные рациональные примитивы.
"""

from archcalc.core.math.rational import (
    HALF,
    ONE,
    decimal_string,
    floor_divmod,
    is_multiple_of,
    parse_rational,
    rat_string,
    round_to_denominator,
    split_whole,
)

__all__ = [
    # Constants
    "ONE",
    "HALF",
    # Parsing
    "parse_rational",
    # Integer operations
    "floor_divmod",
    "split_whole",
    "round_to_denominator",
    "is_multiple_of",
    # Rendering
    "rat_string",
    "decimal_string",
]
