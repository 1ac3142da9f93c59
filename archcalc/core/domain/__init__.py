"""
Domain models и value objects.

Содержит Unit (алгебра размерностей), Value (величина) и форматирование.
"""

from archcalc.core.domain.formatting import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    format_imperial_length,
    format_quantity,
)
from archcalc.core.domain.units import (
    DIMENSIONLESS,
    LENGTH_FEET,
    LENGTH_INCHES,
    BaseDimension,
    DisplayHint,
    Unit,
    UnitTerm,
    merge_display_hint,
    merge_terms,
)
from archcalc.core.domain.value import Value

__all__ = [
    # Units module
    "LENGTH_INCHES",
    "LENGTH_FEET",
    "DIMENSIONLESS",
    "BaseDimension",
    "DisplayHint",
    "Unit",
    "UnitTerm",
    "merge_terms",
    "merge_display_hint",
    # Formatting
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "format_quantity",
    "format_imperial_length",
    # Value
    "Value",
]
