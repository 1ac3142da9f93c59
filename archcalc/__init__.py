"""
archcalc: architectural calculator

Exact rational arithmetic over dimensionless numbers and lengths written
as feet and inches (e.g. 8' 1 1/2" / 2).
"""

from archcalc.core.domain import Unit, Value
from archcalc.core.errors import CalculatorError, ExpressionSyntaxError, MathError
from archcalc.parser import parse

__version__ = "0.1.0"

__all__ = [
    "parse",
    "Value",
    "Unit",
    "CalculatorError",
    "ExpressionSyntaxError",
    "MathError",
]
