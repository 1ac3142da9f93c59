"""
Contract Validation Module

Pydantic модели результатов и их валидация по JSON Schema.
"""

from .result import ErrorKind, EvaluationError, EvaluationResult
from .validators import (
    ContractValidator,
    EvaluationResultValidator,
    SchemaLoader,
    validate_evaluation_result,
)

__all__ = [
    # Models
    "ErrorKind",
    "EvaluationError",
    "EvaluationResult",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EvaluationResultValidator",
    # Functions
    "validate_evaluation_result",
]
