"""
EvaluationResult: машиночитаемый результат вычисления одной строки

Immutable Pydantic модель. Полная совместимость с JSON Schema
(schema/evaluation_result.json), используется для вывода --json.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Канал ошибки"""

    SYNTAX = "syntax"
    MATH = "math"


# =============================================================================
# MODELS
# =============================================================================


class EvaluationError(BaseModel):
    """Ошибка вычисления с позицией для каретки"""

    kind: ErrorKind = Field(..., description="Канал ошибки (syntax/math)")
    message: str = Field(..., min_length=1, description="Текст ошибки")
    pos: Optional[int] = Field(
        default=None, ge=0, description="Позиция во входной строке (символы)"
    )

    model_config = {"frozen": True}


class EvaluationResult(BaseModel):
    """
    Результат вычисления строки.

    Инвариант: ok=True ⇔ есть display и нет error.
    """

    input: str = Field(..., description="Исходная строка")
    ok: bool = Field(..., description="Вычисление успешно")
    display: Optional[str] = Field(default=None, description="Отформатированное значение")
    error: Optional[EvaluationError] = Field(default=None, description="Ошибка (если ok=False)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "EvaluationResult":
        """Успешный результат содержит display, неуспешный содержит error."""
        if self.ok:
            if self.display is None:
                raise ValueError("successful result requires display")
            if self.error is not None:
                raise ValueError("successful result must not carry an error")
        elif self.error is None:
            raise ValueError("failed result requires error")
        return self
