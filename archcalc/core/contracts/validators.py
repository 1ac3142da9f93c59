"""
JSON Schema контракт вывода archcalc

Каждый результат, печатаемый в режиме --json, проверяется против
schema/evaluation_result.json до вывода. Схема дублирует инварианты
EvaluationResult (ok ⇔ display, ¬ok ⇔ error) на уровне данных, чтобы
внешние потребители могли проверять вывод без Python.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final = Path(__file__).parent / "schema"
EVALUATION_RESULT_SCHEMA: Final = "evaluation_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Кэширующий загрузчик схем из каталога.

    Схема читается один раз и проходит meta-validation (Draft 2020-12);
    скомпилированный валидатор кэшируется вместе с ней.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя файла схемы без .json

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"no schema named {schema_name!r} in {self.schema_dir}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"{path.name} is not a valid JSON Schema: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных против одной именованной схемы."""

    schema_name: str = ""

    def __init__(self, schema_name: Optional[str] = None, loader: Optional[SchemaLoader] = None):
        if schema_name is not None:
            self.schema_name = schema_name
        if not self.schema_name:
            raise ValueError("schema_name is required")
        self._validator = (loader or _SCHEMA_LOADER).validator_for(self.schema_name)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        # Стабильный порядок: по пути внутри документа
        return iter(sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.path))))


class EvaluationResultValidator(ContractValidator):
    schema_name = EVALUATION_RESULT_SCHEMA


def validate_evaluation_result(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованного EvaluationResult (model_dump(mode="json")).

    Raises:
        ValidationError: Данные не соответствуют evaluation_result.json
    """
    EvaluationResultValidator().validate(data)
