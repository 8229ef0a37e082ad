"""
JSON Schema Contract Validators

Модуль для валидации объекта опций locale-форматтера согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- number_format_options.json (опции format / format_range)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в contracts/schema/ внутри пакета.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'number_format_options')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return next(self.iter_errors(data), None) is None

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        yield from self.validator.iter_errors(data)


class NumberFormatOptionsValidator(ContractValidator):
    """
    Валидатор для number_format_options контракта.

    Помимо схемы проверяет minimumFractionDigits <= maximumFractionDigits:
    JSON Schema не умеет сравнивать поля между собой.
    """

    def __init__(self):
        super().__init__("number_format_options")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        yield from super().iter_errors(data)

        lower = data.get("minimumFractionDigits")
        upper = data.get("maximumFractionDigits")
        if isinstance(lower, int) and isinstance(upper, int) and lower > upper:
            yield ValidationError(
                f"minimumFractionDigits {lower} must be <= maximumFractionDigits {upper}",
                validator="fractionDigitsOrder",
                path=["minimumFractionDigits"],
                instance=data,
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_format_options(data: Dict[str, Any]) -> None:
    """
    Валидация объекта опций форматтера.

    Args:
        data: camelCase dict (NumberFormatOptions.to_contract())

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    NumberFormatOptionsValidator().validate(data)
