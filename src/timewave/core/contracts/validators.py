"""
JSON Schema Contract Validators

Модуль для валидации выходных данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- dated_series.json (список {"date": "YYYY-MM-DD", "value": number})
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
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
            schema_name: Имя схемы без расширения (например, 'dated_series')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
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


class DatedSeriesValidator:
    """
    Валидатор для dated_series контракта.

    Схема загружается один раз через глобальный SchemaLoader.
    """

    schema_name = "dated_series"

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: List[Dict[str, Any]]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dated_series(data: List[Dict[str, Any]]) -> None:
    """
    Валидация выходной серии {"date", "value"}.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DatedSeriesValidator().validate(data)
