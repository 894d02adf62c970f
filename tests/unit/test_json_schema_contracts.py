"""
Tests for JSON Schema Contract Validators

Комплексное тестирование валидатора dated_series:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и pattern
- Интеграция с DatedPoint
"""

import datetime as dt
from pathlib import Path

import pytest
from jsonschema import ValidationError

from timewave.core.contracts import (
    DatedSeriesValidator,
    SchemaLoader,
    validate_dated_series,
)
from timewave.core.domain import DatedPoint


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_series():
    """Валидная серия из трёх точек."""
    return [
        {"date": "2020-01-07", "value": 1},
        {"date": "2020-01-08", "value": 2.5},
        {"date": "2020-01-09", "value": 0.0},
    ]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_loads_dated_series(self):
        schema = SchemaLoader().load_schema("dated_series")
        assert schema["type"] == "array"
        assert schema["items"]["required"] == ["date", "value"]

    def test_schema_is_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("dated_series") is loader.load_schema("dated_series")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(schema_dir=tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")


# =============================================================================
# DATED SERIES
# =============================================================================


class TestDatedSeriesValidator:
    """Тесты валидатора dated_series."""

    def test_valid_series(self, valid_series):
        DatedSeriesValidator().validate(valid_series)
        validate_dated_series(valid_series)

    def test_empty_series_is_valid(self):
        validate_dated_series([])

    def test_missing_value(self, valid_series):
        del valid_series[1]["value"]
        with pytest.raises(ValidationError, match="'value' is a required property"):
            validate_dated_series(valid_series)

    def test_missing_date(self, valid_series):
        del valid_series[0]["date"]
        with pytest.raises(ValidationError):
            validate_dated_series(valid_series)

    def test_time_of_day_rejected(self, valid_series):
        valid_series[0]["date"] = "2020-01-07T00:00:00Z"
        with pytest.raises(ValidationError):
            validate_dated_series(valid_series)

    def test_string_value_rejected(self, valid_series):
        valid_series[2]["value"] = "0.0"
        with pytest.raises(ValidationError):
            validate_dated_series(valid_series)

    def test_extra_field_rejected(self, valid_series):
        valid_series[0]["label"] = "1"
        with pytest.raises(ValidationError):
            validate_dated_series(valid_series)

    def test_null_value_rejected(self, valid_series):
        valid_series[1]["value"] = None
        with pytest.raises(ValidationError):
            DatedSeriesValidator().validate(valid_series)

    def test_dated_points_serialize_to_valid_contract(self):
        points = [
            DatedPoint(date=dt.date(2012, 12, 19), value=3.0),
            DatedPoint(date=dt.date(2012, 12, 20), value=0.5),
        ]
        validate_dated_series([p.to_contract() for p in points])
