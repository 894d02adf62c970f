"""
Тесты для TimewavePipeline

Проверяет:
1. Конфигурацию по умолчанию и её валидацию
2. Сквозной прогон всех стадий
3. Переопределение zero_date
4. Сериализацию в контракт
5. Логирование стадий
"""

import dataclasses
import datetime as dt
import logging

import pytest

from timewave import (
    DEFAULT_ZERO_DATE,
    InvalidArgument,
    TimewaveConfig,
    TimewavePipeline,
    TimewaveResult,
)
from timewave.core.domain import KING_WEN_SEQUENCE
from timewave.core.math import compute_base_wave, generate_recursive_wave


# =============================================================================
# CONFIG
# =============================================================================


class TestTimewaveConfig:
    """Тесты TimewaveConfig."""

    def test_defaults(self):
        config = TimewaveConfig()
        assert config.iterations == 10
        assert config.compression_constant == 1.315
        assert config.days_per_step == 1
        assert config.zero_date == DEFAULT_ZERO_DATE == dt.date(2012, 12, 21)

    def test_frozen(self):
        config = TimewaveConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.iterations = 3

    def test_zero_date_string_normalized(self):
        assert TimewaveConfig(zero_date="2000-02-29").zero_date == dt.date(2000, 2, 29)

    def test_invalid_iterations(self):
        with pytest.raises(InvalidArgument, match="iterations"):
            TimewaveConfig(iterations=-2)

    def test_invalid_days_per_step(self):
        with pytest.raises(InvalidArgument, match="days_per_step"):
            TimewaveConfig(days_per_step=0)

    def test_invalid_compression_constant(self):
        with pytest.raises(InvalidArgument, match="compression_constant"):
            TimewaveConfig(compression_constant=0)

    def test_compression_constant_overflow_rejected_at_construction(self):
        with pytest.raises(InvalidArgument, match="compression_constant"):
            TimewaveConfig(iterations=3, compression_constant=1e-160)

    def test_invalid_zero_date(self):
        with pytest.raises(InvalidArgument, match="zero_date"):
            TimewaveConfig(zero_date="2012-12-32")


# =============================================================================
# PIPELINE
# =============================================================================


class TestTimewavePipeline:
    """Сквозные тесты pipeline."""

    def test_default_run(self):
        result = TimewavePipeline().evaluate()

        assert isinstance(result, TimewaveResult)
        assert result.symbols == KING_WEN_SEQUENCE
        assert result.difference_wave == compute_base_wave()
        assert result.recursive_wave == generate_recursive_wave(10)
        assert len(result.dated_points) == 630
        assert result.zero_date == dt.date(2012, 12, 21)
        assert result.dated_points[-1].date == dt.date(2012, 12, 20)
        assert result.dated_points[0].date == dt.date(2012, 12, 21) - dt.timedelta(days=630)

    def test_zero_date_override(self):
        pipeline = TimewavePipeline(TimewaveConfig(iterations=2))
        result = pipeline.evaluate(zero_date="2020-01-10")
        assert result.zero_date == dt.date(2020, 1, 10)
        assert result.dated_points[-1].date == dt.date(2020, 1, 9)
        assert len(result.dated_points) == 126

    def test_days_per_step(self):
        config = TimewaveConfig(iterations=1, days_per_step=7, zero_date=dt.date(2020, 1, 1))
        result = TimewavePipeline(config).evaluate()
        assert result.days_per_step == 7
        assert result.dated_points[-1].date == dt.date(2019, 12, 25)
        assert (result.dated_points[1].date - result.dated_points[0].date).days == 7

    def test_zero_iterations_matches_one(self):
        zero = TimewavePipeline(TimewaveConfig(iterations=0)).evaluate()
        one = TimewavePipeline(TimewaveConfig(iterations=1)).evaluate()
        assert zero.recursive_wave == one.recursive_wave
        assert zero.dated_points == one.dated_points

    def test_invalid_override(self):
        with pytest.raises(InvalidArgument):
            TimewavePipeline().evaluate(zero_date="yesterday")

    def test_idempotent(self):
        pipeline = TimewavePipeline()
        assert pipeline.evaluate() == pipeline.evaluate()

    def test_to_contract(self):
        result = TimewavePipeline(TimewaveConfig(iterations=1)).evaluate(zero_date="2020-01-10")
        series = result.to_contract()
        assert len(series) == 63
        assert series[-1]["date"] == "2020-01-09"
        assert series[0] == {"date": "2019-11-08", "value": 6.0}

    def test_logs_each_run(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="timewave.pipeline"):
            TimewavePipeline(TimewaveConfig(iterations=3)).evaluate()
        messages = [r.getMessage() for r in caplog.records]
        assert any("recursive wave: 189 values" in m for m in messages)
        assert any(m.startswith("timewave anchored to 2012-12-21: 189 points") for m in messages)
