"""
DatedPoint: точка волны, привязанная к календарной дате

Immutable Pydantic модель. Создаётся только в date_mapper.
Сериализуется в контракт {"date": "YYYY-MM-DD", "value": number}
(contracts/schema/dated_series.json).
"""

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field


class DatedPoint(BaseModel):
    """Пара (календарная дата, значение волны)."""

    date: dt.date = Field(..., description="Календарная дата без времени суток")
    value: float = Field(..., allow_inf_nan=False, description="Значение волны")

    model_config = {"frozen": True}

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в JSON-совместимый dict."""
        return {"date": self.date.isoformat(), "value": self.value}
