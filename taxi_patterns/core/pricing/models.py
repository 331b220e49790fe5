# taxi_patterns/core/pricing/models.py
"""
Модели данных для расчёта стоимости.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TripData(BaseModel):
    """Параметры поездки. Неизменяемы после создания."""

    model_config = ConfigDict(frozen=True)

    distance: float = Field(..., description="Расстояние в км")
    time: float = Field(..., description="Время поездки в минутах")
