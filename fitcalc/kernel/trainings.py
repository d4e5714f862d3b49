"""Training types.

Each type holds a shared `Measurement` plus its own fields and provides
`mean_speed_kmh()`, `calories()` and `training_info()`. The summary is always
built from the type's own `mean_speed_kmh()`, so Swimming's pool-based speed
reaches its report.
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger
from pydantic import BaseModel, Field

from fitcalc.kernel import features
from fitcalc.kernel.models import InfoMessage, Measurement


class CaloriesCalculator(Protocol):
    def mean_speed_kmh(self) -> float: ...

    def calories(self) -> float: ...

    def training_info(self) -> InfoMessage: ...


class _Training(BaseModel):
    measurement: Measurement

    model_config = {"frozen": True}

    def mean_speed_kmh(self) -> float:
        return self.measurement.mean_speed_kmh()

    def calories(self) -> float:
        return 0.0

    def training_info(self) -> InfoMessage:
        return self.measurement.training_info(mean_speed=self.mean_speed_kmh())


class Running(_Training):
    def calories(self) -> float:
        m = self.measurement
        return features.running_calories(self.mean_speed_kmh(), m.weight, m.duration_hours())


class Walking(_Training):
    height: float = Field(..., ge=0, description="Height, cm")

    def calories(self) -> float:
        m = self.measurement
        result = features.walking_calories(
            self.mean_speed_kmh(), m.weight, self.height, m.duration_hours()
        )
        if result is None:
            logger.warning(f"Zero height for {m.training_type!r}; calories reported as 0")
            return 0.0
        return result


class Swimming(_Training):
    length_pool: float = Field(..., ge=0, description="Pool length, m")
    count_pool: int = Field(..., ge=0, description="Lengths swum")

    def mean_speed_kmh(self) -> float:
        return features.pool_mean_speed_kmh(
            self.length_pool, self.count_pool, self.measurement.duration_hours()
        )

    def calories(self) -> float:
        m = self.measurement
        return features.swimming_calories(self.mean_speed_kmh(), m.weight, m.duration_hours())
