"""Measurement record and summary message: Pydantic v2 models."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field, field_validator

from fitcalc.kernel import features


class Measurement(BaseModel):
    """Raw inputs shared by every training type."""

    training_type: str
    action: int = Field(..., ge=0, description="Steps or strokes")
    len_step: float = Field(..., ge=0, description="Metres per action")
    duration: timedelta
    weight: float = Field(..., ge=0, description="Body weight, kg")

    model_config = {"frozen": True}

    @field_validator("duration")
    @classmethod
    def _non_negative_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must be non-negative")
        return value

    def duration_hours(self) -> float:
        return features.duration_hours(self.duration)

    def distance_km(self) -> float:
        return features.distance_km(self.action, self.len_step)

    def mean_speed_kmh(self) -> float:
        return features.mean_speed_kmh(self.distance_km(), self.duration_hours())

    def training_info(self, mean_speed: float | None = None) -> InfoMessage:
        """Base summary with calories left at zero.

        `mean_speed` lets a training type substitute its own speed formula.
        """
        if mean_speed is None:
            mean_speed = self.mean_speed_kmh()
        return InfoMessage(
            training_type=self.training_type,
            duration=self.duration,
            distance=self.distance_km(),
            speed=mean_speed,
        )


class InfoMessage(BaseModel):
    training_type: str
    duration: timedelta
    distance: float = 0.0  # km
    speed: float = 0.0  # km/h
    calories: float = 0.0  # kcal

    model_config = {"frozen": True}

    @property
    def duration_minutes(self) -> float:
        return features.duration_minutes(self.duration)
