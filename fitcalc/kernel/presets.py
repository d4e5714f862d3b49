"""Hardcoded demo trainings: configuration only."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fitcalc.kernel.features import LEN_STEP, SWIMMING_LEN_STEP
from fitcalc.kernel.models import Measurement
from fitcalc.kernel.trainings import CaloriesCalculator, Running, Swimming, Walking


def running(
    action: int,
    duration: timedelta,
    weight: float,
    len_step: float = LEN_STEP,
    training_type: str = "Running",
) -> Running:
    return Running(
        measurement=Measurement(
            training_type=training_type,
            action=action,
            len_step=len_step,
            duration=duration,
            weight=weight,
        )
    )


def walking(
    action: int,
    duration: timedelta,
    weight: float,
    height: float,
    len_step: float = LEN_STEP,
    training_type: str = "Walking",
) -> Walking:
    return Walking(
        measurement=Measurement(
            training_type=training_type,
            action=action,
            len_step=len_step,
            duration=duration,
            weight=weight,
        ),
        height=height,
    )


def swimming(
    action: int,
    duration: timedelta,
    weight: float,
    length_pool: float,
    count_pool: int,
    len_step: float = SWIMMING_LEN_STEP,
    training_type: str = "Swimming",
) -> Swimming:
    return Swimming(
        measurement=Measurement(
            training_type=training_type,
            action=action,
            len_step=len_step,
            duration=duration,
            weight=weight,
        ),
        length_pool=length_pool,
        count_pool=count_pool,
    )


@dataclass(frozen=True, slots=True)
class Preset:
    id: str
    label: str
    description: str
    training: CaloriesCalculator


# Insertion order is report order.
PRESETS: dict[str, Preset] = {
    "swimming": Preset(
        id="swimming",
        label="Swimming",
        description="2000 strokes, 5 lengths of a 50 m pool in 90 minutes.",
        training=swimming(
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
        ),
    ),
    "walking": Preset(
        id="walking",
        label="Walking",
        description="20000 steps over 3h45m, 185 cm walker.",
        training=walking(
            action=20000,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=185,
        ),
    ),
    "running": Preset(
        id="running",
        label="Running",
        description="5000 steps in 30 minutes.",
        training=running(
            action=5000,
            duration=timedelta(minutes=30),
            weight=85,
        ),
    ),
}


def list_presets() -> list[Preset]:
    return list(PRESETS.values())
