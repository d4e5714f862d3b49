"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import timedelta

import pytest
from loguru import logger

from fitcalc.kernel.models import Measurement
from fitcalc.kernel.presets import running, swimming, walking
from fitcalc.kernel.trainings import Running, Swimming, Walking


# ---------------------------------------------------------------------------
# Training fixtures (same literal values as the demo presets)
# ---------------------------------------------------------------------------

@pytest.fixture()
def running_training() -> Running:
    return running(action=5000, duration=timedelta(minutes=30), weight=85)


@pytest.fixture()
def walking_training() -> Walking:
    return walking(
        action=20000,
        duration=timedelta(hours=3, minutes=45),
        weight=85,
        height=185,
    )


@pytest.fixture()
def swimming_training() -> Swimming:
    return swimming(
        action=2000,
        duration=timedelta(minutes=90),
        weight=85,
        length_pool=50,
        count_pool=5,
    )


@pytest.fixture()
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)


def make_measurement(
    action: int = 1000,
    len_step: float = 0.65,
    duration: timedelta = timedelta(hours=1),
    weight: float = 70.0,
    training_type: str = "Test",
) -> Measurement:
    """Helper to build a Measurement with overridable defaults."""
    return Measurement(
        training_type=training_type,
        action=action,
        len_step=len_step,
        duration=duration,
        weight=weight,
    )
