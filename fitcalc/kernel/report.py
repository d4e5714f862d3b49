"""Report driver: calories + summary for any training type, rendered as text."""

from __future__ import annotations

from loguru import logger

from fitcalc.kernel.formatter import render
from fitcalc.kernel.trainings import CaloriesCalculator


def read_data(training: CaloriesCalculator) -> str:
    calories = training.calories()
    info = training.training_info().model_copy(update={"calories": calories})
    logger.debug(
        f"{info.training_type}: distance={info.distance:.3f} km "
        f"speed={info.speed:.3f} km/h calories={info.calories:.3f}"
    )
    return render(info)
