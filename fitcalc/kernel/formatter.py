"""Render an InfoMessage as the fixed five-line report."""

from __future__ import annotations

from fitcalc.kernel.models import InfoMessage

REPORT_TEMPLATE = (
    "Training type: {training_type}\n"
    "Duration: {minutes} min\n"
    "Distance: {distance:.2f} km.\n"
    "Avg speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)


def format_minutes(minutes: float) -> str:
    """Shortest representation: 90.0 -> "90", 1.5 -> "1.5"."""
    if minutes.is_integer():
        return str(int(minutes))
    return repr(minutes)


def render(info: InfoMessage) -> str:
    return REPORT_TEMPLATE.format(
        training_type=info.training_type,
        minutes=format_minutes(info.duration_minutes),
        distance=info.distance,
        speed=info.speed,
        calories=info.calories,
    )
