"""Pure stateless formula functions: math only, never raises."""

from __future__ import annotations

from datetime import timedelta

M_IN_KM = 1000
MIN_IN_HOUR = 60
CM_IN_M = 100

# Default distance covered by one action, in metres.
LEN_STEP = 0.65
SWIMMING_LEN_STEP = 1.38

CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

CALORIES_WEIGHT_MULTIPLIER = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278

SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2


def duration_hours(duration: timedelta) -> float:
    return duration.total_seconds() / 3600


def duration_minutes(duration: timedelta) -> float:
    return duration.total_seconds() / 60


def distance_km(action: int, len_step: float) -> float:
    """Distance covered by `action` steps (or strokes) of `len_step` metres."""
    return action * len_step / M_IN_KM


def mean_speed_kmh(distance: float, hours: float) -> float:
    """Average speed in km/h. Zero duration yields 0."""
    if hours == 0:
        return 0.0
    return distance / hours


def pool_mean_speed_kmh(length_pool: float, count_pool: int, hours: float) -> float:
    """Swimming speed from pool length × lap count. Zero duration yields 0."""
    if hours == 0:
        return 0.0
    return length_pool * count_pool / M_IN_KM / hours


def kmh_to_msec(speed_kmh: float) -> float:
    return speed_kmh * KMH_IN_MSEC


def cm_to_m(length_cm: float) -> float:
    return length_cm / CM_IN_M


def running_calories(speed_kmh: float, weight: float, hours: float) -> float:
    """(18 × speed + 1.79) × weight / 1000 × minutes. Zero duration yields 0."""
    if hours == 0:
        return 0.0
    calories_mean = CALORIES_MEAN_SPEED_MULTIPLIER * speed_kmh + CALORIES_MEAN_SPEED_SHIFT
    return calories_mean * weight / M_IN_KM * hours * MIN_IN_HOUR


def walking_calories(
    speed_kmh: float,
    weight: float,
    height_cm: float,
    hours: float,
) -> float | None:
    """Walking calories from speed in m/s and height in metres.

    Returns None when height is zero (the speed/height term is undefined);
    the caller decides how to degrade.
    """
    height_m = cm_to_m(height_cm)
    if height_m == 0:
        return None
    speed_msec = kmh_to_msec(speed_kmh)
    per_minute = (
        CALORIES_WEIGHT_MULTIPLIER * weight
        + (speed_msec**2 / height_m) * CALORIES_SPEED_HEIGHT_MULTIPLIER * weight
    )
    return per_minute * hours * MIN_IN_HOUR


def swimming_calories(speed_kmh: float, weight: float, hours: float) -> float:
    """(speed + 1.1) × 2 × weight × hours."""
    return (
        (speed_kmh + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
        * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
        * weight
        * hours
    )
