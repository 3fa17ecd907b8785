"""Distance to time and time to distance arithmetic.

Overland travel follows the tabletop convention of an eight hour travel day.
Travellers on foot (or on a mount, scaled by its walking speed relative to
30 ft) cover 30, 24 or 18 miles per day at fast, normal and slow pace, using
the simplified 6000 ft mile. Vehicles with a direct speed such as
``"8 mi/hour"`` use real-world conversions instead.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict

from common.logging import get_logger

from .constants import (
    FT_PER_KM,
    FT_PER_MILE,
    HOURS_PER_DAY,
    KM_TO_MI,
    MILES_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    MI_TO_KM,
    M_PER_MILE,
    TABLETOP_FT_PER_MILE,
)
from .errors import BadInputError
from .speed import DirectSpeed, SpeedModifier, coerce_speed_modifier, pace_multiplier
from .units import coerce_number, convert_distance, round_half_up

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimeBreakdown:
    total_minutes: float
    days: int
    hours: int
    minutes: int

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DistanceBreakdown:
    feet: float
    miles: float
    meters: float
    kilometers: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def in_unit(self, unit: str) -> float:
        return {
            "ft": self.feet,
            "mi": self.miles,
            "m": self.meters,
            "km": self.kilometers,
        }[unit]


def _time_from_hours(total_hours: float) -> TimeBreakdown:
    days = math.floor(total_hours / HOURS_PER_DAY)
    remaining = total_hours % HOURS_PER_DAY
    hours = math.floor(remaining)
    minutes = round_half_up((remaining - hours) * MINUTES_PER_HOUR)
    return TimeBreakdown(
        total_minutes=total_hours * MINUTES_PER_HOUR,
        days=days,
        hours=hours,
        minutes=minutes,
    )


def _time_from_minutes(total_minutes: float) -> TimeBreakdown:
    remaining = total_minutes % MINUTES_PER_DAY
    return TimeBreakdown(
        total_minutes=total_minutes,
        days=math.floor(total_minutes / MINUTES_PER_DAY),
        hours=math.floor(remaining / MINUTES_PER_HOUR),
        minutes=math.floor(remaining % MINUTES_PER_HOUR),
    )


def calculate_time(
    distance_ft: float | int | str,
    pace: str,
    speed_modifier: SpeedModifier | str | None = 1.0,
) -> TimeBreakdown:
    """Return how long covering ``distance_ft`` takes at ``pace``."""

    distance = coerce_number(distance_ft, field="Distance")
    if distance < 0:
        raise BadInputError("Distance must not be negative.")
    multiplier = pace_multiplier(pace)
    modifier = coerce_speed_modifier(speed_modifier)

    if isinstance(modifier, DirectSpeed):
        adjusted = modifier.value * multiplier
        ft_per_unit = FT_PER_MILE if modifier.unit == "mi" else FT_PER_KM
        result = _time_from_hours((distance / ft_per_unit) / adjusted)
        logger.debug(
            "direct speed time: %s ft at %s (%s x%s) -> %s",
            distance,
            modifier,
            pace,
            multiplier,
            result,
        )
        return result

    feet_per_day = MILES_PER_DAY[pace] * TABLETOP_FT_PER_MILE
    day_fraction = (distance / feet_per_day) * (1 / modifier)
    result = _time_from_minutes(day_fraction * MINUTES_PER_DAY)
    logger.debug("standard time: %s ft at %s (x%s) -> %s", distance, pace, modifier, result)
    return result


def calculate_distance(
    minutes: float | int | str,
    pace: str,
    speed_modifier: SpeedModifier | str | None = 1.0,
) -> DistanceBreakdown:
    """Return how far a party travels in ``minutes`` at ``pace``."""

    total_minutes = coerce_number(minutes, field="Time")
    if total_minutes < 0:
        raise BadInputError("Time must not be negative.")
    multiplier = pace_multiplier(pace)
    modifier = coerce_speed_modifier(speed_modifier)

    if isinstance(modifier, DirectSpeed):
        distance = modifier.value * multiplier * (total_minutes / MINUTES_PER_HOUR)
        logger.debug("direct speed distance: %s min at %s (%s) -> %s", total_minutes, modifier, pace, distance)
        if modifier.unit == "mi":
            return DistanceBreakdown(
                feet=distance * FT_PER_MILE,
                miles=distance,
                meters=distance * M_PER_MILE,
                kilometers=distance * MI_TO_KM,
            )
        return DistanceBreakdown(
            feet=distance * FT_PER_KM,
            miles=distance * KM_TO_MI,
            meters=distance * 1000,
            kilometers=distance,
        )

    miles = MILES_PER_DAY[pace] * (total_minutes / MINUTES_PER_DAY) * modifier
    feet = miles * TABLETOP_FT_PER_MILE
    return DistanceBreakdown(
        feet=feet,
        miles=miles,
        meters=convert_distance(feet, "ft", "m"),
        kilometers=convert_distance(feet, "ft", "km"),
    )


__all__ = ["TimeBreakdown", "DistanceBreakdown", "calculate_time", "calculate_distance"]
