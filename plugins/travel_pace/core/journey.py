"""Journey estimates split into on-road and off-road legs.

Off-road distance counts double. ``speed`` is the party's walking speed in
feet per round (or metres with ``use_metric``); a 30 ft walker covers 3 miles
per hour at normal pace. ``ratio`` stretches the result for journeys that
only spend part of the day moving.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from common.logging import get_logger

from .constants import HOURS_PER_DAY, MINUTES_PER_HOUR, PACES
from .errors import BadInputError
from .speed import pace_multiplier
from .units import coerce_number, round_half_up

logger = get_logger(__name__)

METRIC_SPEED_FACTOR = 0.3
METRIC_DISTANCE_FACTOR = 1.5


@dataclass(frozen=True)
class JourneyTime:
    pace: str
    total_hours: float
    hours: int
    minutes: int
    days: Optional[int] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "pace": self.pace,
            "total_hours": self.total_hours,
            "hours": self.hours,
            "minutes": self.minutes,
            "days": self.days,
            "formatted": format_journey(self),
        }


def _pace_divisor(real_speed: float, pace: str) -> float:
    if pace == "slow":
        return (real_speed / 3) * 2
    if pace == "fast":
        return (real_speed / 3) * 4
    return real_speed


def journey_time(
    speed: float | int | str,
    on_road: float | int | str,
    off_road: float | int | str,
    pace: str,
    ratio: float | int | str = 1,
    *,
    use_metric: bool = False,
    include_days: bool = False,
) -> JourneyTime:
    pace_multiplier(pace)
    speed_value = coerce_number(speed, field="Speed")
    on_road_value = coerce_number(on_road, field="On-road distance")
    off_road_value = coerce_number(off_road, field="Off-road distance")
    ratio_value = coerce_number(ratio, field="Ratio")
    if on_road_value < 0 or off_road_value < 0:
        raise BadInputError("Distances must not be negative.")
    if ratio_value <= 0:
        raise BadInputError("Ratio must be positive.")

    if use_metric:
        speed_value = round_half_up(speed_value / METRIC_SPEED_FACTOR)
        on_road_value = round_half_up(on_road_value / METRIC_DISTANCE_FACTOR)
        off_road_value = round_half_up(off_road_value / METRIC_DISTANCE_FACTOR)
    if speed_value <= 0:
        raise BadInputError("Speed must be positive.")

    real_distance = on_road_value + off_road_value * 2
    real_speed = speed_value / 10
    total = (real_distance / _pace_divisor(real_speed, pace)) * ratio_value

    result = JourneyTime(
        pace=pace,
        total_hours=total,
        hours=math.floor(total),
        minutes=math.floor((total * MINUTES_PER_HOUR) % MINUTES_PER_HOUR),
        days=round_half_up(total / HOURS_PER_DAY) if include_days else None,
    )
    logger.debug(
        "journey: speed=%s on=%s off=%s pace=%s ratio=%s -> %s",
        speed_value,
        on_road_value,
        off_road_value,
        pace,
        ratio_value,
        result,
    )
    return result


def format_journey(journey: JourneyTime) -> str:
    """``"5 hours and 20 minutes"`` with ``" (1 day)"`` when days were requested."""

    hours = f"{journey.hours} hour{'s' if journey.hours != 1 else ''}"
    minutes = f"{journey.minutes} minute{'s' if journey.minutes != 1 else ''}"
    text = f"{hours} and {minutes}"
    if journey.days is not None:
        text += f" ({journey.days} {'days' if journey.days > 1 else 'day'})"
    return text


def journey_preview(
    speed: float | int | str,
    on_road: float | int | str,
    off_road: float | int | str,
    ratio: float | int | str = 1,
    *,
    use_metric: bool = False,
) -> Dict[str, str]:
    return {
        pace: format_journey(
            journey_time(speed, on_road, off_road, pace, ratio, use_metric=use_metric)
        )
        for pace in PACES
    }


__all__ = ["JourneyTime", "journey_time", "format_journey", "journey_preview"]
