"""Human readable travel durations."""

from __future__ import annotations

import math
from typing import List

from .constants import HOURS_PER_DAY
from .travel import TimeBreakdown
from .units import round_half_up

_CALENDAR_UNITS: tuple[tuple[str, int], ...] = (
    ("decade", 3650),
    ("year", 365),
    ("month", 30),
    ("week", 7),
)


def plural(count: float, unit: str) -> str:
    return f"{count:g} {unit}{'s' if count > 1 else ''}"


def _normalise(days: int, hours: float, minutes: float) -> tuple[int, float, int]:
    if minutes >= 59.5:
        minutes = 0
        hours += 1
    else:
        minutes = round_half_up(minutes)

    if hours >= 23.5:
        hours = 0
        days += 1
    elif hours > HOURS_PER_DAY:
        extra_days = math.floor(hours / HOURS_PER_DAY)
        if hours % HOURS_PER_DAY >= 7.5:
            days += extra_days + 1
            hours = 0
        else:
            days += extra_days
            hours = hours % HOURS_PER_DAY
    return days, hours, int(minutes)


def format_time(time: TimeBreakdown) -> str:
    """Render a :class:`TimeBreakdown` as ``"1 week, 2 days, 3 hours"``.

    Hours beyond a travel day fold into whole days, and days fold into weeks,
    months (30 days), years (365) and decades. Minutes are dropped once the
    trip spans days unless they add up to more than a quarter hour.
    """

    days, hours, minutes = _normalise(time.days, time.hours, time.minutes)

    parts: List[str] = []
    for unit, size in _CALENDAR_UNITS:
        count, days = divmod(days, size)
        if count > 0:
            parts.append(plural(count, unit))
    if days > 0:
        parts.append(plural(days, "day"))
    if hours > 0:
        parts.append(plural(hours, "hour"))

    show_minutes = (
        not parts
        or (time.days == 0 and time.hours == 0)
        or (time.days == 0 and hours > 0)
        or (time.days > 0 and hours > 0 and minutes > 15)
    )
    if minutes > 0 and show_minutes:
        parts.append(plural(minutes, "minute"))

    if not parts:
        return "0 minutes"
    return ", ".join(parts)


__all__ = ["plural", "format_time"]
