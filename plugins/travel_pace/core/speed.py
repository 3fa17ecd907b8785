"""Speed modifiers for mounts, vehicles and travellers on foot."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .constants import (
    KM_TO_MI,
    MI_TO_KM,
    M_PER_FT,
    PACE_MULTIPLIERS,
    ROUNDS_PER_MINUTE,
    SPEEDS_IN_FEET,
    SPEEDS_IN_METERS,
)
from .errors import BadInputError
from .units import coerce_number, round_half_up

_DIRECT_SPEED_PATTERN = re.compile(r"^(\d+(\.\d+)?)\s*(mi|km)/hour$")
_WALKING_SPEED_PATTERN = re.compile(r"^(\d+(\.\d+)?)\s*(ft|m)$")


@dataclass(frozen=True)
class DirectSpeed:
    """A vehicle speed expressed in miles or kilometres per hour."""

    value: float
    unit: str

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}/hour"


SpeedModifier = Union[float, DirectSpeed]


def parse_direct_speed(text: str) -> Optional[DirectSpeed]:
    """Parse ``"8 mi/hour"`` style strings, returning ``None`` on mismatch."""

    match = _DIRECT_SPEED_PATTERN.match(text.strip())
    if not match:
        return None
    return DirectSpeed(value=float(match.group(1)), unit=match.group(3))


def coerce_speed_modifier(raw: float | int | str | DirectSpeed | None) -> SpeedModifier:
    """Normalise API/CLI input into a :data:`SpeedModifier`."""

    if raw is None:
        return 1.0
    if isinstance(raw, DirectSpeed):
        modifier: SpeedModifier = raw
    elif isinstance(raw, str) and "/hour" in raw:
        direct = parse_direct_speed(raw)
        if direct is None:
            raise BadInputError(f"Cannot parse vehicle speed '{raw}'. Use e.g. '8 mi/hour'.")
        modifier = direct
    else:
        modifier = coerce_number(raw, field="Speed modifier")
    value = modifier.value if isinstance(modifier, DirectSpeed) else modifier
    if value <= 0:
        raise BadInputError("Speed modifier must be positive.")
    return modifier


def pace_multiplier(pace: str) -> float:
    try:
        return PACE_MULTIPLIERS[pace]
    except KeyError as exc:
        raise BadInputError(f"Unknown pace '{pace}'. Use fast, normal or slow.") from exc


def foot_speed_label(pace: str, use_metric: bool) -> str:
    pace_multiplier(pace)
    if use_metric:
        return f"{SPEEDS_IN_METERS[pace]} m/min"
    return f"{SPEEDS_IN_FEET[pace]} ft/min"


def format_vehicle_speed(speed: DirectSpeed, multiplier: float, use_metric: bool) -> str:
    """Render a vehicle speed in the display system, scaled by the pace."""

    value = speed.value
    unit = speed.unit
    if use_metric and unit == "mi":
        unit = "km"
        value = value * MI_TO_KM
    elif not use_metric and unit == "km":
        unit = "mi"
        value = value * KM_TO_MI
    return f"{value * multiplier:.1f} {unit}/hour"


def format_walking_speed(text: str, multiplier: float, use_metric: bool) -> str:
    """Render a per-round walking speed (``"60 ft"``) as a per-minute pace label.

    Text that does not look like a walking speed is returned unchanged.
    """

    match = _WALKING_SPEED_PATTERN.match(text.strip())
    if not match:
        return text
    base = float(match.group(1))
    unit = match.group(3)
    if use_metric and unit == "ft":
        unit = "m"
        base = round_half_up(base * M_PER_FT)
    elif not use_metric and unit == "m":
        unit = "ft"
        base = round_half_up(base / M_PER_FT)
    per_minute = base * ROUNDS_PER_MINUTE
    return f"{round_half_up(per_minute * multiplier)} {unit}/min"


__all__ = [
    "DirectSpeed",
    "SpeedModifier",
    "parse_direct_speed",
    "coerce_speed_modifier",
    "pace_multiplier",
    "foot_speed_label",
    "format_vehicle_speed",
    "format_walking_speed",
]
