"""High level travel calculations used by the blueprint and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from common.logging import get_logger

from .constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    PACE_EFFECTS,
    PACE_LABELS,
)
from .errors import BadInputError
from .mounts import MountRegistry, speed_modifier_for
from .speed import DirectSpeed, foot_speed_label, pace_multiplier
from .timefmt import format_time
from .travel import calculate_distance, calculate_time
from .units import convert_distance, format_distance

logger = get_logger(__name__)

MODES = ("distance", "time")

FORCED_MARCH_NOTE = (
    "Travelling more than 8 hours a day is a forced march: each extra hour "
    "requires a Constitution saving throw (DC 10 + 1 per hour past 8) or "
    "the traveller suffers one level of exhaustion."
)


@dataclass(frozen=True)
class TravelRequest:
    mode: str
    pace: str = "normal"
    distance: Optional[float] = None
    days: float = 0
    hours: float = 0
    minutes: float = 0
    total_minutes: Optional[float] = None
    mount_id: Optional[str] = None

    def travel_minutes(self) -> float:
        if self.total_minutes:
            return self.total_minutes
        return (self.days * HOURS_PER_DAY + self.hours) * MINUTES_PER_HOUR + self.minutes

    def time_parts(self) -> Dict[str, float]:
        """Days, hours and minutes of the trip, split from ``total_minutes`` when given."""

        if not self.total_minutes:
            return {"days": self.days, "hours": self.hours, "minutes": self.minutes}
        days, remaining = divmod(self.total_minutes, MINUTES_PER_DAY)
        hours, minutes = divmod(remaining, MINUTES_PER_HOUR)
        return {"days": days, "hours": hours, "minutes": minutes}


def _distance_unit(use_metric: bool) -> str:
    return "km" if use_metric else "mi"


def _serialize_modifier(modifier: float | DirectSpeed) -> float | str:
    if isinstance(modifier, DirectSpeed):
        return str(modifier)
    return modifier


def _distance_to_time(request: TravelRequest, modifier: float | DirectSpeed, use_metric: bool) -> Dict[str, Any]:
    if request.distance is None or request.distance <= 0:
        raise BadInputError("Distance must be greater than zero.")
    unit = _distance_unit(use_metric)
    # Vehicles quote real-world speeds, so their distances use real-world miles.
    use_tabletop = not isinstance(modifier, DirectSpeed)
    distance_ft = convert_distance(request.distance, unit, "ft", use_tabletop=use_tabletop)
    time = calculate_time(distance_ft, request.pace, modifier)
    return {
        "mode": "distance",
        "input": {"distance": request.distance, "unit": unit, "pace": request.pace},
        "output": {"time": time.to_dict(), "time_formatted": format_time(time)},
    }


def _time_to_distance(request: TravelRequest, modifier: float | DirectSpeed, use_metric: bool) -> Dict[str, Any]:
    if min(request.days, request.hours, request.minutes) < 0:
        raise BadInputError("Time values must not be negative.")
    total_minutes = request.travel_minutes()
    if total_minutes <= 0:
        raise BadInputError("Travel time must be greater than zero.")
    unit = _distance_unit(use_metric)
    distance = calculate_distance(total_minutes, request.pace, modifier).in_unit(unit)
    return {
        "mode": "time",
        "input": {
            "time": request.time_parts(),
            "total_minutes": total_minutes,
            "pace": request.pace,
        },
        "output": {
            "distance": distance,
            "unit": unit,
            "distance_formatted": format_distance(distance, unit),
        },
    }


def calculate_travel(
    request: TravelRequest,
    *,
    use_metric: bool = False,
    mounts: MountRegistry | None = None,
) -> Dict[str, Any]:
    """Convert distance to time or time to distance for ``request``."""

    if request.mode not in MODES:
        raise BadInputError(f"Unknown calculation mode '{request.mode}'. Use distance or time.")
    pace_multiplier(request.pace)
    modifier = speed_modifier_for(mounts or MountRegistry(), request.mount_id)

    if request.mode == "distance":
        result = _distance_to_time(request, modifier, use_metric)
    else:
        result = _time_to_distance(request, modifier, use_metric)

    result["pace_effect"] = PACE_EFFECTS[request.pace]
    result["speed_modifier"] = _serialize_modifier(modifier)
    result["mount_id"] = request.mount_id or None
    logger.debug("travel calculation %s -> %s", request, result["output"])
    return result


def preview(
    request: TravelRequest,
    *,
    use_metric: bool = False,
    mounts: MountRegistry | None = None,
) -> str:
    """Short result line shown while the form is being filled in."""

    if request.mode == "distance" and (request.distance is None or request.distance <= 0):
        return ""
    if request.mode == "time" and request.travel_minutes() <= 0:
        return ""
    result = calculate_travel(request, use_metric=use_metric, mounts=mounts)
    if result["mode"] == "distance":
        return result["output"]["time_formatted"]
    return result["output"]["distance_formatted"]


def pace_speed_label(
    pace: str,
    *,
    use_metric: bool = False,
    mounts: MountRegistry | None = None,
    mount_id: str | None = None,
) -> str:
    """Speed shown next to the pace selector, e.g. ``"300 ft/min"``."""

    if mount_id:
        return (mounts or MountRegistry()).get(mount_id).pace_speed_label(pace, use_metric)
    return foot_speed_label(pace, use_metric)


def _narrative(result: Dict[str, Any]) -> str:
    pace = result["input"]["pace"]
    if result["mode"] == "distance":
        distance = format_distance(result["input"]["distance"], result["input"]["unit"])
        return f"Travelling {distance} at a {pace} pace takes {result['output']['time_formatted']}."
    time = result["input"]["time"]
    span = format_time_input(time["days"], time["hours"], time["minutes"])
    return f"Travelling for {span} at a {pace} pace covers {result['output']['distance_formatted']}."


def format_time_input(days: float, hours: float, minutes: float) -> str:
    parts = []
    for value, unit in ((days, "day"), (hours, "hour"), (minutes, "minute")):
        if value:
            parts.append(f"{value:g} {unit}{'s' if value != 1 else ''}")
    return ", ".join(parts) or "0 minutes"


def journey_card(
    result: Dict[str, Any],
    *,
    use_metric: bool = False,
    show_effects: bool = True,
    forced_march: bool = False,
    mounts: MountRegistry | None = None,
) -> Dict[str, Any]:
    """Context for the journey card posted after a calculation."""

    pace = result["input"]["pace"]
    vehicle = None
    mount_id = result.get("mount_id")
    if mount_id:
        mount = (mounts or MountRegistry()).get(mount_id)
        vehicle = {
            "name": mount.name,
            "speed": mount.pace_speed_label(pace, use_metric),
        }
    return {
        "mode": result["mode"],
        "pace": pace,
        "pace_label": PACE_LABELS[pace],
        "narrative": _narrative(result),
        "result": result["output"].get("time_formatted") or result["output"].get("distance_formatted"),
        "effect": result["pace_effect"] if show_effects and pace != "normal" else "",
        "forced_march": FORCED_MARCH_NOTE if forced_march else "",
        "vehicle": vehicle,
    }


__all__ = [
    "MODES",
    "FORCED_MARCH_NOTE",
    "TravelRequest",
    "calculate_travel",
    "preview",
    "pace_speed_label",
    "format_time_input",
    "journey_card",
]
