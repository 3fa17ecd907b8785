"""Facade for the travel pace core utilities."""

from __future__ import annotations

from typing import Dict, List

from .calculator import (
    FORCED_MARCH_NOTE,
    MODES,
    TravelRequest,
    calculate_travel,
    journey_card,
    pace_speed_label,
    preview,
)
from .constants import MILES_PER_DAY, PACE_EFFECTS, PACE_LABELS, PACE_MULTIPLIERS, PACES
from .errors import BadInputError, InvalidUnitError, TravelPaceError, UnknownMountError
from .journey import JourneyTime, format_journey, journey_preview, journey_time
from .mounts import Mount, MountRegistry
from .settings import SettingsStore, TravelPaceSettings, load_settings
from .speed import DirectSpeed, coerce_speed_modifier, foot_speed_label, parse_direct_speed
from .timefmt import format_time
from .travel import DistanceBreakdown, TimeBreakdown, calculate_distance, calculate_time
from .units import convert_distance, format_distance


def list_paces(*, use_metric: bool = False) -> List[Dict[str, object]]:
    """Return the supported paces with their multipliers and on-foot speeds."""

    return [
        {
            "id": pace,
            "label": PACE_LABELS[pace],
            "multiplier": PACE_MULTIPLIERS[pace],
            "miles_per_day": MILES_PER_DAY[pace],
            "speed": foot_speed_label(pace, use_metric),
            "effect": PACE_EFFECTS[pace],
        }
        for pace in PACES
    ]


__all__ = [
    "BadInputError",
    "InvalidUnitError",
    "TravelPaceError",
    "UnknownMountError",
    "FORCED_MARCH_NOTE",
    "MODES",
    "PACES",
    "TravelRequest",
    "calculate_travel",
    "journey_card",
    "pace_speed_label",
    "preview",
    "JourneyTime",
    "format_journey",
    "journey_preview",
    "journey_time",
    "Mount",
    "MountRegistry",
    "SettingsStore",
    "TravelPaceSettings",
    "load_settings",
    "DirectSpeed",
    "coerce_speed_modifier",
    "parse_direct_speed",
    "format_time",
    "DistanceBreakdown",
    "TimeBreakdown",
    "calculate_distance",
    "calculate_time",
    "convert_distance",
    "format_distance",
    "list_paces",
]
