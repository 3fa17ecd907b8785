"""Conversion constants for tabletop overland travel."""

from __future__ import annotations

from typing import Dict, Literal

Pace = Literal["fast", "normal", "slow"]
DistanceUnit = Literal["ft", "m", "mi", "km"]

PACES: tuple[str, ...] = ("normal", "fast", "slow")
DISTANCE_UNITS: tuple[str, ...] = ("ft", "m", "mi", "km")

# Relative to normal pace.
PACE_MULTIPLIERS: Dict[str, float] = {
    "fast": 1.33,
    "normal": 1.0,
    "slow": 0.67,
}

# Distance covered in one travel day (8 hours).
MILES_PER_DAY: Dict[str, int] = {
    "fast": 30,
    "normal": 24,
    "slow": 18,
}

SPEEDS_IN_FEET: Dict[str, int] = {
    "fast": 400,
    "normal": 300,
    "slow": 200,
}

SPEEDS_IN_METERS: Dict[str, int] = {
    "fast": 133,
    "normal": 100,
    "slow": 67,
}

FT_PER_MILE = 5280
FT_PER_KM = 3280.84
M_PER_FT = 0.3048
M_PER_MILE = 1609.34
MI_TO_KM = 1.60934
KM_TO_MI = 0.621371

TABLETOP_FT_PER_MILE = 6000
TABLETOP_FT_PER_KM = 3000

HOURS_PER_DAY = 8
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR

BASE_WALK_SPEED = 30  # feet per round
ROUNDS_PER_MINUTE = 10

PACE_EFFECTS: Dict[str, str] = {
    "fast": "-5 penalty to passive Wisdom (Perception) scores.",
    "normal": "No special effect.",
    "slow": "Able to use stealth.",
}

PACE_LABELS: Dict[str, str] = {
    "fast": "Fast",
    "normal": "Normal",
    "slow": "Slow",
}


__all__ = [
    "Pace",
    "DistanceUnit",
    "PACES",
    "DISTANCE_UNITS",
    "PACE_MULTIPLIERS",
    "MILES_PER_DAY",
    "SPEEDS_IN_FEET",
    "SPEEDS_IN_METERS",
    "FT_PER_MILE",
    "FT_PER_KM",
    "M_PER_FT",
    "M_PER_MILE",
    "MI_TO_KM",
    "KM_TO_MI",
    "TABLETOP_FT_PER_MILE",
    "TABLETOP_FT_PER_KM",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "BASE_WALK_SPEED",
    "ROUNDS_PER_MINUTE",
    "PACE_EFFECTS",
    "PACE_LABELS",
]
