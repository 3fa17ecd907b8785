"""Distance conversions backed by :mod:`pint`."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from .errors import BadInputError, InvalidUnitError
from .registry import get_registry, unit_name


def coerce_number(value: float | int | str, *, field: str = "Value") -> float:
    """Return ``value`` as a finite float."""

    if isinstance(value, bool):
        raise BadInputError(f"{field} must be a number.")
    if isinstance(value, (int, float)):
        if math.isnan(value) or math.isinf(value):
            raise BadInputError(f"{field} must be a finite number.")
        return float(value)
    if not isinstance(value, str):
        raise BadInputError(f"{field} must be a number or numeric string.")
    text = value.strip()
    if len(text) == 0 or len(text) > 32:
        raise BadInputError(f"{field} string must be between 1 and 32 characters.")
    try:
        parsed = Decimal(text)
    except InvalidOperation as exc:
        raise BadInputError(f"{field} is not a valid number.") from exc
    if parsed.is_nan() or parsed.is_infinite():
        raise BadInputError(f"{field} must be a finite number.")
    return float(parsed)


def _resolve_unit(symbol: str, *, tabletop: bool) -> str:
    if not isinstance(symbol, str):
        raise InvalidUnitError("Unit symbol must be a string.")
    name = unit_name(symbol.strip(), tabletop=tabletop)
    if name is None:
        raise InvalidUnitError(f"Unsupported distance unit '{symbol}'. Use ft, m, mi or km.")
    return name


def convert_distance(
    value: float | int | str,
    from_unit: str,
    to_unit: str,
    *,
    use_tabletop: bool = True,
) -> float:
    """Convert ``value`` between ``ft``, ``m``, ``mi`` and ``km``."""

    numeric = coerce_number(value)
    source = _resolve_unit(from_unit, tabletop=use_tabletop)
    target = _resolve_unit(to_unit, tabletop=use_tabletop)
    if source == target:
        return numeric
    return numeric * _factor(source, target)


@lru_cache(maxsize=None)
def _factor(source: str, target: str) -> float:
    """Conversion factor between two registry units, trimmed to 12 significant digits."""

    registry = get_registry()
    magnitude = registry.Quantity(1, source).to(target).magnitude
    # pint round-trips through metres; drop the float noise so 24 mi stays 144000 ft.
    return float(f"{magnitude:.12g}")


def round_half_up(value: float) -> int:
    """Round halves upwards (``2.5 -> 3``) instead of to the nearest even."""

    return int(math.floor(value + 0.5))


def format_distance(value: float, unit: str) -> str:
    return f"{value:.1f} {unit}"


__all__ = ["coerce_number", "convert_distance", "round_half_up", "format_distance"]
