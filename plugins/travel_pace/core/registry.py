"""Shared Pint registry for travel distance conversions."""

from __future__ import annotations

from functools import lru_cache

from pint import UnitRegistry

_CUSTOM_DEFINITIONS: tuple[str, ...] = (
    "tabletop_mile = 6000 * foot",
    "tabletop_kilometer = 3000 * foot",
)

_STANDARD_UNITS: dict[str, str] = {
    "ft": "foot",
    "m": "meter",
    "mi": "mile",
    "km": "kilometer",
}

_TABLETOP_UNITS: dict[str, str] = {
    **_STANDARD_UNITS,
    "mi": "tabletop_mile",
    "km": "tabletop_kilometer",
}


def _build_registry() -> UnitRegistry:
    registry = UnitRegistry()
    for definition in _CUSTOM_DEFINITIONS:
        registry.define(definition)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return _build_registry()


def unit_name(symbol: str, *, tabletop: bool) -> str | None:
    """Return the registry name for ``symbol`` or ``None`` when unsupported.

    Tabletop rules round a mile to 6000 ft and a kilometre to 3000 ft so that
    a 5 ft grid square divides them evenly.
    """

    table = _TABLETOP_UNITS if tabletop else _STANDARD_UNITS
    return table.get(symbol)


__all__ = ["get_registry", "unit_name"]
