"""Mounts and vehicles that change how fast a party travels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from common.logging import get_logger

from .constants import BASE_WALK_SPEED, KM_TO_MI, MI_TO_KM, M_PER_FT
from .errors import BadInputError, UnknownMountError
from .speed import (
    DirectSpeed,
    SpeedModifier,
    format_vehicle_speed,
    format_walking_speed,
    pace_multiplier,
)
from .units import round_half_up

logger = get_logger(__name__)

DIRECT_SPEED_UNITS = ("mi", "km")


@dataclass(frozen=True)
class Mount:
    """A mount or vehicle described in the plugin configuration."""

    id: str
    name: str
    kind: str = "npc"
    movement: Dict[str, float] = field(default_factory=dict)
    units: Optional[str] = None

    @classmethod
    def from_mapping(cls, mount_id: str, data: Mapping[str, Any]) -> "Mount":
        if not isinstance(data, Mapping):
            raise BadInputError(f"Mount '{mount_id}' must be a mapping.")
        raw_movement = data.get("movement") or {}
        if not isinstance(raw_movement, Mapping):
            raise BadInputError(f"Movement for mount '{mount_id}' must be a mapping.")
        units = raw_movement.get("units", data.get("units"))
        movement: Dict[str, float] = {}
        for key, value in raw_movement.items():
            if key == "units" or isinstance(value, bool):
                continue
            if isinstance(value, (int, float)):
                movement[str(key)] = float(value)
        return cls(
            id=str(mount_id),
            name=str(data.get("name") or mount_id),
            kind=str(data.get("type", "npc")),
            movement=movement,
            units=str(units) if units else None,
        )

    @property
    def is_vehicle(self) -> bool:
        return self.kind == "vehicle"

    def _direct_speed(self) -> Optional[DirectSpeed]:
        if not self.is_vehicle or self.units not in DIRECT_SPEED_UNITS:
            return None
        if not self.movement:
            return None
        return DirectSpeed(value=max(self.movement.values()), unit=self.units)

    @property
    def walk(self) -> float:
        return self.movement.get("walk") or BASE_WALK_SPEED

    def speed_modifier(self) -> SpeedModifier:
        """Direct speed for mi/km vehicles, otherwise walk speed over 30 ft."""

        direct = self._direct_speed()
        if direct is not None:
            return direct
        return self.walk / BASE_WALK_SPEED

    def speed_text(self, use_metric: bool) -> str:
        direct = self._direct_speed()
        if direct is not None:
            if use_metric and direct.unit == "mi":
                return f"{direct.value * MI_TO_KM:.1f} km/hour"
            if not use_metric and direct.unit == "km":
                return f"{direct.value * KM_TO_MI:.1f} mi/hour"
            return str(direct)
        if self.is_vehicle and self.units in DIRECT_SPEED_UNITS:
            return "Unknown"
        if use_metric:
            return f"{round_half_up(self.walk * M_PER_FT)} m"
        return f"{self.walk:g} ft"

    def pace_speed_label(self, pace: str, use_metric: bool) -> str:
        multiplier = pace_multiplier(pace)
        direct = self._direct_speed()
        if direct is not None:
            return format_vehicle_speed(direct, multiplier, use_metric)
        return format_walking_speed(f"{self.walk:g} ft", multiplier, use_metric)

    def to_dict(self, use_metric: bool) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.kind,
            "speed": self.speed_text(use_metric),
        }


class MountRegistry:
    """Lookup table for the mounts a game master has enabled."""

    def __init__(self, mounts: Iterable[Mount] = ()) -> None:
        self._mounts: Dict[str, Mount] = {mount.id: mount for mount in mounts}

    @classmethod
    def from_settings(
        cls,
        mounts: Mapping[str, Any] | None,
        enabled: Mapping[str, bool] | None = None,
    ) -> "MountRegistry":
        loaded: List[Mount] = []
        for mount_id, data in (mounts or {}).items():
            if enabled and not enabled.get(mount_id, False):
                continue
            try:
                loaded.append(Mount.from_mapping(mount_id, data))
            except BadInputError as exc:
                logger.warning("skipping mount %s: %s", mount_id, exc)
        logger.debug("loaded %d mounts", len(loaded))
        return cls(loaded)

    def __contains__(self, mount_id: object) -> bool:
        return mount_id in self._mounts

    def __len__(self) -> int:
        return len(self._mounts)

    def get(self, mount_id: str) -> Mount:
        try:
            return self._mounts[mount_id]
        except KeyError as exc:
            raise UnknownMountError(mount_id) from exc

    def available(self, use_metric: bool) -> List[Dict[str, object]]:
        return [mount.to_dict(use_metric) for mount in self._mounts.values()]


def speed_modifier_for(registry: MountRegistry, mount_id: str | None) -> SpeedModifier:
    if not mount_id:
        return 1.0
    return registry.get(mount_id).speed_modifier()


__all__ = ["Mount", "MountRegistry", "speed_modifier_for"]
