"""Configuration helpers for the travel pace plugin."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from common.logging import get_logger

from .errors import BadInputError
from .mounts import MountRegistry

logger = get_logger(__name__)

DEFAULTS: Dict[str, Any] = {
    "use_metric": False,
    "show_effects": True,
    "forced_march": True,
    "enabled_mounts": {},
    "preview": {},
}

_BOOLEAN_KEYS = ("use_metric", "show_effects", "forced_march")
_MAPPING_KEYS = ("enabled_mounts", "preview")


@dataclass(frozen=True)
class TravelPaceSettings:
    use_metric: bool = False
    show_effects: bool = True
    forced_march: bool = True
    enabled_mounts: Dict[str, bool] = field(default_factory=dict)
    mounts: Dict[str, Any] = field(default_factory=dict)
    settings_file: Path | None = None

    def mount_registry(self, enabled: Mapping[str, bool] | None = None) -> MountRegistry:
        if enabled is None:
            enabled = self.enabled_mounts
        return MountRegistry.from_settings(self.mounts, enabled)


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "on", "yes")
    return bool(value)


def load_settings(raw: Mapping[str, Any] | None, *, root: Path | None = None) -> TravelPaceSettings:
    raw = raw or {}
    mounts = raw.get("mounts")
    enabled = raw.get("enabled_mounts")
    settings_file = raw.get("settings_file")
    return TravelPaceSettings(
        use_metric=_as_bool(raw.get("use_metric"), DEFAULTS["use_metric"]),
        show_effects=_as_bool(raw.get("show_effects"), DEFAULTS["show_effects"]),
        forced_march=_as_bool(raw.get("forced_march"), DEFAULTS["forced_march"]),
        enabled_mounts={str(k): bool(v) for k, v in enabled.items()} if isinstance(enabled, Mapping) else {},
        mounts=dict(mounts) if isinstance(mounts, Mapping) else {},
        settings_file=_resolve_path(root or Path.cwd(), str(settings_file)) if settings_file else None,
    )


class SettingsStore:
    """Key-value settings seeded from ``config.yml`` and optionally saved as YAML."""

    def __init__(self, settings: TravelPaceSettings) -> None:
        self.settings = settings
        self._values: Dict[str, Any] = {
            "use_metric": settings.use_metric,
            "show_effects": settings.show_effects,
            "forced_march": settings.forced_march,
            "enabled_mounts": dict(settings.enabled_mounts),
            "preview": {},
        }
        self._load()

    @property
    def path(self) -> Path | None:
        return self.settings.settings_file

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as handle:
            stored = yaml.safe_load(handle) or {}
        if not isinstance(stored, Mapping):
            logger.warning("ignoring malformed settings file %s", self.path)
            return
        for key, value in stored.items():
            if key in DEFAULTS:
                self._values[key] = self._validate(key, value)

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(self._values, handle, sort_keys=True)

    def _validate(self, key: str, value: Any) -> Any:
        if key in _BOOLEAN_KEYS:
            return _as_bool(value, DEFAULTS[key])
        if key in _MAPPING_KEYS:
            if not isinstance(value, Mapping):
                raise BadInputError(f"Setting '{key}' must be a mapping.")
            if key == "enabled_mounts":
                return {str(k): bool(v) for k, v in value.items()}
            return dict(value)
        raise BadInputError(f"Unknown setting '{key}'.")

    def get(self, key: str) -> Any:
        if key not in DEFAULTS:
            raise BadInputError(f"Unknown setting '{key}'.")
        return self._values[key]

    def set(self, key: str, value: Any) -> None:
        self._values[key] = self._validate(key, value)
        logger.info("travel pace setting %s updated", key)
        self._save()

    def update(self, values: Mapping[str, Any]) -> None:
        validated = {key: self._validate(key, value) for key, value in values.items()}
        self._values.update(validated)
        self._save()

    def as_dict(self) -> Dict[str, Any]:
        return {key: self._values[key] for key in DEFAULTS}

    def mount_registry(self) -> MountRegistry:
        return self.settings.mount_registry(self._values["enabled_mounts"])


__all__ = ["DEFAULTS", "TravelPaceSettings", "SettingsStore", "load_settings"]
