from pathlib import Path

import pytest
import yaml

from plugins.travel_pace.core import (
    BadInputError,
    DirectSpeed,
    Mount,
    MountRegistry,
    SettingsStore,
    TravelRequest,
    UnknownMountError,
    calculate_travel,
    journey_card,
    load_settings,
    pace_speed_label,
    preview,
)

MOUNTS = {
    "riding_horse": {"name": "Riding Horse", "type": "npc", "movement": {"walk": 60}},
    "airship": {"name": "Airship", "type": "vehicle", "movement": {"fly": 8, "units": "mi"}},
    "raft": {"name": "Raft", "type": "vehicle", "movement": {"units": "mi"}},
    "broken": "not a mapping",
}


def _registry(enabled=None) -> MountRegistry:
    return MountRegistry.from_settings(MOUNTS, enabled)


def test_mount_speed_modifiers():
    registry = _registry()
    assert "broken" not in registry
    assert len(registry) == 3
    assert registry.get("riding_horse").speed_modifier() == 2.0
    assert registry.get("airship").speed_modifier() == DirectSpeed(8.0, "mi")
    assert Mount.from_mapping("cart", {"type": "vehicle"}).speed_modifier() == 1.0


def test_mount_speed_text():
    registry = _registry()
    assert registry.get("riding_horse").speed_text(False) == "60 ft"
    assert registry.get("riding_horse").speed_text(True) == "18 m"
    assert registry.get("airship").speed_text(False) == "8 mi/hour"
    assert registry.get("airship").speed_text(True) == "12.9 km/hour"
    assert registry.get("raft").speed_text(False) == "Unknown"


def test_registry_respects_enabled_mounts():
    registry = _registry({"airship": True, "riding_horse": False})
    assert [item["id"] for item in registry.available(False)] == ["airship"]
    with pytest.raises(UnknownMountError):
        registry.get("riding_horse")


def test_pace_speed_label_for_mounts():
    registry = _registry()
    assert pace_speed_label("normal") == "300 ft/min"
    assert pace_speed_label("normal", mounts=registry, mount_id="riding_horse") == "600 ft/min"
    assert pace_speed_label("fast", mounts=registry, mount_id="airship") == "10.6 mi/hour"


def test_calculate_travel_with_mounts():
    registry = _registry()
    horse = calculate_travel(TravelRequest(mode="time", days=1, mount_id="riding_horse"), mounts=registry)
    assert horse["output"]["distance_formatted"] == "48.0 mi"
    assert horse["speed_modifier"] == 2.0

    airship = calculate_travel(TravelRequest(mode="distance", distance=64, mount_id="airship"), mounts=registry)
    assert airship["output"]["time_formatted"] == "1 day"
    assert airship["speed_modifier"] == "8 mi/hour"


def test_preview_and_card():
    assert preview(TravelRequest(mode="distance")) == ""
    assert preview(TravelRequest(mode="distance", distance=12)) == "4 hours"
    assert preview(TravelRequest(mode="time", hours=4)) == "12.0 mi"

    registry = _registry()
    result = calculate_travel(TravelRequest(mode="distance", distance=12, pace="fast"), mounts=registry)
    card = journey_card(result, show_effects=True, forced_march=True, mounts=registry)
    assert card["narrative"] == "Travelling 12.0 mi at a fast pace takes 3 hours, 12 minutes."
    assert card["effect"].startswith("-5 penalty")
    assert card["forced_march"]
    assert card["vehicle"] is None

    result = calculate_travel(TravelRequest(mode="time", days=1, mount_id="riding_horse"), mounts=registry)
    card = journey_card(result, show_effects=True, mounts=registry)
    assert card["narrative"] == "Travelling for 1 day at a normal pace covers 48.0 mi."
    assert card["effect"] == ""
    assert card["forced_march"] == ""
    assert card["vehicle"] == {"name": "Riding Horse", "speed": "600 ft/min"}


def test_load_settings_defaults():
    settings = load_settings(None)
    assert settings.use_metric is False
    assert settings.show_effects is True
    assert settings.settings_file is None
    assert len(settings.mount_registry()) == 0


def test_settings_store_persists_to_yaml(tmp_path: Path):
    raw = {"use_metric": "no", "mounts": MOUNTS, "settings_file": "state/settings.yml"}
    store = SettingsStore(load_settings(raw, root=tmp_path))
    assert store.get("use_metric") is False

    store.update({"use_metric": True, "enabled_mounts": {"airship": True}})
    saved = yaml.safe_load((tmp_path / "state" / "settings.yml").read_text(encoding="utf-8"))
    assert saved["use_metric"] is True
    assert [item["id"] for item in store.mount_registry().available(True)] == ["airship"]

    reloaded = SettingsStore(load_settings(raw, root=tmp_path))
    assert reloaded.get("use_metric") is True
    assert reloaded.as_dict()["enabled_mounts"] == {"airship": True}


def test_settings_store_rejects_unknown_keys():
    store = SettingsStore(load_settings({}))
    with pytest.raises(BadInputError):
        store.get("volume")
    with pytest.raises(BadInputError):
        store.set("volume", 11)
    with pytest.raises(BadInputError):
        store.set("enabled_mounts", ["airship"])


def test_card_narrative_from_total_minutes():
    result = calculate_travel(TravelRequest(mode="time", total_minutes=500))
    assert result["input"]["time"] == {"days": 1, "hours": 0, "minutes": 20}
    card = journey_card(calculate_travel(TravelRequest(mode="time", total_minutes=480)))
    assert card["narrative"] == "Travelling for 1 day at a normal pace covers 24.0 mi."


def test_mount_without_walk_speed_uses_base_speed():
    mount = Mount.from_mapping("wolf", {"name": "Wolf", "movement": {"swim": 20}})
    assert mount.speed_text(False) == "30 ft"
    assert mount.speed_text(True) == "9 m"
    assert mount.pace_speed_label("normal", False) == "300 ft/min"
    assert mount.speed_modifier() == 1.0
