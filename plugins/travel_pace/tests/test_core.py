import pytest

from plugins.travel_pace.core import (
    BadInputError,
    DirectSpeed,
    InvalidUnitError,
    TimeBreakdown,
    TravelRequest,
    UnknownMountError,
    calculate_distance,
    calculate_time,
    calculate_travel,
    coerce_speed_modifier,
    convert_distance,
    foot_speed_label,
    format_distance,
    format_time,
    list_paces,
    parse_direct_speed,
)
from plugins.travel_pace.core.speed import format_vehicle_speed, format_walking_speed
from plugins.travel_pace.core.units import round_half_up


def test_convert_distance_uses_tabletop_miles_by_default():
    assert convert_distance(1, "mi", "ft") == pytest.approx(6000)
    assert convert_distance(1, "km", "ft") == pytest.approx(3000)
    assert convert_distance(2, "mi", "km") == pytest.approx(4)
    assert convert_distance(1000, "ft", "m") == pytest.approx(304.8)


def test_convert_distance_standard_units():
    assert convert_distance(1, "mi", "ft", use_tabletop=False) == pytest.approx(5280)
    assert convert_distance(1, "km", "ft", use_tabletop=False) == pytest.approx(3280.84, rel=1e-5)


def test_convert_distance_same_unit_is_identity():
    assert convert_distance("12.5", "mi", "mi") == 12.5


def test_convert_distance_rejects_unknown_unit_and_bad_values():
    with pytest.raises(InvalidUnitError):
        convert_distance(1, "yd", "ft")
    with pytest.raises(BadInputError):
        convert_distance("far", "mi", "ft")
    with pytest.raises(BadInputError):
        convert_distance(True, "mi", "ft")


def test_round_half_up_matches_tabletop_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_format_distance_keeps_one_decimal():
    assert format_distance(24, "mi") == "24.0 mi"
    assert format_distance(12.345, "km") == "12.3 km"


def test_parse_direct_speed():
    assert parse_direct_speed("8 mi/hour") == DirectSpeed(8.0, "mi")
    assert parse_direct_speed("2.5km/hour") == DirectSpeed(2.5, "km")
    assert parse_direct_speed("8 mph") is None
    assert str(DirectSpeed(8.0, "mi")) == "8 mi/hour"


def test_coerce_speed_modifier():
    assert coerce_speed_modifier(None) == 1.0
    assert coerce_speed_modifier("2") == 2.0
    assert coerce_speed_modifier("8 km/hour") == DirectSpeed(8.0, "km")
    with pytest.raises(BadInputError):
        coerce_speed_modifier("fast/hour")
    with pytest.raises(BadInputError):
        coerce_speed_modifier(0)


def test_speed_labels():
    assert foot_speed_label("normal", False) == "300 ft/min"
    assert foot_speed_label("slow", True) == "67 m/min"
    assert format_vehicle_speed(DirectSpeed(8.0, "mi"), 1.33, False) == "10.6 mi/hour"
    assert format_vehicle_speed(DirectSpeed(8.0, "mi"), 1.0, True) == "12.9 km/hour"
    assert format_walking_speed("60 ft", 1.0, False) == "600 ft/min"
    assert format_walking_speed("30 ft", 1.0, True) == "90 m/min"
    assert format_walking_speed("fast", 1.0, False) == "fast"


def test_calculate_time_on_foot():
    time = calculate_time(12 * 6000, "normal")
    assert (time.days, time.hours, time.minutes) == (0, 4, 0)
    assert time.total_minutes == pytest.approx(240)

    assert format_time(calculate_time(24 * 6000, "normal")) == "1 day"
    assert format_time(calculate_time(30 * 6000, "normal")) == "1 day, 2 hours"
    assert format_time(calculate_time(30 * 6000, "fast")) == "1 day"
    assert format_time(calculate_time(9 * 6000, "slow")) == "4 hours"


def test_calculate_time_scales_with_mount_speed():
    assert format_time(calculate_time(24 * 6000, "normal", 2.0)) == "4 hours"


def test_calculate_time_with_direct_speed():
    time = calculate_time(8 * 5280, "normal", "8 mi/hour")
    assert (time.days, time.hours, time.minutes) == (0, 1, 0)
    assert format_time(calculate_time(8 * 5280, "fast", DirectSpeed(8.0, "mi"))) == "45 minutes"
    assert format_time(calculate_time(64 * 5280, "normal", DirectSpeed(8.0, "mi"))) == "1 day"


def test_calculate_time_rejects_bad_input():
    with pytest.raises(BadInputError):
        calculate_time(-1, "normal")
    with pytest.raises(BadInputError):
        calculate_time(100, "sprint")


def test_calculate_distance():
    day = calculate_distance(480, "normal")
    assert day.miles == pytest.approx(24)
    assert day.feet == pytest.approx(144000)
    assert day.kilometers == pytest.approx(48)
    assert day.meters == pytest.approx(43891.2)

    assert calculate_distance(480, "fast").miles == pytest.approx(30)
    assert calculate_distance(480, "normal", 2.0).miles == pytest.approx(48)

    flight = calculate_distance(120, "normal", DirectSpeed(8.0, "mi"))
    assert flight.miles == pytest.approx(16)
    assert flight.feet == pytest.approx(16 * 5280)


def test_format_time_cascades():
    assert format_time(TimeBreakdown(0, 0, 0, 0)) == "0 minutes"
    assert format_time(TimeBreakdown(150, 0, 2, 30)) == "2 hours, 30 minutes"
    assert format_time(TimeBreakdown(0, 1, 2, 10)) == "1 day, 2 hours"
    assert format_time(TimeBreakdown(0, 1, 2, 20)) == "1 day, 2 hours, 20 minutes"
    assert format_time(TimeBreakdown(0, 1, 0, 40)) == "1 day"
    assert format_time(TimeBreakdown(0, 0, 0, 59.6)) == "1 hour"
    assert format_time(TimeBreakdown(0, 0, 10, 0)) == "1 day, 2 hours"
    assert format_time(TimeBreakdown(0, 0, 15.5, 0)) == "2 days"
    assert format_time(TimeBreakdown(0, 0, 23.5, 0)) == "1 day"


def test_format_time_calendar_units():
    assert format_time(TimeBreakdown(0, 10, 0, 0)) == "1 week, 3 days"
    assert format_time(TimeBreakdown(0, 400, 0, 0)) == "1 year, 1 month, 5 days"
    assert format_time(TimeBreakdown(0, 7301, 0, 0)) == "2 decades, 1 day"


def test_list_paces():
    paces = {item["id"]: item for item in list_paces()}
    assert set(paces) == {"normal", "fast", "slow"}
    assert paces["fast"]["multiplier"] == 1.33
    assert paces["slow"]["miles_per_day"] == 18
    assert list_paces(use_metric=True)[0]["speed"] == "100 m/min"


def test_calculate_travel_distance_mode():
    result = calculate_travel(TravelRequest(mode="distance", distance=24))
    assert result["mode"] == "distance"
    assert result["input"]["unit"] == "mi"
    assert result["output"]["time_formatted"] == "1 day"
    assert result["pace_effect"] == "No special effect."
    assert result["speed_modifier"] == 1.0
    assert result["mount_id"] is None

    metric = calculate_travel(TravelRequest(mode="distance", distance=72), use_metric=True)
    assert metric["input"]["unit"] == "km"
    assert metric["output"]["time_formatted"] == "1 day, 4 hours"


def test_calculate_travel_time_mode():
    result = calculate_travel(TravelRequest(mode="time", days=1))
    assert result["output"]["distance"] == pytest.approx(24)
    assert result["output"]["distance_formatted"] == "24.0 mi"

    metric = calculate_travel(TravelRequest(mode="time", hours=8), use_metric=True)
    assert metric["output"]["distance_formatted"] == "48.0 km"

    explicit = calculate_travel(TravelRequest(mode="time", total_minutes=240, pace="fast"))
    assert explicit["output"]["distance_formatted"] == "15.0 mi"


def test_calculate_travel_rejects_bad_requests():
    for request in (
        TravelRequest(mode="sideways", distance=1),
        TravelRequest(mode="distance"),
        TravelRequest(mode="distance", distance=0),
        TravelRequest(mode="time"),
        TravelRequest(mode="time", hours=-1, minutes=90),
        TravelRequest(mode="distance", distance=5, pace="crawl"),
    ):
        with pytest.raises(BadInputError):
            calculate_travel(request)


def test_calculate_travel_unknown_mount():
    with pytest.raises(UnknownMountError) as excinfo:
        calculate_travel(TravelRequest(mode="distance", distance=5, mount_id="dragon"))
    assert excinfo.value.mount_id == "dragon"


def test_kilometre_vehicles_and_metre_walkers():
    time = calculate_time(3280.84 * 8, "normal", DirectSpeed(8.0, "km"))
    assert (time.days, time.hours, time.minutes) == (0, 1, 0)

    boat = calculate_distance(60, "normal", DirectSpeed(8.0, "km"))
    assert boat.kilometers == pytest.approx(8)
    assert boat.meters == pytest.approx(8000)
    assert boat.feet == pytest.approx(26246.72)
    assert boat.miles == pytest.approx(4.970968)

    assert format_vehicle_speed(DirectSpeed(10.0, "km"), 1.0, False) == "6.2 mi/hour"
    assert format_vehicle_speed(DirectSpeed(10.0, "km"), 1.0, True) == "10.0 km/hour"
    assert format_walking_speed("18 m", 1.0, False) == "590 ft/min"
    assert format_walking_speed("18 m", 1.0, True) == "180 m/min"
