import pytest

from plugins.travel_pace.core import BadInputError, JourneyTime, format_journey, journey_preview, journey_time


def test_journey_time_per_pace():
    assert journey_time(30, 3, 3, "normal").total_hours == pytest.approx(3)
    slow = journey_time(30, 3, 3, "slow")
    assert (slow.hours, slow.minutes) == (4, 30)
    fast = journey_time(30, 3, 3, "fast")
    assert format_journey(fast) == "2 hours and 15 minutes"


def test_journey_ratio_and_days():
    assert journey_time(30, 3, 3, "normal", 2).total_hours == pytest.approx(6)
    result = journey_time(30, 24, 0, "normal", include_days=True)
    assert result.days == 1
    assert result.to_dict()["formatted"] == "8 hours and 0 minutes (1 day)"


def test_journey_metric_inputs():
    result = journey_time(9, 4.5, 4.5, "normal", use_metric=True)
    assert format_journey(result) == "3 hours and 0 minutes"


def test_format_journey_plurals():
    assert format_journey(JourneyTime("normal", 1.0, 1, 1)) == "1 hour and 1 minute"
    assert format_journey(JourneyTime("normal", 49.0, 49, 0, days=6)) == "49 hours and 0 minutes (6 days)"


def test_journey_preview_covers_every_pace():
    preview = journey_preview(30, 3, 3)
    assert preview == {
        "normal": "3 hours and 0 minutes",
        "fast": "2 hours and 15 minutes",
        "slow": "4 hours and 30 minutes",
    }


def test_journey_rejects_bad_input():
    with pytest.raises(BadInputError):
        journey_time(0, 3, 3, "normal")
    with pytest.raises(BadInputError):
        journey_time(30, -1, 3, "normal")
    with pytest.raises(BadInputError):
        journey_time(30, 3, 3, "normal", 0)
    with pytest.raises(BadInputError):
        journey_time(30, 3, 3, "gallop")
