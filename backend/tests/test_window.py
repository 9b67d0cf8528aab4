from datetime import datetime, timedelta, timezone

import pytest

from vitrine.analytics.events import ensure_utc
from vitrine.analytics.window import TimeWindow, filter_window, validate_days
from vitrine.core.exceptions import InvalidWindowError


class TestValidateDays:
    @pytest.mark.parametrize("days", [1, 7, 30, 365])
    def test_accepts_positive_integers(self, days):
        assert validate_days(days) == days

    @pytest.mark.parametrize("days", [0, -1, -30])
    def test_rejects_non_positive(self, days):
        with pytest.raises(InvalidWindowError, match="at least 1"):
            validate_days(days)

    @pytest.mark.parametrize("days", [1.5, "30", None, True])
    def test_rejects_non_integers(self, days):
        with pytest.raises(InvalidWindowError, match="integer"):
            validate_days(days)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_days(0)


class TestTimeWindow:
    def test_lookback(self, now):
        window = TimeWindow.lookback(7, now=now)
        assert window.end == now
        assert window.start == now - timedelta(days=7)
        assert not window.is_empty

    def test_lookback_validates_days(self, now):
        with pytest.raises(InvalidWindowError):
            TimeWindow.lookback(0, now=now)

    def test_naive_bounds_are_utc(self):
        window = TimeWindow(start=datetime(2026, 1, 1), end=datetime(2026, 1, 2))
        assert window.start.tzinfo == timezone.utc
        assert window.end.tzinfo == timezone.utc

    def test_inverted_window_is_empty(self, now):
        window = TimeWindow(start=now, end=now - timedelta(seconds=1))
        assert window.is_empty
        assert not window.contains(now)

    def test_contains_is_inclusive(self, now):
        window = TimeWindow(start=now - timedelta(days=1), end=now)
        assert window.contains(now)
        assert window.contains(now - timedelta(days=1))
        assert not window.contains(now + timedelta(microseconds=1))


def test_ensure_utc_converts_offsets():
    local = datetime(2026, 10, 18, 9, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert ensure_utc(local) == datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    assert ensure_utc(local).tzinfo == timezone.utc


def test_filter_window(make_event, now):
    events = [make_event(days_ago=d) for d in (0, 2, 5, 31)]
    selected = filter_window(events, TimeWindow.lookback(5, now=now))
    assert len(selected) == 3


def test_filter_window_inverted(make_event, now):
    events = [make_event(days_ago=1)]
    assert filter_window(events, TimeWindow(start=now, end=now - timedelta(days=2))) == []
