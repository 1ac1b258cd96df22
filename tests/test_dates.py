"""Tests for calendar helpers."""

from datetime import date, timedelta

from app.utils import dates


class TestRanges:
    def test_week_runs_monday_to_friday(self):
        wednesday = date(2026, 1, 7)
        assert dates.start_of_week(wednesday) == date(2026, 1, 5)
        assert dates.end_of_week(wednesday) == date(2026, 1, 9)

    def test_sunday_belongs_to_preceding_week(self):
        assert dates.start_of_week(date(2026, 1, 11)) == date(2026, 1, 5)

    def test_weekend_closes_on_friday_just_passed(self):
        saturday, sunday = date(2026, 1, 10), date(2026, 1, 11)
        assert dates.end_of_week(saturday) == date(2026, 1, 9)
        assert dates.end_of_week(sunday) == date(2026, 1, 9)

    def test_month_bounds(self):
        assert dates.start_of_month(date(2024, 2, 15)) == date(2024, 2, 1)
        assert dates.end_of_month(date(2024, 2, 15)) == date(2024, 2, 29)
        assert dates.end_of_month(date(2026, 12, 3)) == date(2026, 12, 31)

    def test_within_range_is_inclusive(self):
        start, end = date(2026, 1, 1), date(2026, 1, 31)
        assert dates.is_within_range(start, start, end)
        assert dates.is_within_range(end, start, end)
        assert not dates.is_within_range(date(2026, 2, 1), start, end)


class TestRelativeToToday:
    def test_future_and_past(self):
        today = dates.today()
        assert dates.is_future(today + timedelta(days=1))
        assert not dates.is_future(today)
        assert dates.is_past(today - timedelta(days=1))
        assert not dates.is_past(today)


def test_format_display_date():
    assert dates.format_display_date(date(2026, 1, 5)) == "Jan 05, 2026"
