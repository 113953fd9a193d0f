"""
Tests for the calendar grid builder.
"""

from datetime import date

import pytest

from kata_heatmap.calendar_grid import (
    MAX_DAYS,
    build_calendar_grid,
    days_in_month,
)
from kata_heatmap.events import CompletionEvent, MalformedEventSetError


def _event(completed_at, event_id="kata"):
    return CompletionEvent(id=event_id, name="Kata", slug="kata", completed_at=completed_at)


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_february_leap_year(self):
        assert days_in_month(2024, 1) == 29

    def test_february_non_leap_year(self):
        assert days_in_month(2023, 1) == 28

    def test_century_rules(self):
        assert days_in_month(1900, 1) == 28
        assert days_in_month(2000, 1) == 29

    def test_thirty_and_thirty_one_day_months(self):
        assert days_in_month(2024, 0) == 31
        assert days_in_month(2024, 3) == 30
        assert days_in_month(2024, 11) == 31


class TestBuildCalendarGrid:
    """Tests for build_calendar_grid."""

    @pytest.mark.parametrize("year", [1999, 2023, 2024, 2100])
    def test_shape_is_twelve_by_thirty_one(self, year):
        """Every year lays out as 12 rows of 31 cells."""
        grid = build_calendar_grid(year, [])

        assert len(grid.months) == 12
        for row in grid.months:
            assert len(row) == MAX_DAYS

    def test_empty_input_is_all_zero_or_padding(self):
        grid = build_calendar_grid(2024, [])

        for cell in grid.cells():
            assert cell.count == 0
        assert grid.total == 0
        assert grid.max_count == 0
        assert grid.skipped == 0

    def test_leap_february_padding(self):
        """February 2024 has 29 real cells and 2 padding cells."""
        february = build_calendar_grid(2024, []).months[1]

        real = [c for c in february if not c.is_padding]
        padding = [c for c in february if c.is_padding]

        assert len(real) == 29
        assert len(padding) == 2
        assert real[-1].calendar_date == date(2024, 2, 29)

    def test_non_leap_february_padding(self):
        """February 2023 has 28 real cells and 3 padding cells."""
        february = build_calendar_grid(2023, []).months[1]

        assert len([c for c in february if not c.is_padding]) == 28
        assert len([c for c in february if c.is_padding]) == 3

    def test_padding_cells_are_marked(self):
        april = build_calendar_grid(2024, []).months[3]
        last = april[30]

        assert last.is_padding
        assert last.calendar_date is None
        assert last.count == 0
        assert last.day_of_month == 31
        assert last.month_index == 3

    def test_cells_carry_day_and_month(self):
        grid = build_calendar_grid(2024, [])
        cell = grid.months[6][14]

        assert cell.calendar_date == date(2024, 7, 15)
        assert cell.day_of_month == 15
        assert cell.month_index == 6

    def test_same_day_events_are_summed(self):
        """Two completions on 2024-03-05 give that cell a count of 2."""
        events = [
            _event("2024-03-05T08:00:00Z", "a"),
            _event("2024-03-05T20:00:00Z", "b"),
        ]

        grid = build_calendar_grid(2024, events)

        assert grid.months[2][4].count == 2
        assert grid.total == 2
        assert grid.max_count == 2

    def test_other_years_are_ignored(self):
        events = [
            _event("2023-06-01T00:00:00Z", "a"),
            _event("2024-06-01T00:00:00Z", "b"),
            _event("2025-06-01T00:00:00Z", "c"),
        ]

        grid = build_calendar_grid(2024, events)

        assert grid.total == 1
        assert grid.months[5][0].count == 1

    def test_year_with_no_data_is_empty_grid(self):
        events = [_event("2020-01-01T00:00:00Z")]
        grid = build_calendar_grid(1990, events)

        assert grid.total == 0
        assert len(grid.months) == 12

    def test_invalid_timestamps_are_skipped(self):
        events = [
            _event("2024-01-01T00:00:00Z", "a"),
            _event("yesterday", "b"),
            _event("2024-13-01T00:00:00Z", "c"),
        ]

        grid = build_calendar_grid(2024, events)

        assert grid.total == 1
        assert grid.skipped == 2

    def test_out_of_range_instant_is_skipped(self):
        """An offset that overflows the UTC date range is skipped, not fatal."""
        events = [
            _event("2024-05-01T00:00:00Z", "a"),
            _event("9999-12-31T23:00:00-05:00", "b"),
        ]

        grid = build_calendar_grid(2024, events)

        assert grid.total == 1
        assert grid.skipped == 1

    def test_day_is_taken_in_utc(self):
        """A completion late on Dec 31 west of UTC belongs to the next year."""
        events = [_event("2023-12-31T21:00:00-05:00")]

        assert build_calendar_grid(2023, events).total == 0
        assert build_calendar_grid(2024, events).months[0][0].count == 1

    def test_order_independent_and_idempotent(self):
        events = [
            _event("2024-01-03T00:00:00Z", "a"),
            _event("2024-01-01T00:00:00Z", "b"),
            _event("2024-01-02T00:00:00Z", "c"),
        ]

        first = build_calendar_grid(2024, events)
        second = build_calendar_grid(2024, events)
        reversed_order = build_calendar_grid(2024, list(reversed(events)))

        assert first == second
        assert first == reversed_order

    def test_exact_month_length_policy(self):
        grid = build_calendar_grid(2024, [], padding_policy="exactMonthLength")

        assert [len(row) for row in grid.months] == [
            31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31
        ]
        assert not any(cell.is_padding for cell in grid.cells())
        assert grid.padding_policy == "exactMonthLength"

    def test_unknown_padding_policy(self):
        with pytest.raises(ValueError, match="padding policy"):
            build_calendar_grid(2024, [], padding_policy="weekly")

    def test_malformed_event_set_raises(self):
        with pytest.raises(MalformedEventSetError):
            build_calendar_grid(2024, None)

    def test_to_dict(self):
        grid = build_calendar_grid(2024, [_event("2024-02-29T12:00:00Z")])
        data = grid.to_dict()

        assert data["year"] == 2024
        assert data["total"] == 1
        assert data["max_count"] == 1
        assert data["months"][1]["name"] == "Feb"
        assert data["months"][1]["days"][28] == {
            "date": "2024-02-29",
            "count": 1,
            "day": 29,
            "month": 1,
            "padding": False,
        }
        assert data["months"][1]["days"][30]["padding"] is True
        assert data["months"][1]["days"][30]["date"] is None
