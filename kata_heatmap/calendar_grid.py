"""
Calendar grid builder for the yearly activity heatmap.

Lays one year out as 12 month rows of day cells, each carrying the number
of challenges completed that day.
"""

import calendar
from dataclasses import dataclass
from datetime import date

from kata_heatmap.events import keys_for_year

MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

MAX_DAYS = 31

PADDING_FIXED = "fixed31"
PADDING_EXACT = "exactMonthLength"
PADDING_POLICIES = (PADDING_FIXED, PADDING_EXACT)


@dataclass(frozen=True)
class CalendarCell:
    """One day slot in the grid. calendar_date is None for padding cells."""

    calendar_date: date | None
    count: int
    day_of_month: int
    month_index: int

    @property
    def is_padding(self) -> bool:
        return self.calendar_date is None

    def to_dict(self) -> dict:
        return {
            "date": self.calendar_date.isoformat() if self.calendar_date else None,
            "count": self.count,
            "day": self.day_of_month,
            "month": self.month_index,
            "padding": self.is_padding,
        }


@dataclass(frozen=True)
class CalendarGrid:
    """Per-day completion counts for one year, one row per month."""

    year: int
    months: tuple[tuple[CalendarCell, ...], ...]
    skipped: int = 0
    padding_policy: str = PADDING_FIXED

    def cells(self):
        """Iterate over every cell, month by month."""
        for row in self.months:
            yield from row

    @property
    def total(self) -> int:
        return sum(cell.count for cell in self.cells())

    @property
    def max_count(self) -> int:
        return max((cell.count for cell in self.cells()), default=0)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "padding_policy": self.padding_policy,
            "max_count": self.max_count,
            "total": self.total,
            "skipped": self.skipped,
            "months": [
                {"name": MONTHS[index], "days": [cell.to_dict() for cell in row]}
                for index, row in enumerate(self.months)
            ],
        }


def days_in_month(year: int, month_index: int) -> int:
    """Number of days in a month, with month_index counted from 0."""
    return calendar.monthrange(year, month_index + 1)[1]


def build_calendar_grid(
    year: int, events, padding_policy: str = PADDING_FIXED
) -> CalendarGrid:
    """
    Build the heatmap grid of daily completion counts for a year.

    Args:
        year: Calendar year to lay out
        events: Sequence of CompletionEvent (any order)
        padding_policy: "fixed31" pads every month to 31 cells,
            "exactMonthLength" emits only the real days of each month

    Returns:
        CalendarGrid with 12 month rows. Events whose timestamp cannot be
        parsed are left out and counted in grid.skipped.

    Raises:
        ValueError: If padding_policy is unknown
        MalformedEventSetError: If events is not a sequence
    """
    if padding_policy not in PADDING_POLICIES:
        raise ValueError(
            f"Unknown padding policy '{padding_policy}'. "
            f"Expected one of: {', '.join(PADDING_POLICIES)}"
        )

    keys, skipped = keys_for_year(year, events)

    counts_by_date: dict[str, int] = {}
    for key in keys:
        counts_by_date[key] = counts_by_date.get(key, 0) + 1

    months = []
    for month_index in range(12):
        month_length = days_in_month(year, month_index)
        width = MAX_DAYS if padding_policy == PADDING_FIXED else month_length

        row = []
        for day in range(1, width + 1):
            if day > month_length:
                row.append(CalendarCell(None, 0, day, month_index))
                continue
            cell_date = date(year, month_index + 1, day)
            count = counts_by_date.get(cell_date.isoformat(), 0)
            row.append(CalendarCell(cell_date, count, day, month_index))

        months.append(tuple(row))

    return CalendarGrid(
        year=year,
        months=tuple(months),
        skipped=skipped,
        padding_policy=padding_policy,
    )
