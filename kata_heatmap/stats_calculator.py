"""
Calculate yearly completion statistics.
"""

from dataclasses import dataclass, field

from kata_heatmap.events import ensure_event_set, keys_for_year
from kata_heatmap.streak_calculator import calculate_longest_streak


@dataclass(frozen=True)
class YearStats:
    """Summary numbers for one year of activity."""

    year: int
    total: int = 0
    active_days: int = 0
    longest_streak: int = 0
    longest_streak_dates: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "total": self.total,
            "active_days": self.active_days,
            "longest_streak": self.longest_streak,
            "longest_streak_dates": list(self.longest_streak_dates),
        }


def calculate_year_stats(year: int, events, include_streak: bool = True) -> YearStats:
    """
    Calculate completion statistics for a year.

    Args:
        year: Calendar year to summarize
        events: Sequence of CompletionEvent (any order)
        include_streak: Whether to compute the longest streak. When False the
            streak fields are left at zero.

    Returns:
        YearStats with:
        - total: Challenges completed in the year
        - active_days: Distinct days with at least one completion
        - longest_streak: Longest run of consecutive active days
        - longest_streak_dates: Days in that run
    """
    events = ensure_event_set(events)
    keys, _ = keys_for_year(year, events)

    total = len(keys)
    active_days = len(set(keys))

    if not include_streak or not keys:
        return YearStats(year=year, total=total, active_days=active_days)

    streak_info = calculate_longest_streak(year, events)

    return YearStats(
        year=year,
        total=total,
        active_days=active_days,
        longest_streak=streak_info["longest_streak"],
        longest_streak_dates=tuple(streak_info["longest_streak_dates"]),
    )
