"""
CLI display functions for kata-heatmap.
"""

from kata_heatmap.calendar_grid import MAX_DAYS, MONTHS, CalendarGrid
from kata_heatmap.challenges_list import ChallengePage, format_completed_on, kata_url
from kata_heatmap.intensity import IntensityRange, level_for_count
from kata_heatmap.stats_calculator import YearStats

# One character per intensity level, lowest first
LEVEL_CHARS = ["·", "░", "▒", "▓", "█"]
PADDING_CHAR = " "


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_stats_summary(stats: YearStats) -> list[str]:
    """
    Build the summary lines for a year.

    Args:
        stats: YearStats from calculate_year_stats()

    Returns:
        Lines such as "12 challenges completed", "5 active days" and
        "3-day longest streak"
    """
    return [
        f"{_plural(stats.total, 'challenge')} completed",
        f"{_plural(stats.active_days, 'active day')}",
        f"{stats.longest_streak}-day longest streak",
    ]


def display_year_stats(stats: YearStats) -> None:
    """Display the yearly summary to the console."""
    print(f"📊 {stats.year} Stats:")
    for line in format_stats_summary(stats):
        print(f"   {line}")

    if stats.longest_streak > 1:
        first, last = stats.longest_streak_dates[0], stats.longest_streak_dates[-1]
        print(f"   Longest streak: {first} → {last}")
    print()


def display_calendar(grid: CalendarGrid, ranges: list[IntensityRange]) -> None:
    """
    Display a text heatmap with one row per month.

    Args:
        grid: CalendarGrid from build_calendar_grid()
        ranges: Intensity ranges from color_ranges()
    """
    print(f"Activity in {grid.year}:")
    print("     " + _day_header())

    for month_index, row in enumerate(grid.months):
        line = ""
        for cell in row:
            if cell.is_padding:
                line += PADDING_CHAR
            else:
                line += LEVEL_CHARS[level_for_count(cell.count, ranges)]
        print(f"{MONTHS[month_index]}  {line}")

    print()


def _day_header() -> str:
    """Column ruler marking days 1, 5, 10, ..., 30."""
    ruler = [" "] * MAX_DAYS
    for day in [1] + list(range(5, MAX_DAYS + 1, 5)):
        label = str(day)
        for offset, char in enumerate(label):
            if day - 1 + offset < MAX_DAYS:
                ruler[day - 1 + offset] = char
    return "".join(ruler).rstrip()


def display_legend(ranges: list[IntensityRange]) -> None:
    """Display the intensity legend."""
    print("Legend:")
    for level, intensity_range in enumerate(ranges):
        if intensity_range.lower_bound == intensity_range.upper_bound:
            span = str(intensity_range.lower_bound)
        else:
            span = f"{intensity_range.lower_bound}-{intensity_range.upper_bound}"
        print(f"   {LEVEL_CHARS[level]}  {intensity_range.label:<12} {span}")
    print()


def get_adjacent_years(years: list[int], year: int) -> tuple[int | None, int | None]:
    """
    Find the previous (older) and next (newer) year around the selected one.

    Args:
        years: Available years, most recent first
        year: Currently selected year

    Returns:
        Tuple of (previous_year, next_year); None where there is no neighbor
    """
    older = [y for y in years if y < year]
    newer = [y for y in years if y > year]
    return (max(older) if older else None, min(newer) if newer else None)


def display_year_navigation(years: list[int], year: int) -> None:
    """Display which years are available around the selected year."""
    previous_year, next_year = get_adjacent_years(years, year)
    left = f"← {previous_year}" if previous_year is not None else "     "
    right = f"{next_year} →" if next_year is not None else ""
    print(f"{left}   [{year}]   {right}".rstrip())
    print()


def display_challenges(challenge_page: ChallengePage) -> None:
    """
    Display one page of completed challenges, newest first.

    Args:
        challenge_page: ChallengePage from paginate_challenges()
    """
    header = f"🏆 Completed Challenges ({challenge_page.total_items} total)"
    if challenge_page.latest_completed_at:
        header += f" - last seen on {format_completed_on(challenge_page.latest_completed_at)}"
    print(header)

    if not challenge_page.items:
        if challenge_page.total_items:
            print(f"   Page {challenge_page.page + 1} is past the last page ({challenge_page.total_pages})")
        else:
            print("   No completed challenges found")
        print()
        return

    for event in challenge_page.items:
        print(f"   {event.name}")
        line = f"      {format_completed_on(event.completed_at)}"
        if event.languages:
            line += f"  [{', '.join(event.languages)}]"
        print(line)
        print(f"      {kata_url(event.slug)}")

    if challenge_page.total_pages > 1:
        print(f"   Page {challenge_page.page + 1} of {challenge_page.total_pages}")
    print()
