"""
Work out which years have heatmap data.
"""

from datetime import date

from kata_heatmap.events import ensure_event_set, parse_completed_at

YEAR_MODE_DISTINCT = "distinct"
YEAR_MODE_SPAN = "span"


def available_years(events, mode: str = YEAR_MODE_DISTINCT, today: date | None = None) -> list[int]:
    """
    List the years that can be shown, most recent first.

    Args:
        events: Sequence of CompletionEvent
        mode: "distinct" lists only years containing at least one completion.
            "span" lists every year from the first completion through the
            current year.
        today: Override today's date for testing (used by "span" only)

    Returns:
        Years in descending order, or an empty list when there are no events
    """
    if mode not in (YEAR_MODE_DISTINCT, YEAR_MODE_SPAN):
        raise ValueError(f"Unknown year mode '{mode}'")

    years = set()
    for event in ensure_event_set(events):
        event_date = parse_completed_at(getattr(event, "completed_at", None))
        if event_date is not None:
            years.add(event_date.year)

    if not years:
        return []

    if mode == YEAR_MODE_DISTINCT:
        return sorted(years, reverse=True)

    if today is None:
        today = date.today()

    last_year = max(today.year, max(years))
    return list(range(last_year, min(years) - 1, -1))
