"""
Calculate the longest completion streak within a year.
"""

from datetime import date

from kata_heatmap.events import keys_for_year


def calculate_longest_streak(year: int, events) -> dict:
    """
    Find the longest run of consecutive active days in a year.

    Args:
        year: Calendar year to inspect
        events: Sequence of CompletionEvent (any order)

    Returns:
        Dictionary with streak information:
        - longest_streak: Length of the longest run of consecutive days
        - longest_streak_dates: The days in that run (YYYY-MM-DD, ascending)

        When two runs share the maximum length the earliest one is returned.
    """
    keys, _ = keys_for_year(year, events)

    # Fixed-width ISO keys sort chronologically as strings
    active_dates = sorted(set(keys))

    if not active_dates:
        return {"longest_streak": 0, "longest_streak_dates": []}

    best_dates = [active_dates[0]]
    current_dates = [active_dates[0]]

    for i in range(1, len(active_dates)):
        previous_day = date.fromisoformat(active_dates[i - 1])
        current_day = date.fromisoformat(active_dates[i])

        if (current_day - previous_day).days == 1:
            current_dates.append(active_dates[i])
        else:
            current_dates = [active_dates[i]]

        # Only a strictly longer run replaces the best one
        if len(current_dates) > len(best_dates):
            best_dates = list(current_dates)

    return {
        "longest_streak": len(best_dates),
        "longest_streak_dates": best_dates,
    }
