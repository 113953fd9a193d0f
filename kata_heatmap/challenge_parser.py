"""
Parse completed challenges from Codewars API responses.
"""

from collections.abc import Mapping

from kata_heatmap.events import CompletionEvent


def parse_completed_challenges(challenges: list[dict]) -> list[CompletionEvent]:
    """
    Parse completion events from Codewars completed-challenge records.

    Args:
        challenges: List of challenge dictionaries from the Codewars API

    Returns:
        List of CompletionEvent. Records that are not objects or have no
        completedAt are dropped. The timestamp itself is not validated here;
        the aggregation functions skip values they cannot parse.
    """
    events = []

    for challenge in challenges:
        if not isinstance(challenge, Mapping):
            continue

        completed_at = challenge.get("completedAt")
        if not completed_at:
            continue

        languages = challenge.get("completedLanguages") or []

        events.append(
            CompletionEvent(
                id=str(challenge.get("id", "")),
                name=challenge.get("name", "") or "",
                slug=challenge.get("slug", "") or "",
                completed_at=str(completed_at),
                # Ordered set: keep first occurrence
                languages=tuple(dict.fromkeys(languages)),
            )
        )

    return events
