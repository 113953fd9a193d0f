"""
Completion events and calendar-day keying.

Every aggregation in the engine derives a day key from an event through
this module, so the heatmap grid, the year stats and the streak always
agree on which day (and which year) an event belongs to.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)


class MalformedEventSetError(TypeError):
    """Raised when the event set handed to the engine is not a sequence."""

    pass


@dataclass(frozen=True)
class CompletionEvent:
    """A single completed challenge."""

    id: str
    name: str
    slug: str
    completed_at: str  # ISO-8601 instant, kept verbatim
    languages: tuple[str, ...] = field(default_factory=tuple)


def parse_completed_instant(completed_at: str) -> datetime | None:
    """
    Convert an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are treated as UTC. A trailing "Z" is accepted.

    Args:
        completed_at: Timestamp string, e.g. "2024-03-05T22:15:00.000Z"

    Returns:
        The instant in UTC, or None if the value cannot be parsed or its
        UTC equivalent falls outside the representable date range
    """
    if not isinstance(completed_at, str) or not completed_at.strip():
        return None

    value = completed_at.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        instant = datetime.fromisoformat(value)
    except ValueError:
        return None

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    try:
        return instant.astimezone(timezone.utc)
    except OverflowError:
        return None


def parse_completed_at(completed_at: str) -> date | None:
    """Convert an ISO-8601 timestamp into its UTC calendar date, or None."""
    instant = parse_completed_instant(completed_at)
    if instant is None:
        return None
    return instant.date()


def day_key(event: CompletionEvent) -> str | None:
    """Return the YYYY-MM-DD key for an event, or None if its timestamp is invalid."""
    event_date = parse_completed_at(getattr(event, "completed_at", None))
    if event_date is None:
        return None
    return event_date.isoformat()


def ensure_event_set(events) -> list[CompletionEvent]:
    """
    Check that events is an enumerable sequence and return it as a list.

    Strings, bytes and mappings iterate but are not event sets, so they are
    rejected along with None and other non-iterables.

    Raises:
        MalformedEventSetError: If events is not a sequence of events
    """
    if events is None or isinstance(events, (str, bytes, Mapping)):
        raise MalformedEventSetError(
            f"Expected a sequence of completion events, got {type(events).__name__}"
        )
    if not isinstance(events, Iterable):
        raise MalformedEventSetError(
            f"Expected a sequence of completion events, got {type(events).__name__}"
        )
    return list(events)


def keys_for_year(year: int, events) -> tuple[list[str], int]:
    """
    Derive the day key of every event that falls in the given year.

    The result keeps one key per event (duplicates included), so its length
    is the number of events in that year.

    Args:
        year: Target calendar year
        events: Sequence of CompletionEvent

    Returns:
        Tuple of (day keys for events in year, number of events skipped
        because their timestamp could not be parsed)
    """
    keys = []
    skipped = 0
    prefix = f"{year:04d}-"

    for event in ensure_event_set(events):
        key = day_key(event)
        if key is None:
            skipped += 1
            logger.debug(
                "Skipping event %r with invalid timestamp %r",
                getattr(event, "id", None),
                getattr(event, "completed_at", None),
            )
            continue
        if key.startswith(prefix):
            keys.append(key)

    return keys, skipped
