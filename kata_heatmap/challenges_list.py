"""
Page through completed challenges, newest first.
"""

from dataclasses import dataclass, field
from datetime import datetime
from math import ceil
from urllib.parse import quote

from kata_heatmap.events import CompletionEvent, ensure_event_set, parse_completed_instant

KATA_URL = "https://www.codewars.com/kata/{slug}"
PAGE_SIZES = (10, 20, 50)
DEFAULT_PAGE_SIZE = 20


def kata_url(slug: str) -> str:
    """Link to the kata on codewars.com."""
    return KATA_URL.format(slug=quote(slug or "", safe=""))


def format_completed_on(completed_at: str) -> str:
    """Format a timestamp as e.g. "Mar 5, 2024", or return it unchanged if unreadable."""
    instant = parse_completed_instant(completed_at)
    if instant is None:
        return str(completed_at)
    return f"{instant:%b} {instant.day}, {instant.year}"


@dataclass(frozen=True)
class ChallengePage:
    """One page of the completed-challenges list."""

    items: tuple[CompletionEvent, ...] = field(default_factory=tuple)
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0
    total_items: int = 0
    latest_completed_at: str | None = None

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    def to_dict(self) -> dict:
        return {
            "items": [
                {
                    "id": event.id,
                    "name": event.name,
                    "slug": event.slug,
                    "completed_at": event.completed_at,
                    "languages": list(event.languages),
                    "url": kata_url(event.slug),
                }
                for event in self.items
            ],
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "latest_completed_at": self.latest_completed_at,
        }


def sort_newest_first(events) -> list[CompletionEvent]:
    """
    Order events by completion instant, most recent first.

    Events with unreadable timestamps keep their relative order and go last.
    """
    dated: list[tuple[datetime, CompletionEvent]] = []
    undated = []

    for event in ensure_event_set(events):
        instant = parse_completed_instant(getattr(event, "completed_at", None))
        if instant is None:
            undated.append(event)
        else:
            dated.append((instant, event))

    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [event for _, event in dated] + undated


def paginate_challenges(events, page: int = 0, page_size: int = DEFAULT_PAGE_SIZE) -> ChallengePage:
    """
    Slice the completed challenges into one display page.

    Args:
        events: Sequence of CompletionEvent (any order)
        page: Zero-based page number
        page_size: Items per page

    Returns:
        ChallengePage; a page past the end has no items but still reports
        the totals

    Raises:
        ValueError: If page is negative or page_size is below 1
    """
    if page < 0:
        raise ValueError(f"page must be >= 0, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    ordered = sort_newest_first(events)
    total_items = len(ordered)
    start = page * page_size

    latest = None
    if ordered and parse_completed_instant(ordered[0].completed_at) is not None:
        latest = ordered[0].completed_at

    return ChallengePage(
        items=tuple(ordered[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_pages=ceil(total_items / page_size),
        total_items=total_items,
        latest_completed_at=latest,
    )
