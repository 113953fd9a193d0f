"""
FastAPI web application for kata-heatmap.

Provides REST API endpoints for the yearly heatmap, stats and legend.
"""

from datetime import date
from pathlib import Path as FilePath

from fastapi import FastAPI, HTTPException, Path, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from kata_heatmap.cache import EventSetCache
from kata_heatmap.calendar_grid import MONTHS, build_calendar_grid
from kata_heatmap.challenge_parser import parse_completed_challenges
from kata_heatmap.challenges_list import DEFAULT_PAGE_SIZE, paginate_challenges
from kata_heatmap.cli import format_stats_summary, get_adjacent_years
from kata_heatmap.codewars_client import (
    CodewarsClient,
    CodewarsClientError,
    UserNotFoundError,
)
from kata_heatmap.config import (
    CODEWARS_API_URL,
    CODEWARS_USERNAME,
    HEATMAP_PADDING_POLICY,
    HEATMAP_THEME,
    validate_config,
)
from kata_heatmap.intensity import PALETTES, color_ranges, level_for_count
from kata_heatmap.stats_calculator import calculate_year_stats
from kata_heatmap.year_indexer import available_years

app = FastAPI(
    title="kata-heatmap",
    description="Codewars activity as a calendar heatmap",
    version="0.1.0",
)

templates = Jinja2Templates(directory=FilePath(__file__).parent / "templates")

event_cache = EventSetCache()


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def _fetch_events(username: str | None):
    """
    Fetch and parse the completed challenges for a user.

    Falls back to the configured username when none is given. Results are
    kept in event_cache so year navigation does not refetch every page.

    Returns:
        Tuple of (username, events)

    Raises:
        HTTPException: on configuration or Codewars API errors
    """
    if not username:
        try:
            validate_config()
        except ValueError as e:
            raise HTTPException(status_code=500, detail=f"Configuration error: {e}")
        username = CODEWARS_USERNAME

    cached = event_cache.get(username)
    if cached is not None:
        return username, cached

    try:
        client = CodewarsClient(username, base_url=CODEWARS_API_URL)
        challenges = client.get_all_completed_challenges()
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CodewarsClientError as e:
        raise HTTPException(status_code=502, detail=str(e))

    events = event_cache.put(username, parse_completed_challenges(challenges))
    return username, events


@app.get("/api/years")
def get_years(username: str | None = None):
    """
    Get the years that have completed challenges.

    Returns:
        JSON with the username and years, most recent first
    """
    username, events = _fetch_events(username)
    return {"username": username, "years": available_years(events)}


@app.get("/api/heatmap/{year}")
def get_heatmap(
    year: int = Path(..., ge=1, le=9999),
    username: str | None = None,
    theme: str = Query(HEATMAP_THEME),
):
    """
    Get the calendar grid for a year.

    Returns:
        JSON with 12 month rows of day cells plus the intensity ranges
    """
    if theme not in PALETTES:
        raise HTTPException(status_code=422, detail=f"Unknown theme '{theme}'")

    username, events = _fetch_events(username)
    grid = build_calendar_grid(year, events, padding_policy=HEATMAP_PADDING_POLICY)

    data = grid.to_dict()
    data["username"] = username
    data["ranges"] = [r.to_dict() for r in color_ranges(grid.max_count, theme=theme)]
    return data


@app.get("/api/stats/{year}")
def get_stats(year: int = Path(..., ge=1, le=9999), username: str | None = None):
    """
    Get summary statistics for a year.

    Returns:
        JSON with total, active days and the longest streak
    """
    username, events = _fetch_events(username)
    data = calculate_year_stats(year, events).to_dict()
    data["username"] = username
    return data


@app.get("/api/challenges")
def get_challenges(
    page: int = Query(0, ge=0),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    username: str | None = None,
):
    """
    Get one page of completed challenges, newest first.

    Returns:
        JSON with the page items, page counts and the latest completion
    """
    username, events = _fetch_events(username)
    data = paginate_challenges(events, page=page, page_size=page_size).to_dict()
    data["username"] = username
    return data


@app.get("/api/intensity")
def get_intensity(
    max: int = Query(..., ge=0, description="Highest daily count"),
    theme: str = Query(HEATMAP_THEME),
):
    """
    Get the intensity ranges for a maximum daily count.

    Returns:
        JSON list of five ranges, lowest first
    """
    if theme not in PALETTES:
        raise HTTPException(status_code=422, detail=f"Unknown theme '{theme}'")
    return [r.to_dict() for r in color_ranges(max, theme=theme)]


@app.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    year: int | None = Query(None, ge=1, le=9999),
    username: str | None = None,
):
    """Render the heatmap page."""
    username, events = _fetch_events(username)
    years = available_years(events)

    if year is None:
        year = years[0] if years else date.today().year

    grid = build_calendar_grid(year, events, padding_policy=HEATMAP_PADDING_POLICY)
    stats = calculate_year_stats(year, events)
    ranges = color_ranges(grid.max_count, theme=HEATMAP_THEME)
    previous_year, next_year = get_adjacent_years(years, year)

    rows = []
    for month_index, row in enumerate(grid.months):
        cells = []
        for cell in row:
            data = cell.to_dict()
            if not cell.is_padding:
                data["color"] = ranges[level_for_count(cell.count, ranges)].color_token
            cells.append(data)
        rows.append({"name": MONTHS[month_index], "cells": cells})

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "username": username,
            "year": year,
            "previous_year": previous_year,
            "next_year": next_year,
            "summary": format_stats_summary(stats),
            "streak_dates": set(stats.longest_streak_dates),
            "rows": rows,
            "ranges": ranges,
        },
    )
