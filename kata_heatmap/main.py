"""
kata-heatmap: Codewars activity as a calendar heatmap

Entry point for the command-line application.
"""

import argparse
import logging

from kata_heatmap import config
from kata_heatmap.calendar_grid import PADDING_POLICIES, build_calendar_grid
from kata_heatmap.challenge_parser import parse_completed_challenges
from kata_heatmap.challenges_list import DEFAULT_PAGE_SIZE, PAGE_SIZES, paginate_challenges
from kata_heatmap.cli import (
    display_calendar,
    display_challenges,
    display_legend,
    display_year_navigation,
    display_year_stats,
)
from kata_heatmap.codewars_client import CodewarsClient, CodewarsClientError
from kata_heatmap.intensity import PALETTES, color_ranges
from kata_heatmap.stats_calculator import calculate_year_stats
from kata_heatmap.year_indexer import available_years


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kata-heatmap",
        description="Show a Codewars user's completed challenges as a yearly heatmap.",
    )
    parser.add_argument("--username", help="Codewars username (default: CODEWARS_USERNAME)")
    parser.add_argument("--year", type=int, help="Year to show (default: most recent)")
    parser.add_argument("--theme", choices=sorted(PALETTES), default=None)
    parser.add_argument("--padding", choices=PADDING_POLICIES, default=None)
    parser.add_argument("--challenges", action="store_true", help="List completed challenges instead of the heatmap")
    parser.add_argument("--page", type=int, default=1, help="Page of the challenge list, starting at 1")
    parser.add_argument("--page-size", type=int, choices=PAGE_SIZES, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped events and fetched pages")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    username = args.username or config.CODEWARS_USERNAME
    theme = args.theme or config.HEATMAP_THEME
    padding_policy = args.padding or config.HEATMAP_PADDING_POLICY

    try:
        config.validate_config(require_username=not args.username)
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    if args.page < 1:
        print("\nError: --page must be 1 or greater")
        return 1

    print("kata-heatmap - Your Codewars year at a glance!")
    print("-" * 50)

    try:
        client = CodewarsClient(username, base_url=config.CODEWARS_API_URL)
        print(f"\nFetching completed challenges for {username}...\n")
        challenges = client.get_all_completed_challenges()
    except (CodewarsClientError, ValueError) as e:
        print(f"\nError: {e}")
        return 1

    events = parse_completed_challenges(challenges)

    if args.challenges:
        display_challenges(
            paginate_challenges(events, page=args.page - 1, page_size=args.page_size)
        )
        return 0

    years = available_years(events)

    if not years:
        print("No completed challenges found.")
        return 0

    year = args.year if args.year is not None else years[0]

    grid = build_calendar_grid(year, events, padding_policy=padding_policy)
    stats = calculate_year_stats(year, events)
    ranges = color_ranges(grid.max_count, theme=theme)

    display_year_navigation(years, year)
    display_year_stats(stats)
    display_calendar(grid, ranges)
    display_legend(ranges)

    if grid.skipped:
        print(f"({grid.skipped} challenge(s) skipped: unreadable completion date)")

    return 0


if __name__ == "__main__":
    exit(main())
