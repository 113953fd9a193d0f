"""
Intensity buckets for heatmap coloring.

Splits the range of daily counts [0, max] into five tiers. The boundary
math is shared by every palette; a palette only supplies the colors.
"""

import math
from dataclasses import dataclass

LABELS = ["No activity", "Low", "Medium", "High", "Very High"]

PALETTES = {
    "light": ["#f1f5f9", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981"],
    "dark": ["#151b23", "#033a16", "#196c2e", "#2ea043", "#56d364"],
}

QUARTILES = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class IntensityRange:
    """A tier of daily counts and the color used to draw it."""

    lower_bound: int
    upper_bound: int
    color_token: str
    label: str

    def contains(self, count: int) -> bool:
        return self.lower_bound <= count <= self.upper_bound

    def to_dict(self) -> dict:
        return {
            "from": self.lower_bound,
            "to": self.upper_bound,
            "color": self.color_token,
            "name": self.label,
        }


def bucket_boundaries(max_count: int) -> list[tuple[int, int]]:
    """
    Compute the (lower, upper) bounds of the five intensity tiers.

    Tier 0 is always (0, 0). The other four end at the ceiling quartiles of
    max_count and at max_count itself, never below 1. Each tier starts one
    past the previous tier's end, clamped so it never starts after it ends.

    Args:
        max_count: Highest daily count in the grid

    Returns:
        Five (lower, upper) tuples in ascending order

    Raises:
        ValueError: If max_count is negative
    """
    if max_count < 0:
        raise ValueError(f"max_count must be >= 0, got {max_count}")

    uppers = [math.ceil(max_count * q) for q in QUARTILES] + [max_count]

    boundaries = [(0, 0)]
    previous_upper = 0
    for upper in uppers:
        upper = max(upper, 1)
        lower = min(previous_upper + 1, upper)
        boundaries.append((lower, upper))
        previous_upper = upper

    return boundaries


def color_ranges(max_count: int, theme: str = "light") -> list[IntensityRange]:
    """
    Build the colored intensity ranges for a heatmap legend.

    Args:
        max_count: Highest daily count in the grid
        theme: Palette name ("light" or "dark")

    Returns:
        Five IntensityRange objects, lowest tier first
    """
    if theme not in PALETTES:
        raise ValueError(
            f"Unknown theme '{theme}'. Expected one of: {', '.join(PALETTES)}"
        )

    colors = PALETTES[theme]
    return [
        IntensityRange(lower, upper, colors[level], LABELS[level])
        for level, (lower, upper) in enumerate(bucket_boundaries(max_count))
    ]


def level_for_count(count: int, ranges: list[IntensityRange]) -> int:
    """
    Find the tier index for a daily count.

    The first matching range wins. Counts above the last range fall into
    the top tier.
    """
    for level, intensity_range in enumerate(ranges):
        if intensity_range.contains(count):
            return level
    return len(ranges) - 1 if count > 0 else 0
