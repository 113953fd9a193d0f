"""
Configuration management for kata-heatmap.

Loads the Codewars username and heatmap options from environment variables.
"""

import os
from dotenv import load_dotenv

from kata_heatmap.calendar_grid import PADDING_POLICIES
from kata_heatmap.intensity import PALETTES

# Load .env file from project root
load_dotenv()

CODEWARS_USERNAME = os.getenv("CODEWARS_USERNAME")
CODEWARS_API_URL = os.getenv("CODEWARS_API_URL", "https://www.codewars.com/api/v1")
HEATMAP_PADDING_POLICY = os.getenv("HEATMAP_PADDING_POLICY", "fixed31")
HEATMAP_THEME = os.getenv("HEATMAP_THEME", "light")


def validate_config(require_username: bool = True):
    """
    Validate that required configuration is present.

    Args:
        require_username: Whether CODEWARS_USERNAME must be set. The CLI
            passes False when a username was given on the command line.
    """
    problems = []

    if require_username and (
        not CODEWARS_USERNAME or CODEWARS_USERNAME == "your_username_here"
    ):
        problems.append("CODEWARS_USERNAME")

    if HEATMAP_PADDING_POLICY not in PADDING_POLICIES:
        problems.append(
            f"HEATMAP_PADDING_POLICY (must be one of {', '.join(PADDING_POLICIES)})"
        )

    if HEATMAP_THEME not in PALETTES:
        problems.append(f"HEATMAP_THEME (must be one of {', '.join(PALETTES)})")

    if problems:
        raise ValueError(
            f"Missing or invalid configuration: {', '.join(problems)}\n"
            "Please copy .env.example to .env and fill in your values."
        )
