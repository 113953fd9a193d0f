"""
Codewars API client for fetching completed challenges.
"""

import logging
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class CodewarsClientError(Exception):
    """Base exception for Codewars client errors."""

    pass


class UserNotFoundError(CodewarsClientError):
    """Raised when Codewars has no user with the requested name."""

    pass


class CodewarsClient:
    """Client for interacting with the Codewars API."""

    BASE_URL = "https://www.codewars.com/api/v1"

    def __init__(self, username: str, base_url: str | None = None):
        """
        Initialize the Codewars client.

        Args:
            username: Codewars username to fetch completions for
            base_url: Override the API root (defaults to BASE_URL)
        """
        if not username or not isinstance(username, str):
            raise ValueError("Username is required")

        self.username = username
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_completed_challenges_page(self, page: int = 0) -> dict:
        """
        Fetch one page of completed challenges.

        Args:
            page: Zero-based page number

        Returns:
            Page dictionary with data, totalPages and totalItems

        Raises:
            CodewarsClientError: If the API request fails
            UserNotFoundError: If the user does not exist
        """
        user = quote(self.username, safe="")
        url = f"{self.base_url}/users/{user}/code-challenges/completed"

        try:
            response = self.session.get(url, params={"page": page})
        except requests.ConnectionError as e:
            raise CodewarsClientError(
                "Network error. Please check your connection."
            ) from e

        if response.status_code == 404:
            raise UserNotFoundError(f'User "{self.username}" not found')
        elif not response.ok:
            raise CodewarsClientError(
                f"Failed to fetch page {page}: {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            # requests.JSONDecodeError subclasses ValueError
            raise CodewarsClientError("Invalid response format") from e

        if not isinstance(data, dict) or not isinstance(data.get("data"), list):
            raise CodewarsClientError("Invalid response format")

        logger.debug(
            "Fetched page %d of completed challenges for %s (%d items)",
            page,
            self.username,
            len(data["data"]),
        )
        return data

    def get_all_completed_challenges(self) -> list[dict]:
        """
        Fetch every page of completed challenges and merge them.

        Duplicate ids are dropped (first occurrence wins) and the result is
        sorted by completedAt, oldest first.

        Returns:
            List of challenge dictionaries from the Codewars API

        Raises:
            CodewarsClientError: If any page request fails
        """
        first_page = self.get_completed_challenges_page(0)
        pages = [first_page]

        total_pages = first_page.get("totalPages") or 1
        for page in range(1, int(total_pages)):
            pages.append(self.get_completed_challenges_page(page))

        merged = {}
        for page_data in pages:
            for challenge in page_data["data"]:
                challenge_id = challenge.get("id") if isinstance(challenge, dict) else None
                if challenge_id is None:
                    continue
                merged.setdefault(challenge_id, challenge)

        return sorted(merged.values(), key=lambda c: str(c.get("completedAt") or ""))
