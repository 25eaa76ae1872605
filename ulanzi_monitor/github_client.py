"""
GitHub API client for fetching pull request and commit activity.
"""

from datetime import date

import requests

from ulanzi_monitor.errors import DecodeError, TransportError
from ulanzi_monitor.schemas import (
    CommitSearchResponse,
    PullRequestSearchResponse,
    decode,
)


class GitHubClientError(TransportError):
    """Raised when the GitHub API answers with an error status."""

    pass


class GitHubClient:
    """Client for the GitHub search API."""

    BASE_URL = "https://api.github.com"

    def __init__(self, token: str, username: str, timeout: float = 15.0):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token
            username: GitHub username whose activity is searched
            timeout: Per-request timeout in seconds
        """
        self.token = token
        self.username = username
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "ulanzi-pr-monitor",
            }
        )

    def _get(self, path: str, params: dict):
        url = f"{self.BASE_URL}{path}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.status_code == 401:
            raise GitHubClientError(
                "Authentication failed. Check your GITHUB_TOKEN is valid."
            )
        elif response.status_code == 403:
            remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
            raise GitHubClientError(
                f"API rate limit exceeded or access forbidden. "
                f"Remaining requests: {remaining}"
            )
        elif response.status_code == 422:
            raise GitHubClientError(f"Invalid search query: {response.text}")
        elif not response.ok:
            raise GitHubClientError(
                f"GitHub API error: {response.status_code} - {response.text}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"GitHub returned invalid JSON for {path}") from e

    def search_open_prs(self) -> PullRequestSearchResponse:
        """
        Search open pull requests authored by the configured user.

        Returns:
            Validated search response with total_count and items

        Raises:
            TransportError: If the request fails or GitHub returns an error
            DecodeError: If the response does not match the expected shape
        """
        params = {"q": f"author:{self.username} type:pr state:open"}
        data = self._get("/search/issues", params)
        return decode(PullRequestSearchResponse, data, "GitHub issue search")

    def search_commits(
        self, since: date, page: int = 1, per_page: int = 100
    ) -> CommitSearchResponse:
        """
        Fetch one page of commits authored by the user since a date.

        Args:
            since: Earliest committer date to include
            page: 1-based page number
            per_page: Page size (max 100)

        Returns:
            Validated search response for the requested page

        Raises:
            TransportError: If the request fails or GitHub returns an error
            DecodeError: If the response does not match the expected shape
        """
        params = {
            "q": f"author:{self.username} committer-date:>={since.isoformat()}",
            "sort": "committer-date",
            "order": "desc",
            "per_page": min(per_page, 100),
            "page": page,
        }
        data = self._get("/search/commits", params)
        return decode(CommitSearchResponse, data, "GitHub commit search")
