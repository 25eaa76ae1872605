"""
One poll cycle per concern: open pull requests and the commit chart.
"""

import logging
from datetime import datetime, timedelta, timezone

from ulanzi_monitor.colors import get_color_mapper
from ulanzi_monitor.commit_parser import parse_commit_timestamps
from ulanzi_monitor.config import Config
from ulanzi_monitor.github_client import GitHubClient
from ulanzi_monitor.history_calculator import DayBucketSeries, aggregate
from ulanzi_monitor.layout import get_layout
from ulanzi_monitor.pagination import fetch_all
from ulanzi_monitor.render import (
    build_commit_payload,
    build_goal_payload,
    build_pr_payload,
    render_commit_chart,
    render_progress,
)
from ulanzi_monitor.schemas import UlanziPayload
from ulanzi_monitor.ulanzi_client import UlanziClient

logger = logging.getLogger(__name__)

PR_APP = "github"
COMMITS_APP = "commits"
GOAL_APP = "goal"

# GitHub search never returns more than 1000 results for one query.
MAX_COMMITS = 1000
COMMITS_PER_PAGE = 100


def fetch_pr_count(github: GitHubClient) -> int:
    """Number of open pull requests authored by the user."""
    logger.info("Fetching PRs...")
    result = github.search_open_prs()
    logger.info("Found %d open PRs", result.total_count)
    for pr in result.items:
        logger.debug("  - %s", pr.title)
    return result.total_count


def poll_prs(github: GitHubClient, display: UlanziClient) -> int:
    """Fetch the open PR count and push it to the display."""
    total = fetch_pr_count(github)
    display.push(PR_APP, build_pr_payload(total))
    return total


def fetch_commit_series(
    github: GitHubClient, window_days: int, now: datetime | None = None
) -> DayBucketSeries:
    """
    Fetch the user's commits for the trailing window and bucket them per day.

    Buckets are 24 hour slices back from now, so the oldest one starts at
    now - window_days days. The search therefore starts on that calendar
    date, which may also return commits from earlier that same day. Those
    fall outside every bucket but are still counted in the total.

    Args:
        github: Search client
        window_days: Number of days in the chart
        now: Reference instant, defaults to the current UTC time
    """
    if window_days <= 0:
        raise ValueError(f"window_days must be positive, got {window_days}")
    if now is None:
        now = datetime.now(timezone.utc)

    since = (now - timedelta(days=window_days)).date()

    def fetch_page(page: int, per_page: int) -> list:
        return github.search_commits(since, page=page, per_page=per_page).items

    items = fetch_all(fetch_page, max_items=MAX_COMMITS, per_page=COMMITS_PER_PAGE)
    series = aggregate(parse_commit_timestamps(items), now, window_days)
    logger.info(
        "Counted %d commits, %d within the last %d days",
        series.total,
        series.in_window,
        window_days,
    )
    return series


def build_commit_payloads(
    series: DayBucketSeries, config: Config
) -> dict[str, UlanziPayload]:
    """Payloads for the commit chart app and, when a goal is set, the goal app."""
    layout = get_layout(config.layout_strategy)
    mapper = get_color_mapper(config.color_policy)

    payloads = {
        COMMITS_APP: build_commit_payload(render_commit_chart(series, layout, mapper)),
    }
    if config.daily_commit_goal > 0:
        goal = config.daily_commit_goal
        payloads[GOAL_APP] = build_goal_payload(
            series, goal, render_progress(series, goal)
        )
    return payloads


def poll_commits(
    github: GitHubClient,
    display: UlanziClient,
    config: Config,
    now: datetime | None = None,
) -> DayBucketSeries:
    """Fetch the commit series and push the chart (and goal) apps."""
    series = fetch_commit_series(github, config.commit_window_days, now=now)
    for app_name, payload in build_commit_payloads(series, config).items():
        display.push(app_name, payload)
    return series
