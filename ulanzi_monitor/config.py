"""
Configuration management for ulanzi-monitor.

Loads GitHub credentials and display settings from environment variables.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ulanzi_monitor.errors import ConfigError
from ulanzi_monitor.layout import CanvasSpec, PolicyTableLayout

LAYOUT_STRATEGIES = ("policy", "grid")
COLOR_POLICIES = ("lightness", "quantile")

PLACEHOLDERS = {
    "GITHUB_TOKEN": "your_token_here",
    "GITHUB_USERNAME": "your_username_here",
    "ULANZI_HOST": "your_ulanzi_host_here",
}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Settings for one monitor process."""

    github_token: str
    github_username: str
    ulanzi_host: str
    poll_interval_minutes: int = 5
    commit_poll_interval_minutes: int = 5
    commit_window_days: int = 7
    layout_strategy: str = "policy"
    color_policy: str = "lightness"
    daily_commit_goal: int = 0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """
        Build a Config from the process environment.

        Args:
            env_file: Optional path to a .env file. Defaults to the .env
                found by python-dotenv's search.

        Raises:
            ConfigError: If a numeric variable cannot be parsed
        """
        load_dotenv(env_file)

        poll_interval = _int_env("POLL_INTERVAL_MINUTES", 5)
        return cls(
            github_token=os.getenv("GITHUB_TOKEN", ""),
            github_username=os.getenv("GITHUB_USERNAME", ""),
            ulanzi_host=os.getenv("ULANZI_HOST", ""),
            poll_interval_minutes=poll_interval,
            commit_poll_interval_minutes=_int_env(
                "COMMIT_POLL_INTERVAL_MINUTES", poll_interval
            ),
            commit_window_days=_int_env("COMMIT_WINDOW_DAYS", 7),
            layout_strategy=os.getenv("LAYOUT_STRATEGY", "policy").lower(),
            color_policy=os.getenv("COLOR_POLICY", "lightness").lower(),
            daily_commit_goal=_int_env("DAILY_COMMIT_GOAL", 0),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Validate that required configuration is present and sane."""
        missing = []
        for name, value in (
            ("GITHUB_TOKEN", self.github_token),
            ("GITHUB_USERNAME", self.github_username),
            ("ULANZI_HOST", self.ulanzi_host),
        ):
            if not value or value == PLACEHOLDERS[name]:
                missing.append(name)

        if missing:
            raise ConfigError(
                f"Missing required configuration: {', '.join(missing)}\n"
                "Please copy .env.example to .env and fill in your values.\n"
                "Get a GitHub token at: https://github.com/settings/tokens"
            )

        problems = []
        if self.poll_interval_minutes <= 0:
            problems.append("POLL_INTERVAL_MINUTES must be positive")
        if self.commit_poll_interval_minutes <= 0:
            problems.append("COMMIT_POLL_INTERVAL_MINUTES must be positive")
        if self.commit_window_days <= 0:
            problems.append("COMMIT_WINDOW_DAYS must be positive")
        elif self.layout_strategy == "policy" and not PolicyTableLayout().fits(
            self.commit_window_days, CanvasSpec()
        ):
            problems.append(
                f"COMMIT_WINDOW_DAYS={self.commit_window_days} does not fit the "
                "display with the policy layout"
            )
        if self.daily_commit_goal < 0:
            problems.append("DAILY_COMMIT_GOAL must not be negative")
        if self.layout_strategy not in LAYOUT_STRATEGIES:
            problems.append(
                f"LAYOUT_STRATEGY must be one of {', '.join(LAYOUT_STRATEGIES)}"
            )
        if self.color_policy not in COLOR_POLICIES:
            problems.append(f"COLOR_POLICY must be one of {', '.join(COLOR_POLICIES)}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            problems.append(f"LOG_LEVEL {self.log_level!r} is not a logging level")

        if problems:
            raise ConfigError("Invalid configuration:\n" + "\n".join(problems))
