"""
ulanzi-monitor: GitHub activity on a Ulanzi pixel clock

Entry point for the polling daemon.
"""

import argparse
import logging
import threading
from functools import partial

from ulanzi_monitor.config import Config
from ulanzi_monitor.errors import ConfigError
from ulanzi_monitor.github_client import GitHubClient
from ulanzi_monitor.pollers import poll_commits, poll_prs
from ulanzi_monitor.scheduler import Scheduler
from ulanzi_monitor.ulanzi_client import UlanziClient

logger = logging.getLogger(__name__)


def _clients(config: Config) -> tuple[GitHubClient, UlanziClient]:
    # Sessions are never shared between task threads.
    return (
        GitHubClient(config.github_token, config.github_username),
        UlanziClient(config.ulanzi_host),
    )


def build_scheduler(config: Config) -> Scheduler:
    """Wire the PR and commit polls to their own timers and their own clients."""
    scheduler = Scheduler()
    scheduler.add(
        "prs",
        partial(poll_prs, *_clients(config)),
        config.poll_interval_minutes * 60,
    )
    scheduler.add(
        "commits",
        partial(poll_commits, *_clients(config), config),
        config.commit_poll_interval_minutes * 60,
    )
    return scheduler


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ulanzi-monitor",
        description="Show GitHub PRs and commits on a Ulanzi pixel clock.",
    )
    parser.add_argument(
        "--once", action="store_true", help="poll each source once and exit"
    )
    parser.add_argument("--env-file", help="path to a .env file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = Config.from_env(args.env_file)
        config.validate()
    except ConfigError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scheduler = build_scheduler(config)

    if args.once:
        return 0 if scheduler.run_once() else 1

    scheduler.start()
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        scheduler.stop(timeout=5)

    return 0


if __name__ == "__main__":
    exit(main())
