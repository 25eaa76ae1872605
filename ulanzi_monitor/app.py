"""
FastAPI preview service for ulanzi-monitor.

Shows what would be pushed to the clock without pushing it.
"""

from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException

from ulanzi_monitor.config import Config
from ulanzi_monitor.errors import ConfigError, DecodeError, TransportError
from ulanzi_monitor.github_client import GitHubClient
from ulanzi_monitor.history_calculator import calculate_history
from ulanzi_monitor.pollers import build_commit_payloads, fetch_commit_series, fetch_pr_count
from ulanzi_monitor.render import build_pr_payload

app = FastAPI(
    title="ulanzi-monitor",
    description="Preview GitHub activity payloads for a Ulanzi pixel clock",
    version="0.1.0",
)


def load_config() -> Config:
    config = Config.from_env()
    config.validate()
    return config


def _client_and_config() -> tuple[GitHubClient, Config]:
    try:
        config = load_config()
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")
    return GitHubClient(config.github_token, config.github_username), config


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/prs")
def get_prs():
    """
    Get the open pull request count and its display payload.

    Returns:
        JSON with total and payload
    """
    client, _ = _client_and_config()

    try:
        total = fetch_pr_count(client)
    except (TransportError, DecodeError) as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {"total": total, "payload": build_pr_payload(total).to_json()}


@app.get("/api/commits")
def get_commits():
    """
    Get the commit series for the configured window and its payloads.

    Returns:
        JSON with history (days, period, max_count, total) and payloads
        keyed by app name
    """
    client, config = _client_and_config()
    now = datetime.now(timezone.utc)

    try:
        series = fetch_commit_series(client, config.commit_window_days, now=now)
    except (TransportError, DecodeError) as e:
        raise HTTPException(status_code=502, detail=str(e))

    payloads = build_commit_payloads(series, config)
    return {
        "history": calculate_history(series, now),
        "payloads": {name: payload.to_json() for name, payload in payloads.items()},
    }
