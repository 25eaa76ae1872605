"""
Extract commit timestamps from GitHub commit search results.
"""

from datetime import datetime, timezone

from ulanzi_monitor.schemas import CommitItem, decode


def parse_commit_timestamps(items: list) -> list[datetime]:
    """
    Pull the committer date out of each commit search item.

    Args:
        items: CommitItem models, or raw item dicts as returned by the
            search API

    Returns:
        Timezone-aware datetimes, one per item, in input order. Timestamps
        without an offset are taken as UTC.

    Raises:
        DecodeError: If a raw item lacks commit.committer.date
    """
    timestamps = []

    for item in items:
        if not isinstance(item, CommitItem):
            item = decode(CommitItem, item, "commit search item")

        committed_at = item.commit.committer.date
        if committed_at.tzinfo is None:
            committed_at = committed_at.replace(tzinfo=timezone.utc)
        timestamps.append(committed_at)

    return timestamps
