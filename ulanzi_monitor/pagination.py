"""
Paginated fetch loop for GitHub search endpoints.
"""

import logging
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

PageFetcher = Callable[[int, int], Sequence]


def fetch_all(
    page_fetcher: PageFetcher, max_items: int = 1000, per_page: int = 100
) -> list:
    """
    Fetch pages sequentially and concatenate their items.

    Page 1 is always requested. Another page follows while fewer than
    max_items have been collected, the previous page was not empty, and the
    running total is an exact multiple of per_page. A last page that happens
    to be exactly full therefore costs one extra, empty request.

    Args:
        page_fetcher: Called as page_fetcher(page, per_page), returns that
            page's items
        max_items: Stop once at least this many items have been collected
        per_page: Requested page size

    Returns:
        All fetched items, in page order

    Raises:
        ValueError: If max_items or per_page is not positive
        Any exception raised by page_fetcher, unchanged
    """
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")
    if max_items <= 0:
        raise ValueError(f"max_items must be positive, got {max_items}")

    items: list = []
    page = 1
    last_count = 0

    while page == 1 or (
        last_count > 0 and len(items) < max_items and len(items) % per_page == 0
    ):
        page_items = list(page_fetcher(page, per_page))
        last_count = len(page_items)
        items.extend(page_items)
        logger.info(
            "Fetched page %d: %d items (%d total)", page, last_count, len(items)
        )
        page += 1

    return items
