"""
RSS News Fetcher Module.

This module provides functionality to fetch and parse RSS/Atom feeds
into Article models.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import feedparser

from .domain import get_url_domain
from .errors import FetchError
from .types import Article

logger = logging.getLogger(__name__)


def _published_at(entry: Any) -> Optional[datetime]:
    """Return the entry's publish instant as an aware UTC datetime.

    feedparser normalises parsed dates to UTC ``struct_time`` values.
    Atom entries without ``published`` fall back to ``updated``.
    """
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime(*parsed[:6], tzinfo=timezone.utc)


def fetch_articles(source: str) -> list[Article]:
    """Fetch articles from a feed.

    Args:
        source: The feed URL (or anything else ``feedparser.parse`` accepts).

    Returns:
        One Article per feed entry that carries a publish date, in feed order.

    Raises:
        FetchError: If the feed cannot be retrieved or parsed.
    """
    logger.info("Fetching articles from %s", source)
    try:
        feed = feedparser.parse(source)
    except Exception as e:
        raise FetchError(source, str(e)) from e

    status = feed.get("status")
    if status is not None and status >= 400:
        raise FetchError(source, f"HTTP status {status}")

    if feed.get("bozo") and not feed.entries:
        cause = feed.get("bozo_exception")
        raise FetchError(source, str(cause) if cause else "malformed feed") from cause

    articles = []
    for entry in feed.entries:
        link = entry.get("link", "")
        published_at = _published_at(entry)
        if published_at is None:
            logger.warning("Skipping entry without publish date: %s", link or entry.get("title"))
            continue

        articles.append(
            Article(
                published_at=published_at,
                title=entry.get("title", ""),
                url=link,
                url_domain=get_url_domain(link),
            )
        )

    logger.info("-> Got %d articles", len(articles))
    return articles
