"""
Grouping of articles by ISO week.

Week keys have the form ``YYYY-WW`` (ISO year, zero-padded ISO week),
so sorting them as strings sorts them chronologically.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Sequence

from .types import Article

logger = logging.getLogger(__name__)

WeekBuckets = dict[str, list[Article]]


def as_utc(moment: datetime) -> datetime:
    """Convert to UTC; naive datetimes are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def week_key(published_at: datetime) -> str:
    """Format the ISO (year, week) of a UTC instant, e.g. ``2025-01``."""
    year, week, _ = as_utc(published_at).isocalendar()
    return f"{year}-{week:02d}"


def add_article(buckets: WeekBuckets, weeks: list[str], article: Article) -> str:
    """Append an article to its week bucket and record the week if new.

    Returns:
        The week key the article was filed under.
    """
    key = week_key(article.published_at)
    if key not in buckets:
        buckets[key] = []
        weeks.append(key)
    buckets[key].append(article)
    return key


class WeekAggregator:
    """Accumulate articles from several feeds into week buckets.

    ``weeks`` keeps the distinct week keys in first-seen order and
    always holds exactly the keys of ``buckets``. Articles inside a
    bucket stay in the order they were added.
    """

    def __init__(self) -> None:
        self.buckets: WeekBuckets = {}
        self.weeks: list[str] = []

    def __len__(self) -> int:
        return sum(len(articles) for articles in self.buckets.values())

    def add_article(self, article: Article) -> str:
        return add_article(self.buckets, self.weeks, article)

    def add_articles(self, articles: Iterable[Article]) -> None:
        for article in articles:
            self.add_article(article)

    def sorted_weeks(self) -> list[str]:
        """Return the week keys newest first."""
        return sort_weeks(self.weeks)


def sort_weeks(weeks: Iterable[str]) -> list[str]:
    """Order week keys newest first."""
    return sorted(weeks, reverse=True)


def group_articles(
    articles_per_feed: Iterable[Sequence[Article]],
) -> tuple[WeekBuckets, list[str]]:
    """Group articles of several feeds by week.

    Args:
        articles_per_feed: Article lists, one per feed, in declaration order.

    Returns:
        The week buckets and the week keys in first-seen order.
    """
    aggregator = WeekAggregator()
    for articles in articles_per_feed:
        aggregator.add_articles(articles)

    logger.debug("Grouped %d articles into %d weeks", len(aggregator), len(aggregator.weeks))
    return aggregator.buckets, aggregator.weeks
