"""
Paperboy pipeline.

Runs the whole job sequentially:
1. Fetches every feed listed in the configuration, in order
2. Groups the articles by ISO week
3. Renders the weeks, newest first, between the template header and footer
4. Writes the Markdown document to the configured output file

A feed that fails to fetch is logged and skipped; every other error aborts
the run before the output file is touched.
"""

import logging
from typing import Sequence

from .errors import FetchError
from .fetch_rss_news import fetch_articles
from .render import load_template, render_markdown
from .types import Article, PaperboyConfig
from .utils import write_output
from .weeks import group_articles, sort_weeks

logger = logging.getLogger(__name__)


def fetch_all_feeds(feeds: Sequence[str]) -> list[list[Article]]:
    """Fetch articles from every feed, one at a time.

    Returns:
        One article list per feed, empty for feeds that failed.
    """
    all_articles: list[list[Article]] = []

    for feed_url in feeds:
        try:
            all_articles.append(fetch_articles(feed_url))
        except FetchError as e:
            logger.error("Error fetching articles from %s: %s", feed_url, e)
            all_articles.append([])

    return all_articles


def build_document(config: PaperboyConfig) -> str:
    """Fetch, group and render, without writing anything."""
    logger.info("Feeds: %d", len(config.feeds))

    articles_by_week, weeks = group_articles(fetch_all_feeds(config.feeds))

    weeks = sort_weeks(weeks)
    logger.info("-> Sorted and reversed %d weeks", len(weeks))

    template = load_template(config.template)
    output = render_markdown(template, articles_by_week, weeks)
    logger.info("-> Generated Markdown output")
    return output


def run_pipeline(config: PaperboyConfig) -> str:
    """Execute the complete pipeline.

    Returns:
        The path of the written document.
    """
    output = build_document(config)
    write_output(config.output, output)
    logger.info("-> Wrote output to %s", config.output)
    return config.output
