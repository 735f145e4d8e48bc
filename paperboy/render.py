"""
Markdown rendering.

The template file holds a header and a footer separated by ``---``
delimiters::

    # My reading list
    ---
    (ignored)
    ---
    Generated by Paperboy.

The rendered document is the header, one section per week and the footer.
"""

import logging
from pathlib import Path
from typing import Mapping, Sequence, Union

from .errors import TemplateError
from .types import Article, Template
from .weeks import as_utc

logger = logging.getLogger(__name__)

TEMPLATE_DELIMITER = "---"


def parse_template(text: str) -> Template:
    """Split template text into its header and footer.

    Raises:
        TemplateError: If the text does not contain two delimiters.
    """
    parts = text.split(TEMPLATE_DELIMITER, 2)
    if len(parts) != 3:
        raise TemplateError(
            f"Invalid template format: expected two '{TEMPLATE_DELIMITER}' delimiters"
        )

    return Template(header=parts[0].strip(), footer=parts[2].strip())


def load_template(path: Union[str, Path]) -> Template:
    """Read and parse the template file.

    Raises:
        TemplateError: If the file cannot be read or is malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Error reading template file {path}: {e}") from e
    return parse_template(text)


def format_article(article: Article) -> str:
    published = as_utc(article.published_at).strftime("%Y-%m-%d")
    return f"- {published} @ {article.url_domain}: [{article.title}]({article.url})"


def render_markdown(
    template: Template,
    articles_by_week: Mapping[str, Sequence[Article]],
    weeks: Sequence[str],
) -> str:
    """Generate the Markdown document.

    Args:
        template: Header and footer to wrap the week sections in.
        articles_by_week: Articles keyed by week, in any order.
        weeks: Week keys in the order their sections should appear.

    Returns:
        The document text, ending with a newline.
    """
    lines = [template.header, ""]

    for week in weeks:
        articles = articles_by_week.get(week)
        if not articles:
            continue

        lines.append(f"## Week: {week}")
        lines.append("")
        for article in sorted(articles, key=lambda a: as_utc(a.published_at)):
            lines.append(format_article(article))
        lines.append("")

    lines.append(template.footer)
    return "\n".join(lines) + "\n"
