"""
URL domain extraction.

Derives the bare site label (``example.com``) shown next to each
article in the rendered document.
"""

import re
from urllib.parse import urlsplit

SCHEME_PATTERN = re.compile(r"^https?://")
WWW_PREFIX = "www."
DOMAIN_PATTERN = re.compile(r"([a-z0-9\-]+\.)+[a-z0-9\-]+")


def _host(url: str) -> str:
    """Return the host part of an absolute URL, or ``url`` if it cannot be split."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return url
    # Drop "user:password@"; the port is left to the domain pattern.
    return netloc.rpartition("@")[2]


def get_url_domain(url: str) -> str:
    """Extract the domain from a URL-like string.

    Args:
        url: A full URL (``https://www.example.com/path``) or a bare
            domain (``example.com``).

    Returns:
        The domain without scheme, path or leading ``www.``, or an
        empty string when the host does not start with a domain. Only
        lowercase hosts match: ``https://Example.com`` yields ``""``.
    """
    url = url.strip()

    if SCHEME_PATTERN.match(url):
        url = _host(url)

    if url.startswith(WWW_PREFIX):
        url = url[len(WWW_PREFIX):]

    # Anchored: "Example.com" must not yield "xample.com".
    match = DOMAIN_PATTERN.match(url)
    return match.group(0) if match else ""
