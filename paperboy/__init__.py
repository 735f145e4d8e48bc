"""
Paperboy.

Reads RSS/Atom feeds and writes a Markdown document listing
the collected articles grouped by ISO week, newest week first.
"""

from datetime import datetime
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("paperboy")
except PackageNotFoundError:
    __version__ = "dev"

BUILD = datetime.now().strftime("%Y%m%d")
