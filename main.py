"""
Paperboy entry point.

Reads the YAML configuration (``config.yaml`` or the file named by
``PAPERBOY_CONFIG``), fetches the configured feeds and writes the
weekly Markdown digest.
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from paperboy import BUILD, __version__
from paperboy.errors import PaperboyError
from paperboy.pipeline import run_pipeline
from paperboy.utils import ConfigLoader

DEFAULT_CONFIG_FILE: str = "config.yaml"

logger: logging.Logger = logging.getLogger("paperboy")


def configure_logging(level: str = "INFO") -> int:
    """Send log records to stdout.

    Returns:
        The numeric level in use; unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    known = isinstance(numeric_level, int)
    if not known:
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not known:
        logger.warning("Unknown log level %r, using INFO", level)
    return numeric_level


def main() -> int:
    """Run Paperboy once and return the process exit status."""
    load_dotenv()
    configure_logging(os.getenv("PAPERBOY_LOG_LEVEL", "INFO"))
    logger.info("Paperboy v.%s (build %s)", __version__, BUILD)

    config_file: str = os.getenv("PAPERBOY_CONFIG", DEFAULT_CONFIG_FILE)

    try:
        config = ConfigLoader().load_config(config_file)
        run_pipeline(config)
    except PaperboyError as e:
        logger.error("%s", e)
        return 1

    logger.info("Paperboy finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
