"""Exceptions raised by the Paperboy pipeline."""


class PaperboyError(Exception):
    """Base class for every error Paperboy raises on purpose."""


class ConfigError(PaperboyError):
    """The configuration file is missing, unreadable or malformed."""


class FetchError(PaperboyError):
    """A single feed could not be retrieved or parsed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"error fetching feed {source}: {message}")
        self.source = source


class TemplateError(PaperboyError):
    """The template file is unreadable or lacks its two delimiters."""


class OutputWriteError(PaperboyError):
    """The rendered document could not be written."""
