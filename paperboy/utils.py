"""
Configuration loading and output writing.
"""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from .errors import ConfigError, OutputWriteError
from .types import PaperboyConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigLoader:
    """Load the Paperboy YAML configuration file."""

    def load_config(self, config_file: PathLike) -> PaperboyConfig:
        """Read and validate the configuration.

        Args:
            config_file: Path of the YAML file.

        Returns:
            The validated configuration.

        Raises:
            ConfigError: If the file is missing, unreadable or malformed.
        """
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Error reading {config_file} file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing {config_file} file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Error parsing {config_file} file: expected a mapping")

        try:
            config = PaperboyConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

        logger.info("Loaded %d feeds from config file", len(config.feeds))
        return config


def write_output(output_file: PathLike, content: str) -> None:
    """Write the rendered document, replacing any previous file.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    path = Path(output_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Error writing output file {path}: {e}") from e
