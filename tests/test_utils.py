# pylint: disable=redefined-outer-name
"""
Unit tests for configuration loading, output writing and the entry point.
"""

import logging
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

import main
import paperboy
from paperboy.errors import ConfigError, OutputWriteError
from paperboy.utils import ConfigLoader, write_output

CONFIG_YAML = """
template: template.md
output: README.md
feeds:
  - https://example.com/feed.xml
  - https://example.org/atom.xml
"""


# --- Fixtures ---


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


# --- Tests for ConfigLoader ---


def test_load_config(config_file: Path) -> None:
    """Test that a valid file is loaded with feeds in declared order."""
    config = ConfigLoader().load_config(config_file)

    assert config.template == "template.md"
    assert config.output == "README.md"
    assert config.feeds == ["https://example.com/feed.xml", "https://example.org/atom.xml"]


def test_load_config_without_feeds(tmp_path: Path) -> None:
    """Test that the feed list defaults to empty."""
    path = tmp_path / "config.yaml"
    path.write_text("template: t.md\noutput: o.md\n", encoding="utf-8")

    assert ConfigLoader().load_config(path).feeds == []


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Test that a missing file is a ConfigError."""
    with pytest.raises(ConfigError, match="Error reading"):
        ConfigLoader().load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "template: [unclosed",
        "- just\n- a list\n",
        "output: README.md\nfeeds: []\n",
        "template: t.md\noutput: o.md\nfeeds: not-a-list\n",
    ],
)
def test_load_config_malformed(tmp_path: Path, text: str) -> None:
    """Test that invalid YAML or a wrong structure is a ConfigError."""
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader().load_config(path)


# --- Tests for write_output ---


def test_write_output_creates_directories(tmp_path: Path) -> None:
    """Test that the output file and its parent directories are created."""
    path = tmp_path / "docs" / "README.md"

    write_output(path, "# Hello\n")

    assert path.read_text(encoding="utf-8") == "# Hello\n"


def test_write_output_error(tmp_path: Path) -> None:
    """Test that writing onto a directory is an OutputWriteError."""
    with pytest.raises(OutputWriteError):
        write_output(tmp_path, "# Hello\n")


# --- Tests for main ---


@patch("main.run_pipeline")
def test_main_success(
    mock_run: MagicMock, config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a successful run exits with status 0."""
    monkeypatch.setenv("PAPERBOY_CONFIG", str(config_file))

    assert main.main() == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.args[0].output == "README.md"


@patch("main.run_pipeline")
def test_main_config_error(
    mock_run: MagicMock, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a configuration error exits with status 1 before fetching."""
    monkeypatch.setenv("PAPERBOY_CONFIG", str(tmp_path / "missing.yaml"))

    assert main.main() == 1
    mock_run.assert_not_called()


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("verbose", logging.INFO), ("", logging.INFO)],
)
def test_configure_logging_levels(level: str, expected: int) -> None:
    """Test that known level names are used and unknown ones fall back to INFO."""
    assert main.configure_logging(level) == expected


@patch("main.run_pipeline")
def test_main_invalid_log_level(
    mock_run: MagicMock, config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a bad PAPERBOY_LOG_LEVEL does not stop the run."""
    monkeypatch.setenv("PAPERBOY_CONFIG", str(config_file))
    monkeypatch.setenv("PAPERBOY_LOG_LEVEL", "chatty")

    assert main.main() == 0
    mock_run.assert_called_once()


def test_version_is_a_string() -> None:
    """Test that the version comes from package metadata or defaults to dev."""
    assert isinstance(paperboy.__version__, str)
    assert paperboy.__version__
