"""Shared pytest fixtures for seqfuzz tests."""

import pytest

from seqfuzz.config import DEFAULT_CONFIG, ScoringConfig


@pytest.fixture
def default_config():
    """Default scoring configuration."""
    return DEFAULT_CONFIG


@pytest.fixture
def dash_config():
    """Config that treats '-' as the only separator."""
    return ScoringConfig(separators=["-"])


@pytest.fixture
def greetings():
    """Candidates from the library's documentation examples."""
    return ["Hello Goodbye", "Hell on Wheels", "Hello, world!"]


@pytest.fixture
def foods():
    """Candidates for single letter ranking."""
    return ["Snack Food", "Food"]


@pytest.fixture
def config_file(tmp_path):
    """Write a TOML config file and return its path."""

    def _write(content: str):
        path = tmp_path / "seqfuzz.toml"
        path.write_text(content)
        return path

    return _write
