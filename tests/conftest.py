"""
Pytest configuration and shared fixtures for dewey tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from dewey.logging import SilentLogger, get_global_logger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def version_corpus(fixtures_dir: Path) -> list[str]:
    """Provide real-world version strings from the fixtures corpus."""
    with (fixtures_dir / "versions.yaml").open("r", encoding="utf-8") as f:
        return list(yaml.safe_load(f)["versions"])


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("dewey.yaml", {"tokenizer": {...}})
    """
    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Reset the global logger after each test."""
    previous = get_global_logger()
    yield
    set_global_logger(previous)


@pytest.fixture
def silent_logger() -> SilentLogger:
    return SilentLogger()
