"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def mock_check_path(fixtures_root: Path) -> Path:
    """Detector output for a weight-loss ad on Meta with text and image findings."""
    return fixtures_root / "mock_check.json"
