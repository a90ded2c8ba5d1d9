"""Pytest configuration and shared fixtures for shelfgrid tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from shelfgrid.application import AnalyzeDesignCommand
from shelfgrid.domain import DEFAULT_DESIGN, DesignParams, MergeSpec

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "designs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_params() -> DesignParams:
    """The default 2x2 design with no back, doors or merges."""
    return DEFAULT_DESIGN


@pytest.fixture
def fully_merged_params() -> DesignParams:
    """A 2x2 design with every cell merged into one opening, doors enabled."""
    return DesignParams(
        rows=2,
        cols=2,
        has_doors=True,
        merges=(MergeSpec(0, 0, 1, 1),),
    )


@pytest.fixture
def analyze_command() -> AnalyzeDesignCommand:
    """Create an AnalyzeDesignCommand with default collaborators."""
    return AnalyzeDesignCommand()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample design files."""
    return FIXTURES_PATH
