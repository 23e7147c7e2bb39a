"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from hkidkit.engine import IdentifierEngine  # noqa: E402

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def engine() -> IdentifierEngine:
    """Provide an engine with the default configuration."""
    return IdentifierEngine()


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixture files."""
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def schemas_dir() -> Path:
    """Provide path to bundled JSON schemas."""
    return SCHEMAS_DIR
