"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bindump.core import BinDumper
from tests.fixtures import SAMPLE_LISTING, MALFORMED_LISTING


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Dumper Fixtures
# ============================================================================


@pytest.fixture
def full_dumper():
    """Create a dumper that keeps the whole listing."""
    return BinDumper(full_output=True)


@pytest.fixture
def binary_dumper():
    """Create a dumper that emits only the binary column."""
    return BinDumper(full_output=False)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def listing_file(tmp_path):
    """Write the sample objdump listing to a temporary file."""
    file_path = tmp_path / "hello.dis"
    file_path.write_text(SAMPLE_LISTING)
    return file_path


@pytest.fixture
def malformed_listing_file(tmp_path):
    """Write a listing with a bad hex byte to a temporary file."""
    file_path = tmp_path / "broken.dis"
    file_path.write_text(MALFORMED_LISTING)
    return file_path


@pytest.fixture
def missing_file(tmp_path):
    """Path to a listing that does not exist."""
    return tmp_path / "does_not_exist.dis"
