"""Shared pytest configuration and fixtures for the converter test suite."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aag2courageous.courageous.document import Position3d  # noqa: E402
from tests.infrastructure.helpers import (  # noqa: E402
    PAAG_COMMENT,
    generate_gga,
    generate_rmc,
    write_log,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def cuas_location() -> Position3d:
    """Static C-UAS location used by end-to-end tests."""
    return Position3d(lat=0.0, lon=0.0, height=0.0)


@pytest.fixture
def sample_log_lines() -> list[str]:
    """A short Aaronia log: one in-step cycle, one desynchronized cycle, vendor comments."""
    return [
        PAAG_COMMENT,
        generate_rmc("120000", date="010124"),
        generate_gga("120000", lat=10.0, lon=20.0, alt=30.0),
        PAAG_COMMENT,
        generate_rmc("120001", date="010124"),
        generate_rmc("120002", date="010124"),
        generate_gga("120001", lat=10.5, lon=20.5, alt=31.0),
        generate_gga("120002", lat=11.0, lon=21.0, alt=32.0),
    ]


@pytest.fixture
def sample_log(tmp_path: Path, sample_log_lines: list[str]) -> Path:
    """Write ``sample_log_lines`` to a temporary ``.log`` file."""
    return write_log(tmp_path / "flight.log", sample_log_lines)
