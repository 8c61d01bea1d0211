"""Test infrastructure - generators and assertion helpers.

This package contains test support code, NOT actual tests.
"""

from pathlib import Path

INFRASTRUCTURE_DIR = Path(__file__).parent
HELPERS_DIR = INFRASTRUCTURE_DIR / "helpers"
