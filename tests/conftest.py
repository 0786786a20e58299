"""
Pytest fixtures for sleep cycle tests.
"""

import pytest
from datetime import datetime

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycles.types import SleepSettings


@pytest.fixture
def seven_am():
    """7:00 AM on a fixed date."""
    return datetime(2026, 3, 2, 7, 0)


@pytest.fixture
def eleven_pm():
    """11:00 PM on a fixed date."""
    return datetime(2026, 3, 1, 23, 0)


@pytest.fixture
def adult_settings():
    """Young adult, 15 minutes to fall asleep."""
    return SleepSettings(fall_asleep_time=15, selected_cycles=5, age=21.5)


@pytest.fixture
def senior_settings():
    """Older adult (85-minute cycles, 7-8h recommended)."""
    return SleepSettings(fall_asleep_time=20, selected_cycles=5, age=70)


@pytest.fixture
def newborn_settings():
    """Newborn (50-minute cycles, 14-17h recommended)."""
    return SleepSettings(fall_asleep_time=10, selected_cycles=10, age=0.1)
