"""
Test helper functions for recommendation list checks.

These functions can be imported by test modules.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycles.types import QUALITY_RANK, SleepRecommendation


def quality_ranks(recommendations: list[SleepRecommendation]) -> list[int]:
    """Quality rank of each recommendation, in list order."""
    return [QUALITY_RANK[rec.quality] for rec in recommendations]


def by_cycles(
    recommendations: list[SleepRecommendation], cycles: int
) -> SleepRecommendation:
    """Find the recommendation for a given cycle count."""
    for rec in recommendations:
        if rec.cycles == cycles:
            return rec
    raise AssertionError(f"No recommendation with {cycles} cycles")


def assert_sorted_by_quality(recommendations: list[SleepRecommendation]) -> None:
    """Assert quality rank never increases along the list."""
    ranks = quality_ranks(recommendations)
    for i in range(len(ranks) - 1):
        assert ranks[i] >= ranks[i + 1], f"Out of order at {i}: {ranks}"
