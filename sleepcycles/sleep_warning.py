"""
Insufficient-sleep warning for a recommendation list.
"""

from .age_groups import get_age_group_recommendations
from .types import SleepRecommendation


def should_warn(recommendations: list[SleepRecommendation], age: float) -> bool:
    """
    True if the top recommendation sleeps less than the age group's minimum.

    Only the first (highest-ranked) entry is checked. An empty list has
    nothing to warn about and returns False.
    """
    if not recommendations:
        return False

    min_sleep_minutes = get_age_group_recommendations(age).recommended_hours.min * 60
    return recommendations[0].total_minutes < min_sleep_minutes


def warning_message(age: float) -> str:
    """User-facing warning text for the age group's minimum sleep."""
    min_hours = get_age_group_recommendations(age).recommended_hours.min
    return (
        f"This schedule may result in less than the recommended {min_hours:g} hours "
        f"of sleep for your age group. Consider adjusting your timing."
    )
