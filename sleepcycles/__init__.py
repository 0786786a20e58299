"""
Sleep Cycle Calculator

Recommends bedtimes and wake times in whole sleep cycles and rates each
option against age-appropriate sleep duration guidelines.

Main entry points: compute_bedtimes / compute_wake_times
"""

from .age_groups import (
    AGE_GROUPS,
    calculate_optimal_cycles_for_age,
    classify_age,
    get_age_group_data,
    get_age_group_recommendations,
    get_cycle_length,
    get_fall_asleep_time,
)
from .clock_math import (
    duration_minutes,
    format_clock_time,
    format_duration,
    parse_clock_time,
)
from .recommendations import (
    calculate_recommendations,
    compute_bedtimes,
    compute_wake_times,
    rate_quality,
)
from .sleep_warning import should_warn, warning_message
from .types import (
    QUALITY_RANK,
    AgeGroupData,
    AgeGroupKey,
    CalculationMode,
    Quality,
    RecommendedHours,
    SleepRecommendation,
    SleepSettings,
)

__all__ = [
    # Types
    "AgeGroupKey",
    "AgeGroupData",
    "RecommendedHours",
    "SleepSettings",
    "SleepRecommendation",
    "Quality",
    "QUALITY_RANK",
    "CalculationMode",
    # Age groups
    "AGE_GROUPS",
    "classify_age",
    "get_age_group_data",
    "get_age_group_recommendations",
    "get_cycle_length",
    "get_fall_asleep_time",
    "calculate_optimal_cycles_for_age",
    # Clock
    "parse_clock_time",
    "format_clock_time",
    "duration_minutes",
    "format_duration",
    # Recommendations
    "compute_bedtimes",
    "compute_wake_times",
    "calculate_recommendations",
    "rate_quality",
    # Warning
    "should_warn",
    "warning_message",
]
