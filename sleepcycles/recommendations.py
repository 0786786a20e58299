"""
Bedtime and wake-time recommendations based on whole sleep cycles.

Waking at the end of a cycle (from light sleep) leaves people less groggy
than waking mid-cycle from deep sleep. Each candidate below is a whole
number of cycles, offset by the time it takes to fall asleep, and rated
against the age group's recommended nightly sleep duration.

Cycle length and recommended hours come from AGE_GROUPS, so a 70-year-old
gets 85-minute cycles and a 7-8h target while an adult gets 90-minute
cycles and 7-9h.
"""

import logging
from datetime import datetime
from typing import Callable

from .age_groups import classify_age, get_age_group_data
from .clock_math import format_clock_time, format_duration, shift_minutes
from .types import (
    QUALITY_RANK,
    CalculationMode,
    Quality,
    RecommendedHours,
    SleepRecommendation,
    SleepSettings,
)

logger = logging.getLogger(__name__)

# Fixed band bracketing typical adult needs. Not derived from the age
# group's recommended hours, so very young ages can score all POOR.
CANDIDATE_CYCLES = (3, 4, 5, 6, 7)

# Cycle count at which an in-range option is rated EXCELLENT rather than GOOD.
EXCELLENT_MIN_CYCLES = 5


def rate_quality(
    cycles: int, cycle_length: int, recommended_hours: RecommendedHours
) -> Quality:
    """
    Rate a candidate by how its sleep duration fits the recommended range.

    - Within [min, max]: EXCELLENT with 5+ cycles, otherwise GOOD
    - Below min by no more than an hour: FAIR
    - More than an hour below min: POOR
    - Above max: FAIR (too much sleep)

    Args:
        cycles: Number of sleep cycles
        cycle_length: Minutes per cycle
        recommended_hours: Age group's recommended duration bounds

    Returns:
        Quality label
    """
    sleep_hours = cycles * cycle_length / 60

    if recommended_hours.min <= sleep_hours <= recommended_hours.max:
        return "EXCELLENT" if cycles >= EXCELLENT_MIN_CYCLES else "GOOD"
    if sleep_hours < recommended_hours.min:
        return "POOR" if sleep_hours < recommended_hours.min - 1 else "FAIR"
    return "FAIR"


def sort_by_quality(
    recommendations: list[SleepRecommendation],
) -> list[SleepRecommendation]:
    """Order best quality first; equal ratings keep their original order."""
    return sorted(
        recommendations,
        key=lambda rec: QUALITY_RANK[rec.quality],
        reverse=True,
    )


def _build_recommendations(
    settings: SleepSettings, candidate_time: Callable[[int, int], datetime]
) -> list[SleepRecommendation]:
    """
    Generate one rated recommendation per candidate cycle count.

    Args:
        settings: User settings (age drives cycle length and thresholds)
        candidate_time: Callable mapping (cycles, cycle_length) to the
            candidate datetime

    Returns:
        Recommendations sorted by descending quality
    """
    age_data = get_age_group_data(classify_age(settings.age))
    cycle_length = age_data.cycle_length

    recommendations = []
    for cycles in CANDIDATE_CYCLES:
        sleep_minutes = cycles * cycle_length
        recommendations.append(
            SleepRecommendation(
                time=format_clock_time(candidate_time(cycles, cycle_length)),
                quality=rate_quality(cycles, cycle_length, age_data.recommended_hours),
                cycles=cycles,
                total_sleep=format_duration(sleep_minutes),
                total_minutes=sleep_minutes,
            )
        )

    return sort_by_quality(recommendations)


def compute_bedtimes(
    wake_time: datetime, settings: SleepSettings
) -> list[SleepRecommendation]:
    """
    Recommend bedtimes for a target wake time.

    bedtime = wake_time - (cycles * cycle_length + fall_asleep_time)

    Example: adult, 7:00 AM wake, 15 min to fall asleep, 5 cycles
    -> 7:00 AM - 465 min = 11:15 PM.

    Elapsed minutes are subtracted, so on a DST changeover night the
    displayed bedtime still gives the full amount of sleep.

    Args:
        wake_time: Target wake time
        settings: User settings

    Returns:
        Five recommendations (3-7 cycles), best quality first
    """
    logger.debug(
        "Computing bedtimes for wake %s (age=%s, fall_asleep=%s)",
        format_clock_time(wake_time),
        settings.age,
        settings.fall_asleep_time,
    )

    def bedtime_for(cycles: int, cycle_length: int) -> datetime:
        total_sleep_time = cycles * cycle_length + settings.fall_asleep_time
        return shift_minutes(wake_time, -total_sleep_time)

    return _build_recommendations(settings, bedtime_for)


def compute_wake_times(
    bedtime: datetime, settings: SleepSettings
) -> list[SleepRecommendation]:
    """
    Recommend wake times for a given bedtime.

    Sleep starts at bedtime + fall_asleep_time; each candidate wakes at the
    end of a whole cycle after that.

    Args:
        bedtime: Time the user goes to bed
        settings: User settings

    Returns:
        Five recommendations (3-7 cycles), best quality first
    """
    logger.debug(
        "Computing wake times for bedtime %s (age=%s, fall_asleep=%s)",
        format_clock_time(bedtime),
        settings.age,
        settings.fall_asleep_time,
    )
    sleep_start = shift_minutes(bedtime, settings.fall_asleep_time)

    def wake_time_for(cycles: int, cycle_length: int) -> datetime:
        return shift_minutes(sleep_start, cycles * cycle_length)

    return _build_recommendations(settings, wake_time_for)


def calculate_recommendations(
    mode: CalculationMode, target_time: datetime, settings: SleepSettings
) -> list[SleepRecommendation]:
    """Dispatch on calculation mode: "wake_up" -> bedtimes, "bed_time" -> wake times."""
    if mode == "wake_up":
        return compute_bedtimes(target_time, settings)
    elif mode == "bed_time":
        return compute_wake_times(target_time, settings)
    else:
        raise ValueError(f"Unknown mode: {mode}")
