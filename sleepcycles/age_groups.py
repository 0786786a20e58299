"""
Age-group sleep constants.

Cycle lengths and recommended durations by life stage:
- Infant sleep cycles are short (~50 min) and lengthen through childhood
- Mature ~90 min cycles from school age through adulthood
- Cycles shorten slightly in older adults (~85 min)

Recommended hours follow the National Sleep Foundation guidelines
(Hirshkowitz et al. 2015).
"""

import math
from types import MappingProxyType
from typing import Mapping

from .types import AgeGroupData, AgeGroupKey, RecommendedHours

AGE_GROUPS: Mapping[AgeGroupKey, AgeGroupData] = MappingProxyType(
    {
        "newborn": AgeGroupData(
            name="Newborns (0-3 months)",
            sleep_range="14-17 hours",
            recommended_hours=RecommendedHours(min=14, max=17),
            cycle_length=50,
            rem_sleep_percentage=50,
            deep_sleep_percentage=25,
            characteristics=(
                "Sleep begins in active (REM-like) sleep rather than NREM",
                "Sleep is spread across day and night in short bouts",
                "Circadian rhythm is not yet established",
                "Frequent waking for feeding is normal",
            ),
        ),
        "infant": AgeGroupData(
            name="Infants (3-11 months)",
            sleep_range="12-15 hours",
            recommended_hours=RecommendedHours(min=12, max=15),
            cycle_length=60,
            rem_sleep_percentage=40,
            deep_sleep_percentage=30,
            characteristics=(
                "Day-night rhythm emerges around 3-4 months",
                "Longer nighttime stretches consolidate gradually",
                "Two to three daytime naps are typical",
                "Sleep onset shifts from REM to NREM",
            ),
        ),
        "toddler": AgeGroupData(
            name="Toddlers (1-2 years)",
            sleep_range="11-14 hours",
            recommended_hours=RecommendedHours(min=11, max=14),
            cycle_length=70,
            rem_sleep_percentage=30,
            deep_sleep_percentage=30,
            characteristics=(
                "Naps consolidate into a single afternoon nap",
                "Bedtime routines strongly support sleep onset",
                "Separation anxiety can cause night waking",
                "Deep sleep supports rapid physical growth",
            ),
        ),
        "preschool": AgeGroupData(
            name="Preschoolers (3-5 years)",
            sleep_range="10-13 hours",
            recommended_hours=RecommendedHours(min=10, max=13),
            cycle_length=80,
            rem_sleep_percentage=25,
            deep_sleep_percentage=30,
            characteristics=(
                "Many children stop napping by age 5",
                "Nightmares and night terrors are more common",
                "Consistent bedtimes improve behavior and attention",
                "Sleep onset begins reliably in light NREM sleep",
            ),
        ),
        "schoolAge": AgeGroupData(
            name="School-aged Children (6-12 years)",
            sleep_range="9-12 hours",
            recommended_hours=RecommendedHours(min=9, max=12),
            cycle_length=90,
            rem_sleep_percentage=25,
            deep_sleep_percentage=30,
            characteristics=(
                "Peak slow-wave (deep) sleep for growth and development",
                "Consistent sleep schedule is crucial for learning",
                "May still need occasional naps until age 6-7",
                "Earlier bedtimes (7-8 PM) are typical",
            ),
        ),
        "teen": AgeGroupData(
            name="Teenagers (13-18 years)",
            sleep_range="8-10 hours",
            recommended_hours=RecommendedHours(min=8, max=10),
            cycle_length=90,
            rem_sleep_percentage=23,
            deep_sleep_percentage=25,
            characteristics=(
                "Natural shift to later bedtimes due to circadian rhythm changes",
                "Melatonin production starts later in the evening",
                "Academic and social pressures can disrupt sleep",
                "Weekend sleep-in patterns can worsen sleep debt",
            ),
        ),
        "adult": AgeGroupData(
            name="Adults (19-64 years)",
            sleep_range="7-9 hours",
            recommended_hours=RecommendedHours(min=7, max=9),
            cycle_length=90,
            rem_sleep_percentage=20,
            deep_sleep_percentage=20,
            characteristics=(
                "Stable circadian rhythms when maintained consistently",
                "Work and lifestyle factors significantly impact sleep",
                "Sleep quality more important than quantity as you age",
                "Caffeine and alcohol tolerance decreases with age",
            ),
        ),
        "senior": AgeGroupData(
            name="Older Adults (65+ years)",
            sleep_range="7-8 hours",
            recommended_hours=RecommendedHours(min=7, max=8),
            cycle_length=85,
            rem_sleep_percentage=18,
            deep_sleep_percentage=15,
            characteristics=(
                "Earlier bedtimes and wake times (advanced phase)",
                "More fragmented sleep with frequent awakenings",
                "Reduced deep sleep and REM sleep",
                "Napping becomes more common and beneficial",
            ),
        ),
    }
)

# Typical sleep-onset latency by age group, in minutes (5-30).
FALL_ASLEEP_MINUTES: Mapping[AgeGroupKey, int] = MappingProxyType(
    {
        "newborn": 10,
        "infant": 15,
        "toddler": 20,
        "preschool": 20,
        "schoolAge": 15,
        "teen": 20,
        "adult": 15,
        "senior": 20,
    }
)

# Used when an age group's recommended range holds no whole 90-minute cycle.
DEFAULT_OPTIMAL_CYCLES = [5, 6, 7]


def classify_age(age: float) -> AgeGroupKey:
    """
    Map an age in years to its age-group key.

    Buckets are half-open: inclusive on the lower edge, exclusive on the
    upper. Negative ages are not validated and fall into "newborn".
    """
    if age < 0.25:
        return "newborn"
    elif age < 1:
        return "infant"
    elif age < 3:
        return "toddler"
    elif age < 6:
        return "preschool"
    elif age < 13:
        return "schoolAge"
    elif age < 19:
        return "teen"
    elif age < 65:
        return "adult"
    else:
        return "senior"


def get_age_group_data(key: AgeGroupKey) -> AgeGroupData:
    """Get the constants for an age-group key."""
    return AGE_GROUPS[key]


def get_age_group_recommendations(age: float) -> AgeGroupData:
    """Get the constants for the age group containing `age`."""
    return AGE_GROUPS[classify_age(age)]


def get_cycle_length(age: float) -> int:
    """Sleep cycle length in minutes for the given age."""
    return get_age_group_recommendations(age).cycle_length


def get_fall_asleep_time(age: float) -> int:
    """Default fall-asleep buffer in minutes for the given age."""
    return FALL_ASLEEP_MINUTES[classify_age(age)]


def calculate_optimal_cycles_for_age(age: float) -> list[int]:
    """
    Cycle counts whose 90-minute total lands inside the recommended range.

    Runs from ceil(min / 1.5) to floor(max / 1.5). Example: adults (7-9h)
    give [5, 6]. Ranges with no whole cycle fall back to [5, 6, 7].

    Args:
        age: Age in years

    Returns:
        Ascending list of cycle counts; the first entry seeds
        SleepSettings.selected_cycles
    """
    hours = get_age_group_recommendations(age).recommended_hours
    min_cycles = math.ceil(hours.min / 1.5)
    max_cycles = math.floor(hours.max / 1.5)

    cycles = list(range(min_cycles, max_cycles + 1))
    return cycles if cycles else list(DEFAULT_OPTIMAL_CYCLES)
