"""
Data structures for sleep cycle recommendations.
"""

from dataclasses import dataclass
from typing import Literal

AgeGroupKey = Literal[
    "newborn",  # 0-3 months
    "infant",  # 3-11 months
    "toddler",  # 1-2 years
    "preschool",  # 3-5 years
    "schoolAge",  # 6-12 years
    "teen",  # 13-18 years
    "adult",  # 19-64 years
    "senior",  # 65+ years
]

Quality = Literal["EXCELLENT", "GOOD", "FAIR", "POOR"]

# Higher rank sorts first in recommendation lists.
QUALITY_RANK: dict[Quality, int] = {
    "EXCELLENT": 4,
    "GOOD": 3,
    "FAIR": 2,
    "POOR": 1,
}

# "wake_up": caller knows when to wake, engine returns bedtimes
# "bed_time": caller knows when to go to bed, engine returns wake times
CalculationMode = Literal["wake_up", "bed_time"]

Period = Literal["AM", "PM"]


@dataclass(frozen=True)
class RecommendedHours:
    """Age-appropriate nightly sleep duration bounds, in hours."""

    min: float
    max: float


@dataclass(frozen=True)
class AgeGroupData:
    """
    Sleep-science constants for one age group.

    Rows live in AGE_GROUPS and are shared by every calculation, so they
    are frozen. The presentation layer reads them for display only.
    """

    name: str  # Display label, e.g. "Adults (19-64 years)"
    sleep_range: str  # Display string, e.g. "7-9 hours"
    recommended_hours: RecommendedHours
    cycle_length: int  # Minutes per sleep cycle
    rem_sleep_percentage: int
    deep_sleep_percentage: int
    characteristics: tuple[str, ...]


@dataclass
class SleepSettings:
    """User settings from the calculator form."""

    fall_asleep_time: int = 15  # Minutes to fall asleep (5-30)
    selected_cycles: int = 5  # Informational; candidates are always 3-7
    age: float = 25.0  # Years; drives cycle length and quality thresholds


@dataclass(frozen=True)
class SleepRecommendation:
    """Single candidate bedtime or wake time."""

    time: str  # "H:MM AM/PM"
    quality: Quality
    cycles: int
    total_sleep: str  # "7h 30m"
    total_minutes: int  # Sleep only, excludes fall-asleep time
