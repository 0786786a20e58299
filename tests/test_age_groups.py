"""
Tests for age classification and the age-group table.
"""

import dataclasses

import pytest

from sleepcycles.age_groups import (
    AGE_GROUPS,
    FALL_ASLEEP_MINUTES,
    calculate_optimal_cycles_for_age,
    classify_age,
    get_age_group_data,
    get_age_group_recommendations,
    get_cycle_length,
    get_fall_asleep_time,
)


class TestClassifyAge:
    """Tests for classify_age bucket boundaries."""

    @pytest.mark.parametrize(
        "age,expected",
        [
            (0, "newborn"),
            (0.249, "newborn"),
            (0.25, "infant"),
            (0.999, "infant"),
            (1, "toddler"),
            (2.99, "toddler"),
            (3, "preschool"),
            (5.99, "preschool"),
            (6, "schoolAge"),
            (12.99, "schoolAge"),
            (13, "teen"),
            (18.99, "teen"),
            (19, "adult"),
            (64.99, "adult"),
            (65, "senior"),
            (100, "senior"),
        ],
    )
    def test_boundaries(self, age, expected):
        """Lower edge is inclusive, upper edge exclusive."""
        assert classify_age(age) == expected

    def test_negative_age_is_newborn(self):
        """Negative ages are not validated and fall into the first bucket."""
        assert classify_age(-1) == "newborn"

    def test_age_selector_values(self):
        """Ages offered by the calculator's age picker map to sensible groups."""
        assert classify_age(0.08) == "newborn"
        assert classify_age(0.33) == "infant"
        assert classify_age(0.71) == "infant"
        assert classify_age(1.5) == "toddler"
        assert classify_age(8.5) == "schoolAge"
        assert classify_age(15) == "teen"
        assert classify_age(21.5) == "adult"
        assert classify_age(45) == "adult"
        assert classify_age(70) == "senior"


class TestAgeGroupTable:
    """Tests for the static AGE_GROUPS table."""

    def test_every_classified_key_has_entry(self):
        """Every key classify_age can produce is in the table."""
        for age in [0, 0.5, 2, 4, 8, 15, 30, 80]:
            assert classify_age(age) in AGE_GROUPS

    def test_eight_groups(self):
        """Exactly one row per age group."""
        assert len(AGE_GROUPS) == 8
        assert set(AGE_GROUPS) == set(FALL_ASLEEP_MINUTES)

    def test_cycle_lengths(self):
        """Cycles lengthen through childhood and shorten slightly for seniors."""
        lengths = [
            AGE_GROUPS[key].cycle_length
            for key in [
                "newborn",
                "infant",
                "toddler",
                "preschool",
                "schoolAge",
                "teen",
                "adult",
                "senior",
            ]
        ]
        assert lengths == [50, 60, 70, 80, 90, 90, 90, 85]

    def test_recommended_hours(self):
        """Spot-check recommended hour bounds used by quality scoring."""
        assert AGE_GROUPS["newborn"].recommended_hours.min == 14
        assert AGE_GROUPS["newborn"].recommended_hours.max == 17
        assert AGE_GROUPS["adult"].recommended_hours.min == 7
        assert AGE_GROUPS["adult"].recommended_hours.max == 9
        assert AGE_GROUPS["senior"].recommended_hours.min == 7
        assert AGE_GROUPS["senior"].recommended_hours.max == 8

    def test_min_below_max(self):
        """Each row has a non-empty recommended range."""
        for data in AGE_GROUPS.values():
            assert data.recommended_hours.min < data.recommended_hours.max

    def test_table_is_read_only(self):
        """Neither the mapping nor its rows can be modified."""
        with pytest.raises(TypeError):
            AGE_GROUPS["adult"] = AGE_GROUPS["teen"]
        with pytest.raises(dataclasses.FrozenInstanceError):
            AGE_GROUPS["adult"].cycle_length = 100

    def test_lookup_by_key(self):
        """get_age_group_data returns the table row."""
        assert get_age_group_data("teen") is AGE_GROUPS["teen"]


class TestAgeHelpers:
    """Tests for per-age convenience lookups."""

    def test_recommendations_by_age(self):
        """Age lookups go through classification."""
        assert get_age_group_recommendations(21.5) is AGE_GROUPS["adult"]
        assert get_age_group_recommendations(70) is AGE_GROUPS["senior"]

    def test_cycle_length_by_age(self):
        """Cycle length follows the age group."""
        assert get_cycle_length(0.1) == 50
        assert get_cycle_length(21.5) == 90
        assert get_cycle_length(70) == 85

    def test_fall_asleep_time_in_range(self):
        """Default fall-asleep buffer stays within the 5-30 minute slider range."""
        for age in [0.1, 0.5, 2, 4, 8, 15, 30, 80]:
            assert 5 <= get_fall_asleep_time(age) <= 30

    def test_adult_fall_asleep_default(self):
        """Adults default to 15 minutes."""
        assert get_fall_asleep_time(25) == 15


class TestOptimalCycles:
    """Tests for calculate_optimal_cycles_for_age."""

    def test_adult(self):
        """7-9h -> ceil(4.67)..floor(6) = [5, 6]."""
        assert calculate_optimal_cycles_for_age(30) == [5, 6]

    def test_senior(self):
        """7-8h -> [5]."""
        assert calculate_optimal_cycles_for_age(70) == [5]

    def test_teen(self):
        """8-10h -> [6]."""
        assert calculate_optimal_cycles_for_age(15) == [6]

    def test_newborn(self):
        """14-17h -> [10, 11]."""
        assert calculate_optimal_cycles_for_age(0.1) == [10, 11]

    def test_always_non_empty(self):
        """Every age yields at least one cycle count."""
        for age in [0.1, 0.5, 2, 4, 8, 15, 30, 80]:
            assert len(calculate_optimal_cycles_for_age(age)) > 0
