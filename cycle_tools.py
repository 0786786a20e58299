"""
Tool implementations for the sleep cycle calculator.

Provides two tools:
1. get_sleep_plan - Rated bedtimes or wake times for a target time
2. describe_age_group - Sleep-science constants for an age

Inputs and outputs are plain dicts so the presentation layer never
handles the dataclasses directly.
"""

import logging
from dataclasses import asdict
from typing import Any

from sleepcycles.age_groups import (
    calculate_optimal_cycles_for_age,
    classify_age,
    get_age_group_data,
    get_fall_asleep_time,
)
from sleepcycles.clock_math import format_clock_time, parse_clock_time
from sleepcycles.recommendations import calculate_recommendations
from sleepcycles.sleep_warning import should_warn, warning_message
from sleepcycles.types import SleepSettings

logger = logging.getLogger(__name__)

VALID_MODES = ("wake_up", "bed_time")
VALID_PERIODS = ("AM", "PM")


def get_sleep_plan(params: dict[str, Any]) -> dict[str, Any]:
    """
    Generate rated recommendations with a summary block.

    Params:
        mode: "wake_up" (given wake time, return bedtimes) or
            "bed_time" (given bedtime, return wake times)
        time: "H:MM" 12-hour time
        period: "AM" or "PM"
        age: Age in years
        fall_asleep_minutes: Optional, defaults to the age group's typical value
        selected_cycles: Optional, defaults to the first optimal cycle count
        timezone: Optional IANA timezone deciding what "today" is
    """
    mode = params["mode"]
    if mode not in VALID_MODES:
        raise ValueError(f"Unknown mode: {mode}")
    period = params["period"]
    if period not in VALID_PERIODS:
        raise ValueError(f"Invalid period: {period}")

    age = float(params["age"])
    settings = SleepSettings(
        fall_asleep_time=params.get("fall_asleep_minutes", get_fall_asleep_time(age)),
        selected_cycles=params.get(
            "selected_cycles", calculate_optimal_cycles_for_age(age)[0]
        ),
        age=age,
    )

    target = parse_clock_time(params["time"], period, params.get("timezone"))
    recommendations = calculate_recommendations(mode, target, settings)

    age_group = classify_age(age)
    age_data = get_age_group_data(age_group)
    show_warning = should_warn(recommendations, age)

    logger.debug(
        "Sleep plan for %s (%s): %d options, warning=%s",
        format_clock_time(target),
        age_group,
        len(recommendations),
        show_warning,
    )

    summary = {
        "mode": mode,
        "target_time": format_clock_time(target),
        "age_group": age_group,
        "age_group_name": age_data.name,
        "cycle_length": age_data.cycle_length,
        "fall_asleep_minutes": settings.fall_asleep_time,
        "selected_cycles": settings.selected_cycles,
        "show_warning": show_warning,
        "warning_message": warning_message(age) if show_warning else None,
    }

    return {
        "summary": summary,
        "recommendations": [asdict(rec) for rec in recommendations],
    }


def describe_age_group(age: float) -> dict[str, Any]:
    """Age-group constants plus per-age defaults for display."""
    age = float(age)
    key = classify_age(age)
    data = asdict(get_age_group_data(key))
    data["characteristics"] = list(data["characteristics"])

    return {
        "key": key,
        **data,
        "fall_asleep_minutes": get_fall_asleep_time(age),
        "optimal_cycles": calculate_optimal_cycles_for_age(age),
    }


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for tool invocation."""
    if tool_name == "get_sleep_plan":
        return get_sleep_plan(arguments)
    elif tool_name == "describe_age_group":
        return describe_age_group(**arguments)
    else:
        raise ValueError(f"Unknown tool: {tool_name}")
