"""
Common recurring pattern presets offered as starting points in the editor.
"""

from typing import Any, Dict, List

from domain.models.pattern import Frequency

COMMON_PATTERNS: List[Dict[str, Any]] = [
    {
        "name": "Daily Cardio",
        "description": "Cardio workout every day",
        "frequency": Frequency.DAILY,
    },
    {
        "name": "MWF Strength",
        "description": "Strength training Monday, Wednesday, Friday",
        "frequency": Frequency.WEEKLY,
        "days_of_week": [1, 3, 5],
    },
    {
        "name": "Weekend Warrior",
        "description": "Intense workouts on weekends",
        "frequency": Frequency.WEEKLY,
        "days_of_week": [0, 6],
    },
    {
        "name": "Leg Day (3x/week)",
        "description": "Leg workout 3 times per week",
        "frequency": Frequency.CUSTOM,
        "times_per_week": 3,
    },
    {
        "name": "Upper Body (2x/week)",
        "description": "Upper body workout 2 times per week",
        "frequency": Frequency.CUSTOM,
        "times_per_week": 2,
    },
    {
        "name": "Full Body (4x/week)",
        "description": "Full body workout 4 times per week",
        "frequency": Frequency.CUSTOM,
        "times_per_week": 4,
    },
]


def get_common_patterns() -> List[Dict[str, Any]]:
    """Return the presets as JSON-ready dicts (a fresh copy per call)."""
    presets = []
    for preset in COMMON_PATTERNS:
        item = dict(preset)
        item["frequency"] = preset["frequency"].value
        if "days_of_week" in preset:
            item["days_of_week"] = list(preset["days_of_week"])
        presets.append(item)
    return presets
