"""
Domain enums for the macro tracker.
Contains all enumeration types used across the domain models.
"""

import enum


class MacroUnit(str, enum.Enum):
    """What amount an ingredient's macro values refer to"""

    PER_UNIT = "per_unit"
    PER_100G = "per_100g"


class ProgressStatus(str, enum.Enum):
    """Where a daily macro total sits relative to its target range"""

    BELOW_MIN = "below_min"
    ABOVE_MAX = "above_max"
    WITHIN_RANGE = "within_range"
    NO_TARGET = "no_target"


MACROS = ("carbs", "fat", "protein", "kcal")
