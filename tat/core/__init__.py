"""
Core module: leg identities, the leg registry and error types.
"""

from tat.core.catalog import STANDARD_LEG_NAMES, register_standard_legs
from tat.core.exceptions import (
    TATError,
    RankMismatch,
    IndexOutOfRange,
    UnknownLeg,
    ShapeMismatch,
)
from tat.core.registry import (
    Leg,
    LegRegistry,
    default_registry,
    leg_from_name,
    leg_from_id,
    display_name,
)

__all__ = [
    "STANDARD_LEG_NAMES",
    "register_standard_legs",
    "TATError",
    "RankMismatch",
    "IndexOutOfRange",
    "UnknownLeg",
    "ShapeMismatch",
    "Leg",
    "LegRegistry",
    "default_registry",
    "leg_from_name",
    "leg_from_id",
    "display_name",
]
