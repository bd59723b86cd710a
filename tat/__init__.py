"""
TAT: named-leg dense tensors

Each axis of a tensor carries a Leg, a stable integer identity interned
from a human-readable name, so elements can be addressed by leg instead
of by axis position.

Key components:
- core: Leg, LegRegistry, the conventional leg catalog, error types
- tensor: dense Tensor container and elementwise operations
- utils: logging setup
"""

__version__ = "0.1.0"
__author__ = "TAT Team"

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
from tat.core.catalog import STANDARD_LEG_NAMES
from tat.tensor.tensor import Tensor
from tat.tensor.ops import zip_to_new, map_to_new

__all__ = [
    # Errors
    "TATError",
    "RankMismatch",
    "IndexOutOfRange",
    "UnknownLeg",
    "ShapeMismatch",
    # Legs
    "Leg",
    "LegRegistry",
    "default_registry",
    "leg_from_name",
    "leg_from_id",
    "display_name",
    "STANDARD_LEG_NAMES",
    # Tensors
    "Tensor",
    "zip_to_new",
    "map_to_new",
]
