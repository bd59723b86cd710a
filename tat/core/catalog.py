"""
tat/core/catalog.py

Conventional leg names for tensor-network lattice models.

190 names in total:
- (Phy + 8 lattice directions) x suffix "", "1".."9"   -> 90 names
- Leg0 .. Leg99                                         -> 100 names

Registering them into a fresh registry assigns ids 0..189 in table order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from tat.core.registry import Leg, LegRegistry


DIRECTIONS: Tuple[str, ...] = (
    "Phy",
    "Left",
    "Right",
    "Up",
    "Down",
    "LeftUp",
    "LeftDown",
    "RightUp",
    "RightDown",
)

SUFFIXES: Tuple[str, ...] = ("",) + tuple(str(n) for n in range(1, 10))


def _build_names() -> Tuple[str, ...]:
    names = [d + s for s in SUFFIXES for d in DIRECTIONS]
    names.extend(f"Leg{n}" for n in range(100))
    return tuple(names)


STANDARD_LEG_NAMES: Tuple[str, ...] = _build_names()


def register_standard_legs(registry: "LegRegistry") -> Dict[str, "Leg"]:
    """
    Intern every catalog name into registry.

    Already-registered names keep their existing ids.

    Returns:
        Map from catalog name to its Leg, in catalog order
    """
    return {name: registry.leg_from_name(name) for name in STANDARD_LEG_NAMES}
