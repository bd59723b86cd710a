"""
tat/core/registry.py

Leg identities and the registry that interns leg names.

A Leg is identified by its integer id alone; the name it carries is
display metadata. LegRegistry hands out sequential ids starting at 0
and keeps the name <-> id tables used for display.

Two ways to obtain a Leg:
- leg_from_name: interned, the same name always yields the same id
- leg_from_id: wraps a caller-chosen id, bypassing the tables. Nothing
  prevents such an id from colliding with an interned one.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from tat.core.catalog import STANDARD_LEG_NAMES, register_standard_legs

logger = logging.getLogger(__name__)

LegID = int


def placeholder_name(leg_id: LegID) -> str:
    """Display name used for ids that were never interned."""
    return f"UserDefinedLeg{leg_id}"


@dataclass(frozen=True, order=True)
class Leg:
    """
    Identity of one tensor axis.

    Attributes:
        id: Identity; the only field used for equality, ordering and hashing
        name: Registered name, if known when the Leg was created

    The name is captured at creation and never refreshed: a Leg wrapped
    from an id that is interned later still prints as UserDefinedLeg<id>.
    LegRegistry.display_name always consults the current tables.
    """
    id: LegID
    name: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.name if self.name is not None else placeholder_name(self.id)

    def __repr__(self) -> str:
        return f"Leg({self.id}, {str(self)!r})"


class LegRegistry:
    """
    Interner mapping leg names to ids.

    Attributes:
        name_to_id: Leg name -> ID
        id_to_name: ID -> leg name
        next_id: Next id handed out by leg_from_name
    """

    def __init__(self):
        self.name_to_id: Dict[str, LegID] = {}
        self.id_to_name: Dict[LegID, str] = {}
        self.next_id: LegID = 0
        self._lock = threading.Lock()

    @classmethod
    def with_standard_legs(cls) -> "LegRegistry":
        """Build a registry pre-populated with the conventional leg catalog."""
        registry = cls()
        register_standard_legs(registry)
        return registry

    def leg_from_name(self, name: str) -> Leg:
        """
        Get the Leg for name, allocating the next id on first use.

        Repeated calls with the same name return equal Legs.
        """
        with self._lock:
            lid = self.name_to_id.get(name)
            if lid is None:
                lid = self.next_id
                self.next_id += 1
                self.name_to_id[name] = lid
                self.id_to_name[lid] = name
                logger.debug("interned leg %r as id %d", name, lid)
        return Leg(lid, name)

    def leg_from_id(self, leg_id: LegID) -> Leg:
        """
        Wrap leg_id directly without touching the tables.

        The id is not checked against interned ids; if it coincides with
        one, the two Legs compare equal.
        """
        lid = int(leg_id)
        return Leg(lid, self.id_to_name.get(lid))

    def display_name(self, leg: Leg) -> str:
        """Registered name for leg's id, or a UserDefinedLeg<id> placeholder."""
        name = self.id_to_name.get(leg.id)
        if name is None:
            return placeholder_name(leg.id)
        return name

    def catalog(self) -> Dict[str, Leg]:
        """Legs of the conventional catalog, registering any that are missing."""
        return register_standard_legs(self)

    def names(self) -> List[str]:
        """Registered names in id order."""
        return [self.id_to_name[i] for i in sorted(self.id_to_name)]

    def __contains__(self, name: object) -> bool:
        return name in self.name_to_id

    def __len__(self) -> int:
        return len(self.name_to_id)

    def __iter__(self) -> Iterator[Leg]:
        for lid in sorted(self.id_to_name):
            yield Leg(lid, self.id_to_name[lid])


# Process-wide registry, pre-populated with the catalog at import.
default_registry = LegRegistry.with_standard_legs()


def leg_from_name(name: str) -> Leg:
    """Intern name in the default registry."""
    return default_registry.leg_from_name(name)


def leg_from_id(leg_id: LegID) -> Leg:
    """Wrap leg_id using the default registry for display."""
    return default_registry.leg_from_id(leg_id)


def display_name(leg: Leg) -> str:
    """Display name of leg according to the default registry."""
    return default_registry.display_name(leg)


__all__ = [
    "Leg",
    "LegID",
    "LegRegistry",
    "STANDARD_LEG_NAMES",
    "default_registry",
    "display_name",
    "leg_from_id",
    "leg_from_name",
    "placeholder_name",
]
