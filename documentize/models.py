"""Core data models shared across documentize components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Attribute:
    """A single `name="value"` pair parsed from a tag."""

    name: str
    value: str


@dataclass(frozen=True)
class MetaTag:
    """The marker tag of a component and the pattern that locates it."""

    attributes: Tuple[Attribute, ...]
    pattern: re.Pattern

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of attribute ``name`` or ``default`` when absent."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return default


@dataclass(frozen=True)
class PropertySymbol:
    """A member discovered on a resolved shape declaration."""

    name: str
    declared_type: str


@dataclass(frozen=True)
class Event:
    """An event dispatched by a component."""

    name: str


@dataclass(frozen=True)
class Prop:
    """A prop accepted by a component."""

    name: str
    declared_type: str = ""


@dataclass(frozen=True)
class SlotProperty:
    """A property exposed by a slot to its consumer."""

    name: str
    declared_type: str = ""


@dataclass(frozen=True)
class Slot:
    """A named slot and the properties it exposes."""

    name: str
    properties: Tuple[SlotProperty, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Metadata:
    """Everything documentize knows about one component."""

    filename: str
    description: str = ""
    events: Tuple[Event, ...] = field(default_factory=tuple)
    props: Tuple[Prop, ...] = field(default_factory=tuple)
    slots: Tuple[Slot, ...] = field(default_factory=tuple)


__all__ = [
    "Attribute",
    "Event",
    "MetaTag",
    "Metadata",
    "Prop",
    "PropertySymbol",
    "Slot",
    "SlotProperty",
]
