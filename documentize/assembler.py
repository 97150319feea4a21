"""Assembly of the Markdown documentation block for a component."""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Tuple, TypeVar

from . import markdown as md
from .models import Event, Metadata, Prop, Slot

COMPONENT_PREFIX = "@component"

EVENTS_HEADER = "Events"
PROPS_HEADER = "Props"
SLOTS_HEADER = "Slots"

EMPTY_EVENTS_TEXT = "This component does not dispatch any events."
EMPTY_PROPS_TEXT = "This component does not have any props."
EMPTY_SLOTS_TEXT = "This component does not have any slots."

EVENTS_TEXT = "The following events are dispatched by this component:"
PROPS_TEXT = "The following props are available for this component:"
SLOTS_TEXT = "The following slots are available for this component:"

_T = TypeVar("_T")


def collation_key(text: str) -> Tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Accents and case are ignored first; on ties lowercase sorts before
    uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), text.swapcase()


def _sorted_by_name(items: Iterable[_T]) -> List[_T]:
    return sorted(items, key=lambda item: collation_key(item.name))  # type: ignore[attr-defined]


def _code(name: str) -> md.Cell:
    return md.Cell(md.Text(f"`{name}`"))


def _section(header: str, *children: md.Node) -> md.Section:
    return md.Section(md.Heading(3, md.Text(header)), *children)


def build_events_section(events: Iterable[Event]) -> md.Section:
    ordered = _sorted_by_name(events)
    if not ordered:
        return _section(EVENTS_HEADER, md.Paragraph(md.Text(EMPTY_EVENTS_TEXT)))
    table = md.Table(
        [md.Column("left", md.Text("Event"))],
        [md.Row(_code(event.name)) for event in ordered],
    )
    return _section(EVENTS_HEADER, md.Paragraph(md.Text(EVENTS_TEXT)), table)


def build_props_section(props: Iterable[Prop]) -> md.Section:
    ordered = _sorted_by_name(props)
    if not ordered:
        return _section(PROPS_HEADER, md.Paragraph(md.Text(EMPTY_PROPS_TEXT)))
    table = md.Table(
        [md.Column("left", md.Text("Prop")), md.Column("left", md.Text("Description"))],
        [md.Row(_code(prop.name), md.Cell()) for prop in ordered],
    )
    return _section(PROPS_HEADER, md.Paragraph(md.Text(PROPS_TEXT)), table)


def build_slots_section(slots: Iterable[Slot]) -> md.Section:
    ordered = _sorted_by_name(slots)
    if not ordered:
        return _section(SLOTS_HEADER, md.Paragraph(md.Text(EMPTY_SLOTS_TEXT)))
    rows: List[md.Row] = []
    for slot in ordered:
        rows.append(md.Row(_code(slot.name), md.Cell()))
        for prop in _sorted_by_name(slot.properties):
            rows.append(md.Row(md.Cell(), _code(prop.name)))
    table = md.Table(
        [md.Column("left", md.Text("Slot")), md.Column("left", md.Text("Prop"))],
        rows,
    )
    return _section(SLOTS_HEADER, md.Paragraph(md.Text(SLOTS_TEXT)), table)


def build_document(metadata: Metadata) -> md.Builder:
    """Return the document tree describing ``metadata``."""
    return md.Builder(
        md.Paragraph(md.Text(COMPONENT_PREFIX)),
        md.Paragraph(md.Text(metadata.description)),
        build_events_section(metadata.events),
        build_props_section(metadata.props),
        build_slots_section(metadata.slots),
    )


def render_metadata(metadata: Metadata) -> str:
    return md.render(build_document(metadata))


def render_comment(metadata: Metadata) -> str:
    """Wrap the rendered documentation in the HTML comment that replaces the marker tag."""
    return f"<!--\n{render_metadata(metadata).strip()}\n-->"


__all__ = [
    "build_document",
    "collation_key",
    "render_comment",
    "render_metadata",
]
