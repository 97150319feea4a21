"""Markdown document model.

Nodes form a closed set of small containers. Serialization lives in the
single :func:`render` dispatcher.
"""

from __future__ import annotations

from functools import singledispatch
from typing import List, Tuple, Union

from ..errors import InvalidHeadingLevel

HEADING_LEVELS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)
HEADING_MARKER = "#"


class Node:
    """Base class of every Markdown node."""

    def as_string(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)


Child = Union[Node, str]


def _coerce(child: Child) -> Node:
    if isinstance(child, str):
        return Text(child)
    if not isinstance(child, Node):
        raise TypeError(f"Expected a Markdown node or string, got {type(child).__name__}")
    return child


class Container(Node):
    """A node holding an ordered list of child nodes."""

    def __init__(self, *children: Child) -> None:
        self.children: List[Node] = []
        self.add(*children)

    def add(self, *children: Child):
        self.children.extend(_coerce(child) for child in children)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(child) for child in self.children)})"


class Text(Node):
    """Literal inline text."""

    def __init__(self, content: str = "") -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Paragraph(Container):
    """A block of inline nodes separated from its neighbours by blank lines."""


class Heading(Container):
    """An ATX heading; the level is validated on construction."""

    def __init__(self, level: int, *children: Child) -> None:
        if isinstance(level, bool) or not isinstance(level, int) or level not in HEADING_LEVELS:
            raise InvalidHeadingLevel(level)
        self.level = level
        super().__init__(*children)


class Section(Container):
    """A heading followed by the block nodes it introduces."""

    def __init__(self, heading: Heading, *children: Child) -> None:
        super().__init__(heading, *children)


class Builder(Container):
    """Root of a Markdown document."""


def join_inline(children: List[Node]) -> str:
    return " ".join(render(child) for child in children)


@singledispatch
def render(node: Node) -> str:
    """Serialize ``node`` and its descendants to Markdown."""
    raise TypeError(f"Cannot render {type(node).__name__}")


@render.register
def _render_text(node: Text) -> str:
    return node.content


@render.register
def _render_paragraph(node: Paragraph) -> str:
    return f"\n{join_inline(node.children).strip()}\n\n"


@render.register
def _render_heading(node: Heading) -> str:
    return f"{HEADING_MARKER * node.level} {join_inline(node.children).strip()}\n"


@render.register(Section)
@render.register(Builder)
def _render_blocks(node: Container) -> str:
    return "".join(render(child) for child in node.children)


__all__ = [
    "Builder",
    "Container",
    "HEADING_LEVELS",
    "Heading",
    "Node",
    "Paragraph",
    "Section",
    "Text",
    "join_inline",
    "render",
]
