"""Markdown document model and renderer."""

from .nodes import (
    HEADING_LEVELS,
    Builder,
    Container,
    Heading,
    Node,
    Paragraph,
    Section,
    Text,
    render,
)
from .table import COLUMN_ALIGNMENTS, Cell, Column, Row, Table, column_widths, render_table

__all__ = [
    "Builder",
    "COLUMN_ALIGNMENTS",
    "Cell",
    "Column",
    "Container",
    "HEADING_LEVELS",
    "Heading",
    "Node",
    "Paragraph",
    "Row",
    "Section",
    "Table",
    "Text",
    "column_widths",
    "render",
    "render_table",
]
