"""Markdown tables and the width/alignment algorithm that renders them."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..errors import InvalidColumnAlignment
from .nodes import Child, Container, Node, join_inline, render

COLUMN_ALIGNMENTS = ("left", "right")


class Column(Container):
    """A table column: its alignment and header content.

    The alignment is only checked when the table is rendered.
    """

    def __init__(self, alignment: str, *children: Child) -> None:
        self.alignment = alignment
        super().__init__(*children)


class Cell(Container):
    """A single table cell."""


class Row(Node):
    """An ordered list of cells matched positionally to columns."""

    def __init__(self, *cells: Cell) -> None:
        self.cells: List[Cell] = []
        self.add(*cells)

    def add(self, *cells: Cell) -> "Row":
        for cell in cells:
            if not isinstance(cell, Cell):
                raise TypeError(f"Expected a Cell, got {type(cell).__name__}")
            self.cells.append(cell)
        return self

    def __repr__(self) -> str:
        return f"Row({', '.join(repr(cell) for cell in self.cells)})"


class Table(Node):
    """A table of columns and rows."""

    def __init__(self, columns: Iterable[Column], rows: Iterable[Row] = ()) -> None:
        self.columns: List[Column] = list(columns)
        self.rows: List[Row] = list(rows)

    def add(self, *rows: Row) -> "Table":
        self.rows.extend(rows)
        return self


def _cell_texts(row: Row, column_count: int) -> List[str]:
    # Extra cells are ignored and missing cells render empty.
    texts = [render(cell) for cell in row.cells[:column_count]]
    texts.extend("" for _ in range(column_count - len(texts)))
    return texts


def _separator(alignment: str, width: int) -> str:
    if alignment == "left":
        return ":" + "-" * (width - 1)
    if alignment == "right":
        return "-" * (width - 1) + ":"
    raise InvalidColumnAlignment(alignment)


def _pad(text: str, alignment: str, width: int) -> str:
    if alignment == "left":
        return text.ljust(width)
    if alignment == "right":
        return text.rjust(width)
    raise InvalidColumnAlignment(alignment)


def _frame(cells: Sequence[str]) -> str:
    return f"| {' | '.join(cells)} |"


def column_widths(table: Table) -> List[int]:
    """Return the widest header or cell text of every column."""
    widths = [len(render(column)) for column in table.columns]
    for row in table.rows:
        for index, text in enumerate(_cell_texts(row, len(widths))):
            widths[index] = max(widths[index], len(text))
    return widths


def render_table(table: Table) -> str:
    columns = table.columns
    # An all-empty column still needs room for its separator marker.
    widths = [max(width, 1) for width in column_widths(table)]

    # Header text is always left-justified, whatever the column alignment.
    lines = [
        _frame([render(column).ljust(width) for column, width in zip(columns, widths)]),
        _frame([_separator(column.alignment, width) for column, width in zip(columns, widths)]),
    ]
    for row in table.rows:
        texts = _cell_texts(row, len(columns))
        lines.append(
            _frame(
                [
                    _pad(text, column.alignment, width)
                    for text, column, width in zip(texts, columns, widths)
                ]
            )
        )
    return "\n" + "\n".join(lines) + "\n\n"


@render.register
def _render_column(node: Column) -> str:
    return join_inline(node.children)


@render.register
def _render_cell(node: Cell) -> str:
    return join_inline(node.children)


@render.register
def _render_row(node: Row) -> str:
    return " | ".join(render(cell) for cell in node.cells)


render.register(Table, render_table)


__all__ = [
    "COLUMN_ALIGNMENTS",
    "Cell",
    "Column",
    "Row",
    "Table",
    "column_widths",
    "render_table",
]
