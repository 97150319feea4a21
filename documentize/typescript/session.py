"""Tree-sitter backed TypeScript session.

The session owns the parser and every source unit registered against it. It
answers two questions for the resolver: where is the declaration called
``name`` of a given kind, and what is the text of a syntax node.
"""

from __future__ import annotations

import itertools
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from ..logging import get_logger

_LOGGER = get_logger("typescript.session")

INTERFACE = "interface"
TYPE_ALIAS = "type"

_DECLARATION_KINDS = {
    "interface_declaration": INTERFACE,
    "type_alias_declaration": TYPE_ALIAS,
}


class SourceUnit:
    """A parsed TypeScript source registered in a session."""

    def __init__(self, name: str, source: str, parser: Parser) -> None:
        self.name = name
        self.source = source
        self._source_bytes = source.encode("utf-8")
        self.tree = parser.parse(self._source_bytes)
        self._declarations: Dict[str, Dict[str, List[Node]]] = {
            INTERFACE: {},
            TYPE_ALIAS: {},
        }
        self._index()

    def _index(self) -> None:
        for node in self.tree.root_node.named_children:
            if node.type == "export_statement":
                declaration = node.child_by_field_name("declaration")
                if declaration is None:
                    continue
                node = declaration
            kind = _DECLARATION_KINDS.get(node.type)
            if kind is None:
                continue
            name_node = node.child_by_field_name("name")
            if name_node is None:
                continue
            self._declarations[kind].setdefault(self.text(name_node), []).append(node)

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error

    def text(self, node: Node) -> str:
        return self._source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def declarations(self, name: str, kind: str) -> List[Node]:
        return list(self._declarations[kind].get(name, ()))

    def __repr__(self) -> str:
        return f"SourceUnit({self.name!r})"


@dataclass(frozen=True)
class Declaration:
    """A declaration node together with the unit it was found in."""

    name: str
    kind: str
    node: Node
    unit: SourceUnit


class TypeScriptSession:
    """Long-lived set of TypeScript sources shared by every resolution.

    Ephemeral units (one per processed component) are looked up first;
    library units added with :meth:`add_library` act as the shared
    declaration files every component can reference.
    """

    def __init__(self, parser: Optional[Parser] = None) -> None:
        self._parser = parser
        self._counter = itertools.count(1)
        self._units: Dict[str, SourceUnit] = {}
        self._libraries: List[SourceUnit] = []

    @property
    def parser(self) -> Parser:
        if self._parser is None:
            self._parser = get_parser("typescript")
        return self._parser

    def create_unit(self, filename: str, source: str) -> SourceUnit:
        """Register ``source`` under a name unique to this call."""
        name = f"{filename}.{next(self._counter)}.ts"
        unit = SourceUnit(name, source, self.parser)
        if unit.has_errors:
            _LOGGER.debug("Syntax errors while parsing %s; resolving what parsed", name)
        self._units[name] = unit
        return unit

    def remove_unit(self, unit: SourceUnit) -> None:
        self._units.pop(unit.name, None)

    @contextmanager
    def unit(self, filename: str, source: str) -> Iterator[SourceUnit]:
        """Register an ephemeral unit for the duration of the ``with`` block."""
        unit = self.create_unit(filename, source)
        try:
            yield unit
        finally:
            self.remove_unit(unit)

    def add_library(self, name: str, source: str) -> SourceUnit:
        """Register a persistent unit visible to every lookup."""
        unit = SourceUnit(name, source, self.parser)
        self._libraries.append(unit)
        return unit

    def load_library(self, path: Path) -> SourceUnit:
        return self.add_library(str(path), path.read_text(encoding="utf-8"))

    @property
    def units(self) -> List[SourceUnit]:
        return list(self._units.values())

    def find_declarations(self, name: str, kind: str, unit: SourceUnit) -> List[Declaration]:
        """Return every declaration of ``name`` under ``kind`` visible from ``unit``.

        Declarations in ``unit`` shadow library declarations of the same name.
        """
        for candidate in [unit, *self._libraries]:
            nodes = candidate.declarations(name, kind)
            if nodes:
                return [Declaration(name, kind, node, candidate) for node in nodes]
        return []


__all__ = [
    "Declaration",
    "INTERFACE",
    "SourceUnit",
    "TYPE_ALIAS",
    "TypeScriptSession",
]
