"""Resolution of shape declarations into flat member lists.

A shape is either an ``interface`` (possibly extending others, possibly
declared several times) or a ``type`` alias to an object literal, an
intersection, a union, or a reference to another shape. Resolution follows
those relationships through the session and merges members last-write-wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Set, Tuple, Union

from tree_sitter import Node

from ..errors import AmbiguousSymbolError
from ..models import PropertySymbol
from .session import INTERFACE, TYPE_ALIAS, Declaration, SourceUnit, TypeScriptSession

_IMPLICIT_TYPE = "unknown"

# Utility types whose members are those of their first type argument.
_PASSTHROUGH_GENERICS = frozenset({"Partial", "Required", "Readonly"})


@dataclass(frozen=True)
class Found:
    """The declaration exists; ``members`` is its flattened member list.

    ``nested`` maps each member name to the members of its own type, and is
    only populated by :meth:`SymbolResolver.resolve_nested`.
    """

    name: str
    members: Tuple[PropertySymbol, ...]
    nested: Mapping[str, Tuple[PropertySymbol, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class Missing:
    """No declaration with this name is visible."""

    name: str


Resolution = Union[Found, Missing]


@dataclass(frozen=True)
class _Member:
    symbol: PropertySymbol
    type_node: Optional[Node]
    unit: SourceUnit


_Members = Dict[str, _Member]


class SymbolResolver:
    """Looks shape declarations up in a :class:`TypeScriptSession`."""

    def __init__(self, session: TypeScriptSession) -> None:
        self.session = session

    def resolve(self, name: str, unit: SourceUnit) -> Resolution:
        """Resolve ``name`` to its flattened members.

        Raises:
            AmbiguousSymbolError: when ``name`` is both an interface and a type alias.
        """
        declarations = self._lookup(name, unit)
        if not declarations:
            return Missing(name)
        members = self._declaration_members(declarations, frozenset({name}))
        return Found(name, tuple(member.symbol for member in members.values()))

    def resolve_nested(self, name: str, unit: SourceUnit) -> Resolution:
        """Like :meth:`resolve`, also expanding every member's type one level."""
        declarations = self._lookup(name, unit)
        if not declarations:
            return Missing(name)
        visiting = frozenset({name})
        members = self._declaration_members(declarations, visiting)
        nested: Dict[str, Tuple[PropertySymbol, ...]] = {}
        for member_name, member in members.items():
            if member.type_node is None:
                nested[member_name] = ()
                continue
            inner = self._type_members(member.type_node, member.unit, visiting)
            nested[member_name] = tuple(item.symbol for item in inner.values())
        return Found(
            name,
            tuple(member.symbol for member in members.values()),
            nested,
        )

    def _lookup(self, name: str, unit: SourceUnit) -> List[Declaration]:
        interfaces = self.session.find_declarations(name, INTERFACE, unit)
        aliases = self.session.find_declarations(name, TYPE_ALIAS, unit)
        if interfaces and aliases:
            raise AmbiguousSymbolError(name)
        if interfaces:
            # Interfaces with the same name merge, in source order.
            return interfaces
        # A repeated type alias is a compile error; the first one wins.
        return aliases[:1]

    def _declaration_members(
        self, declarations: List[Declaration], visiting: FrozenSet[str]
    ) -> _Members:
        members: _Members = {}
        for declaration in declarations:
            node = declaration.node
            unit = declaration.unit
            if declaration.kind == INTERFACE:
                for clause in node.named_children:
                    if clause.type in {"extends_type_clause", "extends_clause"}:
                        for base in clause.named_children:
                            members.update(self._type_members(base, unit, visiting))
                body = node.child_by_field_name("body")
                if body is not None:
                    members.update(self._object_members(body, unit))
            else:
                value = node.child_by_field_name("value")
                if value is not None:
                    members.update(self._type_members(value, unit, visiting))
        return members

    def _type_members(self, node: Node, unit: SourceUnit, visiting: FrozenSet[str]) -> _Members:
        kind = node.type
        if kind in {"object_type", "interface_body"}:
            return self._object_members(node, unit)
        if kind == "intersection_type":
            members: _Members = {}
            for operand in node.named_children:
                members.update(self._type_members(operand, unit, visiting))
            return members
        if kind == "union_type":
            return self._union_members(node, unit, visiting)
        if kind == "parenthesized_type":
            inner = node.named_children
            return self._type_members(inner[0], unit, visiting) if inner else {}
        if kind in {"type_identifier", "identifier"}:
            return self._reference_members(unit.text(node), unit, visiting)
        if kind == "generic_type":
            return self._generic_members(node, unit, visiting)
        # Literals, primitives, arrays, functions and namespaced references
        # contribute no members.
        return {}

    def _union_members(self, node: Node, unit: SourceUnit, visiting: FrozenSet[str]) -> _Members:
        # Only members present on every branch are accessible on a union.
        branches = [self._type_members(child, unit, visiting) for child in node.named_children]
        if not branches:
            return {}
        shared = set(branches[0])
        for branch in branches[1:]:
            shared &= set(branch)
        return {name: member for name, member in branches[0].items() if name in shared}

    def _generic_members(self, node: Node, unit: SourceUnit, visiting: FrozenSet[str]) -> _Members:
        name_node = node.child_by_field_name("name")
        arguments_node = node.child_by_field_name("type_arguments")
        if name_node is None:
            return {}
        name = unit.text(name_node)
        arguments = arguments_node.named_children if arguments_node is not None else []
        if name in _PASSTHROUGH_GENERICS and arguments:
            return self._type_members(arguments[0], unit, visiting)
        if name in {"Pick", "Omit"} and len(arguments) == 2:
            members = self._type_members(arguments[0], unit, visiting)
            keys = self._literal_keys(arguments[1], unit)
            if name == "Pick":
                return {key: member for key, member in members.items() if key in keys}
            return {key: member for key, member in members.items() if key not in keys}
        # Type arguments of user generics are not substituted.
        return self._reference_members(name, unit, visiting)

    def _reference_members(self, name: str, unit: SourceUnit, visiting: FrozenSet[str]) -> _Members:
        if name in visiting:
            return {}
        declarations = self._lookup(name, unit)
        if not declarations:
            # Imported or built-in type the session cannot see.
            return {}
        return self._declaration_members(declarations, visiting | {name})

    def _literal_keys(self, node: Node, unit: SourceUnit) -> Set[str]:
        if node.type == "literal_type":
            return {
                _unquote(unit.text(child)) for child in node.named_children if child.type == "string"
            }
        if node.type in {"union_type", "parenthesized_type"}:
            keys: Set[str] = set()
            for child in node.named_children:
                keys |= self._literal_keys(child, unit)
            return keys
        return set()

    def _object_members(self, node: Node, unit: SourceUnit) -> _Members:
        members: _Members = {}
        for child in node.named_children:
            name_node = child.child_by_field_name("name")
            if name_node is None:
                continue
            name = _property_name(name_node, unit)
            if child.type == "property_signature":
                type_node = _annotated_type(child.child_by_field_name("type"))
                declared = unit.text(type_node).strip() if type_node is not None else _IMPLICIT_TYPE
                members[name] = _Member(PropertySymbol(name, declared), type_node, unit)
            elif child.type == "method_signature":
                parameters = child.child_by_field_name("parameters")
                returns = _annotated_type(child.child_by_field_name("return_type"))
                signature = "{} => {}".format(
                    unit.text(parameters) if parameters is not None else "()",
                    unit.text(returns) if returns is not None else _IMPLICIT_TYPE,
                )
                members[name] = _Member(PropertySymbol(name, signature), None, unit)
        return members


def _annotated_type(annotation: Optional[Node]) -> Optional[Node]:
    if annotation is None:
        return None
    if annotation.type != "type_annotation":
        return annotation
    children = annotation.named_children
    return children[0] if children else None


def _property_name(node: Node, unit: SourceUnit) -> str:
    text = unit.text(node)
    if node.type == "string":
        return _unquote(text)
    return text


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"', "`"}:
        return text[1:-1]
    return text


__all__ = ["Found", "Missing", "Resolution", "SymbolResolver"]
