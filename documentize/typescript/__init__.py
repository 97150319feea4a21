"""TypeScript declaration lookup backed by tree-sitter."""

from .resolver import Found, Missing, Resolution, SymbolResolver
from .session import Declaration, SourceUnit, TypeScriptSession

__all__ = [
    "Declaration",
    "Found",
    "Missing",
    "Resolution",
    "SourceUnit",
    "SymbolResolver",
    "TypeScriptSession",
]
