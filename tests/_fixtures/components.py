"""Helpers for writing Svelte components in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, Mapping

from documentize.models import Attribute


def svelte_component(script: str = "", meta: str = "<meta data-documentize />", body: str = "") -> str:
    """Return component markup with a TypeScript instance script and a marker tag."""
    return (
        '<script lang="ts">\n'
        f"{textwrap.dedent(script).strip()}\n"
        "</script>\n\n"
        f"{meta}\n\n"
        f"{textwrap.dedent(body).strip()}\n"
    )


def compile_attributes(attributes: Iterable[Attribute]) -> str:
    """Render attributes back into tag attribute syntax."""
    parts = []
    for attribute in attributes:
        if not attribute.value:
            parts.append(attribute.name)
        elif '"' in attribute.value:
            parts.append(f"{attribute.name}='{attribute.value}'")
        else:
            parts.append(f'{attribute.name}="{attribute.value}"')
    return " ".join(parts)


class ComponentBuilder:
    """Utility for writing components into a throwaway project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ComponentBuilder", "compile_attributes", "svelte_component"]
