"""Extraction of ``<script>`` blocks from Svelte component markup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..errors import AmbiguousScriptError
from .attributes import parse_attributes

_SCRIPT_PATTERN = re.compile(
    r"<script(?P<attributes>(?:[^>\"']|\"[^\"]*\"|'[^']*')*)>(?P<content>.*?)</script>",
    re.DOTALL | re.IGNORECASE,
)


@dataclass(frozen=True)
class Script:
    """A script block and its attributes."""

    attributes: Dict[str, str]
    content: str

    @property
    def is_module(self) -> bool:
        # Svelte 4 uses `context="module"`, Svelte 5 a bare `module` attribute.
        return self.attributes.get("context") == "module" or "module" in self.attributes


def extract_scripts(content: str) -> List[Script]:
    """Return every script block in document order."""
    scripts: List[Script] = []
    for match in _SCRIPT_PATTERN.finditer(content):
        attributes = {
            attribute.name: attribute.value
            for attribute in parse_attributes(match.group("attributes"))
        }
        scripts.append(Script(attributes=attributes, content=match.group("content")))
    return scripts


def extract_module_script(content: str) -> Optional[Script]:
    """Return the module-context script, if any.

    Raises:
        AmbiguousScriptError: when more than one module script is present.
    """
    scripts = [script for script in extract_scripts(content) if script.is_module]
    if len(scripts) > 1:
        raise AmbiguousScriptError("Multiple scripts with context module found.")
    return scripts[0] if scripts else None


def extract_instance_script(content: str) -> Optional[Script]:
    """Return the instance script, if any.

    Raises:
        AmbiguousScriptError: when more than one instance script is present.
    """
    scripts = [script for script in extract_scripts(content) if not script.is_module]
    if len(scripts) > 1:
        raise AmbiguousScriptError("Multiple instance scripts found.")
    return scripts[0] if scripts else None


def script_source(content: str) -> str:
    """Concatenate module and instance script contents into one TypeScript source."""
    module = extract_module_script(content)
    instance = extract_instance_script(content)
    module_text = module.content if module else ""
    instance_text = instance.content if instance else ""
    return f"{module_text}\n{instance_text}"


__all__ = [
    "Script",
    "extract_instance_script",
    "extract_module_script",
    "extract_scripts",
    "script_source",
]
