"""Tests for documentize.markup.scripts."""

from __future__ import annotations

import pytest

from documentize.errors import AmbiguousScriptError
from documentize.markup.scripts import (
    extract_instance_script,
    extract_module_script,
    extract_scripts,
    script_source,
)

COMPONENT = """
<script context="module" lang="ts">
  export type Size = 'sm' | 'lg';
</script>

<script lang="ts">
  type $$Props = { size: Size };
</script>

<div />
"""


def test_extract_scripts_returns_attributes_and_content() -> None:
    scripts = extract_scripts(COMPONENT)

    assert len(scripts) == 2
    assert scripts[0].attributes == {"context": "module", "lang": "ts"}
    assert "export type Size" in scripts[0].content
    assert scripts[1].attributes == {"lang": "ts"}


def test_module_and_instance_scripts_are_told_apart() -> None:
    module = extract_module_script(COMPONENT)
    instance = extract_instance_script(COMPONENT)

    assert module is not None and module.is_module
    assert instance is not None and not instance.is_module
    assert "$$Props" in instance.content


def test_bare_module_attribute_marks_module_script() -> None:
    module = extract_module_script('<script module lang="ts">export const x = 1;</script>')

    assert module is not None
    assert module.content == "export const x = 1;"


def test_script_source_concatenates_module_first() -> None:
    source = script_source(COMPONENT)

    assert source.index("export type Size") < source.index("$$Props")


def test_script_source_without_scripts_is_blank() -> None:
    assert script_source("<div />").strip() == ""


def test_multiple_instance_scripts_are_rejected() -> None:
    content = "<script>let a;</script><script>let b;</script>"

    with pytest.raises(AmbiguousScriptError):
        extract_instance_script(content)


def test_multiple_module_scripts_are_rejected() -> None:
    content = '<script context="module"></script><script context="module"></script>'

    with pytest.raises(AmbiguousScriptError):
        extract_module_script(content)


def test_quoted_attribute_values_may_contain_angle_brackets() -> None:
    content = (
        '<script lang="ts" generics="T extends Record<string, unknown>">\n'
        "  type $$Props = { a: T };\n"
        "</script>\n"
    )

    (script,) = extract_scripts(content)

    assert script.attributes == {"lang": "ts", "generics": "T extends Record<string, unknown>"}
    assert script.content.strip() == "type $$Props = { a: T };"
    assert script_source(content).strip() == "type $$Props = { a: T };"
