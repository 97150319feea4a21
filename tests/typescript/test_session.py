"""Tests for documentize.typescript.session."""

from __future__ import annotations

from pathlib import Path

from documentize.typescript.session import INTERFACE, TYPE_ALIAS, TypeScriptSession


def test_create_unit_names_are_unique_per_call(ts_session: TypeScriptSession) -> None:
    first = ts_session.create_unit("button.svelte", "type A = {};")
    second = ts_session.create_unit("button.svelte", "type A = {};")
    try:
        assert first.name != second.name
        assert first.name.startswith("button.svelte.")
        assert first.name.endswith(".ts")
        assert {first.name, second.name} <= {unit.name for unit in ts_session.units}
    finally:
        ts_session.remove_unit(first)
        ts_session.remove_unit(second)


def test_unit_context_removes_unit_afterwards(ts_session: TypeScriptSession) -> None:
    with ts_session.unit("card.svelte", "interface Props { title: string }") as unit:
        assert unit in ts_session.units
    assert unit not in ts_session.units


def test_find_declarations_by_kind(ts_session: TypeScriptSession) -> None:
    source = """
    interface Props { a: string }
    export interface Props { b: number }
    export type Events = { click: MouseEvent };
    const value = 1;
    """
    with ts_session.unit("x.svelte", source) as unit:
        interfaces = ts_session.find_declarations("Props", INTERFACE, unit)
        aliases = ts_session.find_declarations("Events", TYPE_ALIAS, unit)

        assert [declaration.kind for declaration in interfaces] == [INTERFACE, INTERFACE]
        assert len(aliases) == 1
        assert aliases[0].unit is unit
        assert ts_session.find_declarations("Props", TYPE_ALIAS, unit) == []
        assert ts_session.find_declarations("value", TYPE_ALIAS, unit) == []


def test_library_declarations_are_visible_but_shadowed(tmp_path: Path) -> None:
    session = TypeScriptSession()
    library = tmp_path / "shared.d.ts"
    library.write_text("export interface Shared { id: string }\nexport type Local = { x: 1 };", encoding="utf-8")
    session.load_library(library)

    with session.unit("a.svelte", "type Local = { y: 2 };") as unit:
        shared = session.find_declarations("Shared", INTERFACE, unit)
        local = session.find_declarations("Local", TYPE_ALIAS, unit)

    assert shared and shared[0].unit.name == str(library)
    assert local and local[0].unit is unit


def test_units_do_not_see_each_other(ts_session: TypeScriptSession) -> None:
    with ts_session.unit("one.svelte", "interface OnlyHere { a: string }"):
        with ts_session.unit("two.svelte", "") as other:
            assert ts_session.find_declarations("OnlyHere", INTERFACE, other) == []


def test_unit_text_slices_source(ts_session: TypeScriptSession) -> None:
    with ts_session.unit("t.svelte", "type Événement = { é: string };") as unit:
        declaration = ts_session.find_declarations("Événement", TYPE_ALIAS, unit)[0]
        value = declaration.node.child_by_field_name("value")
        assert unit.text(value) == "{ é: string }"
