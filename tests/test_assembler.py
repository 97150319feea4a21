"""Tests for documentize.assembler."""

from __future__ import annotations

from documentize.assembler import (
    EMPTY_EVENTS_TEXT,
    EMPTY_PROPS_TEXT,
    EMPTY_SLOTS_TEXT,
    EVENTS_TEXT,
    PROPS_TEXT,
    SLOTS_TEXT,
    build_document,
    collation_key,
    render_comment,
    render_metadata,
)
from documentize.models import Event, Metadata, Prop, Slot, SlotProperty

EXPECTED_BUTTON_DOC = "".join(
    [
        "\n@component\n\n",
        "\nLorem ipsum\n\n",
        "### Events\n",
        "\nThe following events are dispatched by this component:\n\n",
        "\n| Event   |\n| :------ |\n| `click` |\n\n",
        "### Props\n",
        "\nThe following props are available for this component:\n\n",
        "\n| Prop       | Description |\n| :--------- | :---------- |\n| `disabled` |             |\n\n",
        "### Slots\n",
        "\nThe following slots are available for this component:\n\n",
        "\n| Slot      | Prop  |\n| :-------- | :---- |\n| `default` |       |\n|           | `foo` |\n\n",
    ]
)


def _button() -> Metadata:
    return Metadata(
        filename="button.svelte",
        description="Lorem ipsum",
        events=(Event("click"),),
        props=(Prop("disabled"),),
        slots=(Slot("default", (SlotProperty("foo"),)),),
    )


def test_render_metadata_matches_reference_document() -> None:
    assert render_metadata(_button()) == EXPECTED_BUTTON_DOC


def test_render_comment_wraps_trimmed_document() -> None:
    comment = render_comment(_button())

    assert comment.startswith("<!--\n@component\n\n\nLorem ipsum\n\n### Events\n")
    assert comment.endswith("|           | `foo` |\n-->")


def test_empty_metadata_uses_empty_sentences_only() -> None:
    rendered = render_metadata(Metadata(filename="empty.svelte"))

    for sentence in (EMPTY_EVENTS_TEXT, EMPTY_PROPS_TEXT, EMPTY_SLOTS_TEXT):
        assert rendered.count(sentence) == 1
    for sentence in (EVENTS_TEXT, PROPS_TEXT, SLOTS_TEXT):
        assert sentence not in rendered
    assert "|" not in rendered


def test_sections_appear_in_fixed_order() -> None:
    rendered = render_metadata(Metadata(filename="x.svelte", description="Describes x"))

    positions = [
        rendered.index(marker)
        for marker in ("@component", "Describes x", "### Events", "### Props", "### Slots")
    ]
    assert positions == sorted(positions)


def test_rows_are_sorted_by_name() -> None:
    metadata = Metadata(
        filename="list.svelte",
        events=(Event("select"), Event("Change"), Event("blur")),
        props=(Prop("zIndex"), Prop("items"), Prop("Items")),
        slots=(
            Slot("item", (SlotProperty("value"), SlotProperty("index"))),
            Slot("empty"),
        ),
    )

    rendered = render_metadata(metadata)

    def order(*names: str) -> list[int]:
        return [rendered.index(f"`{name}`") for name in names]

    assert order("blur", "Change", "select") == sorted(order("blur", "Change", "select"))
    assert order("items", "Items", "zIndex") == sorted(order("items", "Items", "zIndex"))
    assert order("empty", "item", "index", "value") == sorted(order("empty", "item", "index", "value"))


def test_slot_rows_follow_their_slot() -> None:
    metadata = Metadata(
        filename="card.svelte",
        slots=(Slot("header", (SlotProperty("title"),)), Slot("footer", (SlotProperty("year"),))),
    )

    table_lines = [line for line in render_metadata(metadata).splitlines() if line.startswith("| ")]

    assert [line.replace(" ", "") for line in table_lines[2:]] == [
        "|`footer`||",
        "||`year`|",
        "|`header`||",
        "||`title`|",
    ]


def test_collation_key_orders_like_locale_compare() -> None:
    names = ["b", "A", "a", "éclair", "fig", "Z"]

    assert sorted(names, key=collation_key) == ["a", "A", "b", "éclair", "fig", "Z"]


def test_build_document_is_idempotent() -> None:
    metadata = _button()

    assert render_metadata(metadata) == render_metadata(metadata)
    assert str(build_document(metadata)) == str(build_document(metadata))
