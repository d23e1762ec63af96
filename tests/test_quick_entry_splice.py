from __future__ import annotations

import pytest

from ledger.quick_entry import CatalogSnapshot, MatchableItem, QuickEntryParser
from ledger.quick_entry.splice import active_suggestions, apply_suggestion, replace_segment


def _parser() -> QuickEntryParser:
    return QuickEntryParser(
        CatalogSnapshot(
            entities=(MatchableItem(id="1", name="Cement"), MatchableItem(id="2", name="White Cement")),
            destinations=(MatchableItem(id="d1", name="Site A"), MatchableItem(id="d2", name="Depot B")),
        )
    )


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("30 cement @100 from site A carting @50 truck", "30 cement @100 from Depot B carting @50 truck"),
        ("30 cement @100 from site A", "30 cement @100 from Depot B"),
        ("30 cement @100 FROM site A Carting @50", "30 cement @100 FROM Depot B Carting @50"),
        ("30 cement @100 from carting @50", "30 cement @100 from Depot B carting @50"),
        ("30 cement @100 from", "30 cement @100 from Depot B"),
    ],
)
def test_replace_segment(raw, expected):
    assert replace_segment(raw, "from", "carting", "Depot B") == expected


def test_replace_segment_without_start_keyword_is_noop():
    raw = "30 cement @100 carting @50"
    assert replace_segment(raw, "from", "carting", "Depot B") == raw


def test_replace_segment_needs_whole_word():
    raw = "30 fromage @100"
    assert replace_segment(raw, "from", "carting", "Depot B") == raw


def test_accepting_item_suggestion_keeps_rest_of_line():
    parser = _parser()
    raw = "30 cem 10x20 @100 from site A"
    command = parser.parse(raw)
    prompt = active_suggestions(command)
    assert prompt.field == "entity"
    assert prompt.label == "Items"
    updated = apply_suggestion(raw, command, "entity", prompt.items[0].name)
    assert updated == "30 Cement 10x20 @100 from site A"
    assert parser.parse(updated).entity.match.name == "Cement"


def test_accepting_source_suggestion_stops_before_status():
    parser = _parser()
    raw = "30 cement @100 from sit pending"
    command = parser.parse(raw)
    prompt = active_suggestions(command)
    assert prompt.field == "source"
    updated = apply_suggestion(raw, command, "source", prompt.items[0].name)
    assert updated == "30 cement @100 from Site A pending"
    assert parser.parse(updated).complete is True


def test_no_prompt_when_everything_resolves():
    command = _parser().parse("30 cement @100 from site A")
    assert active_suggestions(command) is None
