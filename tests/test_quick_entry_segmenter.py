from __future__ import annotations

import pytest

from ledger.quick_entry.segmenter import is_reg_no, segment, split_variant


def test_full_line_with_transport_block():
    segments = segment("50 steel 10x20 @250 credit from depot carting @200 truck MH12AB1234 pending")
    assert segments.quantity == "50"
    assert segments.item == "steel"
    assert segments.variant == "10x20"
    assert segments.rate == "250"
    assert segments.transaction_type == "credit"
    assert segments.source == "depot"
    assert segments.transport_cost == "200"
    assert segments.vehicle_type == "truck"
    assert segments.reg_no == "MH12AB1234"
    assert segments.payment_status == "pending"


def test_simple_line_keeps_source_words():
    raw = "30 cement @100 debit from site A"
    segments = segment(raw)
    assert segments.item == "cement"
    assert segments.item_start == 3
    assert segments.rate == "100"
    assert segments.transaction_type == "debit"
    assert segments.source == "site A"
    start, end = segments.source_span
    assert raw[start:end] == "site A"
    assert segments.transport_cost is None
    assert segments.payment_status is None


def test_empty_line_yields_empty_slots():
    segments = segment("")
    assert segments.quantity is None
    assert segments.item == ""
    assert segments.rate is None
    assert segments.source == ""
    assert segments.item_start is None


@pytest.mark.parametrize(
    "raw,source,extra",
    [
        ("10 sand @50 from quarry advance", "quarry", {"payment_status": "advance"}),
        ("10 sand @50 from quarry MH12AB1234", "quarry", {"reg_no": "MH12AB1234"}),
        ("10 sand @50 from quarry carting @20", "quarry", {"transport_cost": "20"}),
        ("10 sand from quarry @50", "quarry", {"rate": "50"}),
        ("10 sand @50 from quarry @20 tempo", "quarry", {"transport_cost": "20", "vehicle_type": "tempo"}),
    ],
)
def test_source_stops_at_next_keyword(raw, source, extra):
    segments = segment(raw)
    assert segments.source == source
    for key, value in extra.items():
        assert getattr(segments, key) == value


def test_item_text_stops_at_keywords_without_rate():
    segments = segment("30 cement debit from site A")
    assert segments.item == "cement"
    assert segments.rate is None
    assert segments.source == "site A"


def test_dangling_at_sign_does_not_swallow_keyword():
    segments = segment("30 cement @ from site A")
    assert segments.rate == ""
    assert segments.source == "site A"


def test_spaced_rate_is_read():
    assert segment("30 cement @ 100").rate == "100"


def test_unknown_trailing_tokens_are_ignored():
    segments = segment("10 sand @50 credit whatever else")
    assert segments.item == "sand"
    assert segments.source == ""
    assert segments.vehicle_type == ""


def test_malformed_quantity_is_kept_as_typed():
    assert segment("1.2.3 sand @5").quantity == "1.2.3"


def test_line_without_quantity_is_all_item():
    segments = segment("cement @100")
    assert segments.quantity is None
    assert segments.item == "cement"
    assert segments.item_start == 0


def test_vehicle_words_collected_around_reg_no():
    segments = segment("5 sand @10 from quarry carting @300 tata MH12AB1234 tipper paid")
    assert segments.vehicle_type == "tata tipper"
    assert segments.reg_no == "MH12AB1234"
    assert segments.payment_status == "paid"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("steel 10x20", ("steel", "10x20")),
        ("plate 10 x 20 mm", ("plate", "10 x 20 mm")),
        ("sheet 8x4x2", ("sheet", "8x4x2")),
        ("pipe", ("pipe", "")),
        ("10x20", ("10x20", "")),
    ],
)
def test_split_variant(text, expected):
    assert split_variant(text) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("MH12AB1234", True),
        ("ka01f1234", True),
        ("DL-3C-AB-1234", False),
        ("truck", False),
        ("site", False),
    ],
)
def test_reg_no_shape(token, expected):
    assert is_reg_no(token) is expected


def test_signed_numbers_stay_in_their_slots():
    segments = segment("-5 cement @-2 from site A")
    assert segments.quantity == "-5"
    assert segments.item == "cement"
    assert segments.rate == "-2"


def test_item_text_keeps_dimension_before_split():
    segments = segment("5 plate 8x30 @10")
    assert segments.item_text == "plate 8x30"
    assert segments.item == "plate"
    assert segments.variant == "8x30"
