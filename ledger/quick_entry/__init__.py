from __future__ import annotations

from ledger.quick_entry.catalog import CatalogSnapshot
from ledger.quick_entry.matcher import resolve
from ledger.quick_entry.parser import QuickEntryParser
from ledger.quick_entry.segmenter import segment
from ledger.quick_entry.serializer import compute_amount, to_form_data
from ledger.quick_entry.splice import active_suggestions, apply_suggestion, replace_segment
from ledger.quick_entry.types import FieldMatch, MatchableItem, ParsedCommand, ParsePreview, Variant, VariantMatch


def preview(parser: QuickEntryParser, raw: str) -> ParsePreview:
    command = parser.parse(raw)
    return ParsePreview(
        command=command,
        amount=compute_amount(command),
        suggestions=active_suggestions(command),
    )


__all__ = [
    "CatalogSnapshot",
    "FieldMatch",
    "MatchableItem",
    "ParsePreview",
    "ParsedCommand",
    "QuickEntryParser",
    "Variant",
    "VariantMatch",
    "active_suggestions",
    "apply_suggestion",
    "compute_amount",
    "preview",
    "replace_segment",
    "resolve",
    "segment",
    "to_form_data",
]
