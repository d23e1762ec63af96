from __future__ import annotations

import re

from ledger.quick_entry.segmenter import segment
from ledger.quick_entry.types import ParsedCommand, SuggestionField, SuggestionPrompt


def _keyword_re(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def replace_segment(raw: str, start_keyword: str, end_keyword: str, replacement: str) -> str:
    """Replace the text between two keywords, keeping everything else.

    `replace_segment("30 cement @100 from site A carting @50", "from", "carting", "Depot B")`
    gives `"30 cement @100 from Depot B carting @50"`. Without the end keyword
    the replacement runs to the end of the line; without the start keyword
    the line comes back unchanged.
    """
    start = _keyword_re(start_keyword).search(raw)
    if not start:
        return raw
    after = start.end()
    while after < len(raw) and raw[after].isspace():
        after += 1
    prefix = raw[:after]
    if after == start.end():
        prefix += " "

    end = _keyword_re(end_keyword).search(raw, after)
    if not end:
        return prefix + replacement
    gap_start = end.start()
    while gap_start > after and raw[gap_start - 1].isspace():
        gap_start -= 1
    gap = raw[gap_start : end.start()] or " "
    return prefix + replacement + gap + raw[end.start() :]


def active_suggestions(command: ParsedCommand) -> SuggestionPrompt | None:
    """First unresolved field that has suggestions to offer, item before source."""
    if command.entity.raw and command.entity.match is None and command.entity.suggestions:
        return SuggestionPrompt(field="entity", label="Items", items=command.entity.suggestions)
    if command.source.raw and command.source.match is None and command.source.suggestions:
        return SuggestionPrompt(field="source", label="Sources", items=command.source.suggestions)
    return None


def apply_suggestion(raw: str, command: ParsedCommand, field: SuggestionField, name: str) -> str:
    """Rewrite only the item or source text of `raw` with an accepted name."""
    segments = segment(raw)
    if field == "entity":
        if segments.item_start is None or not command.entity.raw:
            return raw
        start = segments.item_start
        end = start + len(command.entity.raw)
        return raw[:start] + name + raw[end:]
    if segments.source_span is None:
        return replace_segment(raw, "from", "carting", name)
    start, end = segments.source_span
    return raw[:start] + name + raw[end:]
