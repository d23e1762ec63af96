from __future__ import annotations

import math
import re
from typing import Literal, Sequence

from ledger.quick_entry.matcher import rank_candidates, resolve
from ledger.quick_entry.normalize import format_number, normalize_name, parse_decimal
from ledger.quick_entry.types import FieldMatch, MatchableItem, Variant, VariantMatch

NumberProblem = Literal["absent", "invalid"]

_DIM_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def resolve_number(token: str | None) -> tuple[float | None, NumberProblem | None]:
    if token is None or not token.strip():
        return None, "absent"
    value = parse_decimal(token)
    if value is None:
        return None, "invalid"
    return value, None


def _fmt_dimension(value: str | None) -> str | None:
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    return format_number(number)


def variant_label(variant: Variant) -> str:
    """Human label for a variant, e.g. `10x20x5 mm` or `T:2 mm`."""
    dims = [d for d in (_fmt_dimension(variant.length), _fmt_dimension(variant.width), _fmt_dimension(variant.height)) if d]
    dim_text = ""
    if dims:
        dim_text = "x".join(dims)
        if variant.dimension_unit:
            dim_text = f"{dim_text} {variant.dimension_unit}"
    thickness = _fmt_dimension(variant.thickness)
    thickness_text = ""
    if thickness:
        thickness_text = f"T:{thickness}"
        if variant.thickness_unit:
            thickness_text = f"{thickness_text} {variant.thickness_unit}"
    return " ".join(part for part in (dim_text, thickness_text) if part)


def _dimension_values(variant: Variant) -> list[float]:
    values = []
    for raw in (variant.length, variant.width, variant.height):
        if not raw:
            continue
        try:
            values.append(float(raw))
        except ValueError:
            continue
    return values


def _match_by_dimensions(text: str, pool: Sequence[Variant]) -> Variant | None:
    typed = [float(n) for n in _DIM_NUMBER_RE.findall(text)]
    if len(typed) < 2:
        return None
    for variant in pool:
        dims = _dimension_values(variant)
        if len(dims) < len(typed):
            continue
        if all(abs(a - b) < 0.001 for a, b in zip(typed, dims)):
            return variant
    return None


def resolve_variant(text: str, pool: Sequence[Variant], limit: int) -> VariantMatch:
    if not normalize_name(text):
        return VariantMatch(raw=text)
    match, suggestions = rank_candidates(text, pool, variant_label, limit)
    if match is None:
        match = _match_by_dimensions(text, pool)
    if match is not None:
        return VariantMatch(raw=text, match=match)
    return VariantMatch(raw=text, suggestions=suggestions)


def resolve_entity(
    item_text: str,
    variant_text: str,
    entities: Sequence[MatchableItem],
    limit: int,
    full_text: str = "",
) -> tuple[FieldMatch, str]:
    """Resolve the item slot, returning the match and the variant text.

    An item whose own name ends in a dimension (`Plate 8x30`) wins over the
    dimension split when `full_text` names it exactly. Without a dimension
    token, a leading word run that names an item exactly wins, and whatever
    follows it becomes the variant text.
    """
    if variant_text and full_text:
        match, _ = rank_candidates(full_text, entities, lambda item: item.name, limit)
        if match is not None:
            return FieldMatch(raw=full_text, match=match), ""
    full = resolve(item_text, entities, limit)
    if full.match is not None or variant_text:
        return full, variant_text
    words = item_text.split()
    for count in range(len(words) - 1, 0, -1):
        prefix = " ".join(words[:count])
        match, _ = rank_candidates(prefix, entities, lambda item: item.name, limit)
        if match is None:
            continue
        head = re.match(r"\S+(?:\s+\S+){%d}" % (count - 1), item_text)
        raw_prefix = head.group() if head else prefix
        return FieldMatch(raw=raw_prefix, match=match), item_text[len(raw_prefix):].strip()
    return full, variant_text


def resolve_source(text: str, destinations: Sequence[MatchableItem], limit: int) -> FieldMatch:
    return resolve(text, destinations, limit)


def clean_text(value: str) -> str | None:
    cleaned = " ".join(value.split())
    return cleaned or None
