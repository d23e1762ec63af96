"""Split one quick-entry line into its grammar slots.

    {qty} {item} [@{rate}] [credit|debit] [from {source}] [carting] [@{cost}] [{vehicle}] [{regNo}] [{status}]

Each slot is matched left to right. Free-text slots (item, source) run until
the next keyword boundary. Nothing here raises: missing or malformed slots
come back empty and are judged later by the resolver.
"""

from __future__ import annotations

import re

from ledger.quick_entry.types import PAYMENT_STATUSES, TRANSACTION_TYPES, Segments

_QTY_RE = re.compile(r"^\s*(?P<qty>[-+]?[\d.]+)")
_TOKEN_RE = re.compile(r"@(?:\s+(?=[-+\d.]))?[^\s@]*|[^\s@]+")
_REG_NO_RE = re.compile(r"^[a-z]{2}-?\d{1,2}-?[a-z]{0,3}-?\d{4}$", re.IGNORECASE)
_DIMENSION_RE = re.compile(
    r"(?:^|\s)(?P<dims>\d+(?:\.\d+)?(?:\s*[xх*×]\s*\d+(?:\.\d+)?){1,2}(?:\s*(?:mm|cm|m|in|ft)\b)?)\s*$",
    re.IGNORECASE,
)

_ITEM_STOP_WORDS = {"from", "carting", *TRANSACTION_TYPES, *PAYMENT_STATUSES}


def _is_rate_token(text: str) -> bool:
    return text.startswith("@")


def _ends_item(text: str) -> bool:
    return _is_rate_token(text) or text.lower() in _ITEM_STOP_WORDS


def is_reg_no(text: str) -> bool:
    return bool(_REG_NO_RE.match(text))


def split_variant(item_text: str) -> tuple[str, str]:
    """Peel a trailing `NxN` / `NxNxN` dimension token off the item text."""
    match = _DIMENSION_RE.search(item_text)
    if not match:
        return item_text, ""
    name = item_text[: match.start()].rstrip()
    if not name:
        return item_text, ""
    return name, match.group("dims").strip()


def segment(raw: str) -> Segments:
    result = Segments()
    pos = 0
    qty_match = _QTY_RE.match(raw)
    if qty_match:
        result.quantity = qty_match.group("qty")
        pos = qty_match.end()

    tokens = list(_TOKEN_RE.finditer(raw, pos))
    index = 0

    item_tokens = []
    while index < len(tokens) and not _ends_item(tokens[index].group()):
        item_tokens.append(tokens[index])
        index += 1
    if item_tokens:
        start, end = item_tokens[0].start(), item_tokens[-1].end()
        result.item_text = raw[start:end]
        result.item, result.variant = split_variant(result.item_text)
        result.item_start = start

    block: str | None = None
    source_seen = False
    source_tokens = []
    vehicle_words: list[str] = []

    for token in tokens[index:]:
        text = token.group()
        lowered = text.lower()

        if _is_rate_token(text):
            value = text[1:].strip()
            if result.rate is None and block != "transport":
                result.rate = value
                if block == "source":
                    block = None
            elif result.transport_cost is None:
                result.transport_cost = value
                block = "transport"
            continue

        if lowered in TRANSACTION_TYPES:
            if result.transaction_type is None:
                result.transaction_type = lowered
            if block == "source":
                block = None
            continue

        if lowered == "from" and not source_seen:
            source_seen = True
            block = "source"
            continue

        if lowered == "carting":
            block = "transport"
            continue

        if lowered in PAYMENT_STATUSES:
            if result.payment_status is None:
                result.payment_status = lowered
            if block == "source":
                block = None
            continue

        if is_reg_no(text):
            if not result.reg_no:
                result.reg_no = text
            block = "transport"
            continue

        if block == "source":
            source_tokens.append(token)
        elif block == "transport":
            vehicle_words.append(text)

    if source_tokens:
        start, end = source_tokens[0].start(), source_tokens[-1].end()
        result.source = raw[start:end]
        result.source_span = (start, end)
    result.vehicle_type = " ".join(vehicle_words)
    return result
