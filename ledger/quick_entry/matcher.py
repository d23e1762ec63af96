from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from ledger.config import settings
from ledger.quick_entry.normalize import normalize_name
from ledger.quick_entry.types import FieldMatch, MatchableItem

T = TypeVar("T")


def rank_candidates(
    text: str,
    candidates: Sequence[T],
    name_of: Callable[[T], str],
    limit: int = 5,
) -> tuple[T | None, list[T]]:
    """Return (exact match, suggestions) for `text` over `candidates`.

    Exact means case-insensitive equality of names, in which case no
    suggestions are returned. Otherwise every candidate whose name contains
    the text is a suggestion; prefix hits rank before inner hits, then
    shorter names first. Ties keep catalog order.
    """
    query = normalize_name(text)
    if not query:
        return None, []
    names = [normalize_name(name_of(candidate)) for candidate in candidates]
    for candidate, name in zip(candidates, names):
        if name == query:
            return candidate, []
    scored = [
        (not name.startswith(query), len(name), index)
        for index, name in enumerate(names)
        if query in name
    ]
    scored.sort()
    return None, [candidates[index] for _, _, index in scored[:limit]]


def resolve(text: str, candidates: Sequence[MatchableItem], limit: int | None = None) -> FieldMatch:
    limit = settings.suggestion_limit if limit is None else limit
    match, suggestions = rank_candidates(text, candidates, lambda item: item.name, limit)
    return FieldMatch(raw=text, match=match, suggestions=suggestions)
