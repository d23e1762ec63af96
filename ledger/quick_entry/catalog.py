from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from ledger.quick_entry.types import MatchableItem, Variant


class CatalogSnapshot(BaseModel):
    """Reference data the parser resolves against.

    Frozen: a refresh builds a new snapshot and swaps it in whole, so a parse
    always reads one consistent set of lists.
    """

    model_config = ConfigDict(frozen=True)

    entities: tuple[MatchableItem, ...] = ()
    destinations: tuple[MatchableItem, ...] = ()
    variants: tuple[Variant, ...] = ()

    def replace(
        self,
        *,
        entities: Iterable[MatchableItem | dict] | None = None,
        destinations: Iterable[MatchableItem | dict] | None = None,
        variants: Iterable[Variant | dict] | None = None,
    ) -> CatalogSnapshot:
        return CatalogSnapshot(
            entities=tuple(entities) if entities is not None else self.entities,
            destinations=tuple(destinations) if destinations is not None else self.destinations,
            variants=tuple(variants) if variants is not None else self.variants,
        )

    def variants_for(self, entity_id: str) -> list[Variant]:
        return [variant for variant in self.variants if variant.entity_id == entity_id]
