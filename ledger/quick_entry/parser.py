from __future__ import annotations

import logging
from typing import Iterable

from ledger.config import settings
from ledger.quick_entry.catalog import CatalogSnapshot
from ledger.quick_entry.resolver import (
    NumberProblem,
    clean_text,
    resolve_entity,
    resolve_number,
    resolve_source,
    resolve_variant,
)
from ledger.quick_entry.segmenter import segment
from ledger.quick_entry.types import MatchableItem, ParsedCommand, PaymentStatus, TransactionType, Variant

logger = logging.getLogger(__name__)

_NUMBER_ERRORS: dict[str, dict[NumberProblem, str]] = {
    "quantity": {"absent": "Quantity is required", "invalid": "Quantity must be a number"},
    "rate": {"absent": "Rate is required", "invalid": "Rate must be a number"},
}


class QuickEntryParser:
    """Turns one quick-entry line into a ParsedCommand.

    `parse` depends only on its input and the current catalog snapshot, so
    the host can call it on every keystroke.
    """

    def __init__(
        self,
        catalog: CatalogSnapshot | None = None,
        *,
        suggestion_limit: int | None = None,
        default_transaction_type: TransactionType | None = None,
        default_payment_status: PaymentStatus | None = None,
    ) -> None:
        self._catalog = catalog or CatalogSnapshot()
        self.suggestion_limit = settings.suggestion_limit if suggestion_limit is None else suggestion_limit
        self.default_transaction_type = default_transaction_type or settings.default_transaction_type
        self.default_payment_status = default_payment_status or settings.default_payment_status

    @property
    def catalog(self) -> CatalogSnapshot:
        return self._catalog

    def set_catalog(
        self,
        entities: Iterable[MatchableItem | dict] | None = None,
        destinations: Iterable[MatchableItem | dict] | None = None,
        variants: Iterable[Variant | dict] | None = None,
    ) -> CatalogSnapshot:
        self._catalog = self._catalog.replace(entities=entities, destinations=destinations, variants=variants)
        logger.info(
            "quick_entry catalog entities=%s destinations=%s variants=%s",
            len(self._catalog.entities),
            len(self._catalog.destinations),
            len(self._catalog.variants),
        )
        return self._catalog

    def set_entities(self, entities: Iterable[MatchableItem | dict]) -> None:
        self.set_catalog(entities=entities)

    def set_destinations(self, destinations: Iterable[MatchableItem | dict]) -> None:
        self.set_catalog(destinations=destinations)

    def set_variants(self, variants: Iterable[Variant | dict]) -> None:
        self.set_catalog(variants=variants)

    def parse(self, raw: str) -> ParsedCommand:
        catalog = self._catalog
        limit = self.suggestion_limit
        segments = segment(raw)

        quantity, quantity_problem = resolve_number(segments.quantity)
        rate, rate_problem = resolve_number(segments.rate)
        transport_cost, _ = resolve_number(segments.transport_cost)

        entity, variant_text = resolve_entity(
            segments.item, segments.variant, catalog.entities, limit, full_text=segments.item_text
        )
        pool = catalog.variants_for(entity.match.id) if entity.match else []
        variant = resolve_variant(variant_text, pool, limit)
        source = resolve_source(segments.source, catalog.destinations, limit)

        errors: list[str] = []
        if raw.strip():
            if quantity_problem:
                errors.append(_NUMBER_ERRORS["quantity"][quantity_problem])
            elif quantity is not None and quantity <= 0:
                errors.append("Quantity must be greater than zero")
            if not entity.raw:
                errors.append("Item is required")
            if rate_problem:
                errors.append(_NUMBER_ERRORS["rate"][rate_problem])
            elif rate is not None and rate < 0:
                errors.append("Rate must not be negative")
            if not source.raw:
                errors.append("Source is required")

        complete = (
            quantity is not None
            and quantity > 0
            and rate is not None
            and rate >= 0
            and entity.match is not None
            and source.match is not None
        )
        command = ParsedCommand(
            quantity=quantity,
            entity=entity,
            variant=variant,
            rate=rate,
            transaction_type=segments.transaction_type or self.default_transaction_type,
            source=source,
            transport_cost=transport_cost,
            vehicle_type=clean_text(segments.vehicle_type),
            reg_no=clean_text(segments.reg_no),
            payment_status=segments.payment_status or self.default_payment_status,
            complete=complete,
            errors=errors,
        )
        logger.debug("quick_entry parse raw=%r complete=%s errors=%s", raw, complete, len(errors))
        return command
