from __future__ import annotations

import logging
from datetime import date

from ledger.quick_entry.normalize import format_number
from ledger.quick_entry.types import ParsedCommand

logger = logging.getLogger(__name__)


def compute_amount(command: ParsedCommand) -> float | None:
    if command.quantity is None or command.rate is None:
        return None
    return round(command.quantity * command.rate, 2)


def to_form_data(
    command: ParsedCommand,
    *,
    destination_id: str | None = None,
    on_date: date | None = None,
) -> dict[str, str]:
    """Shape a complete command into the create-transaction field set.

    Transport fields are left out entirely unless a positive transport cost
    was typed, so the receiving side takes its no-transportation branch.
    """
    if not command.complete:
        raise ValueError("quick entry is incomplete and cannot be submitted")

    fields = {
        "entity_id": command.entity.match.id,
        "entity_variant_id": command.variant.match.id if command.variant.match else "",
        "quantity": format_number(command.quantity, 6),
        "rate": format_number(command.rate, 6),
        "amount": format_number(compute_amount(command) or 0.0, 2),
        "source_id": command.source.match.id,
        "transaction_type": command.transaction_type,
        "payment_status": command.payment_status,
        "date": (on_date or date.today()).isoformat(),
    }
    if destination_id is not None:
        fields["destination_id"] = str(destination_id)

    if command.transport_cost is not None and command.transport_cost > 0:
        fields["add_transportation_cost"] = "on"
        fields["transportation_cost"] = format_number(command.transport_cost, 6)
        if command.vehicle_type:
            fields["vehicle_type"] = command.vehicle_type
        if command.reg_no:
            fields["reg_no"] = command.reg_no

    logger.info(
        "quick_entry form entity=%s source=%s amount=%s transport=%s",
        fields["entity_id"],
        fields["source_id"],
        fields["amount"],
        "add_transportation_cost" in fields,
    )
    return fields
