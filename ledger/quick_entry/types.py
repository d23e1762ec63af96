from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


TransactionType = Literal["credit", "debit"]
PaymentStatus = Literal["paid", "pending", "advance"]
SuggestionField = Literal["entity", "source"]

TRANSACTION_TYPES: tuple[str, ...] = ("credit", "debit")
PAYMENT_STATUSES: tuple[str, ...] = ("paid", "pending", "advance")


def _number_as_text(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class MatchableItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return _number_as_text(value)


class Variant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    entity_id: str | None = None
    length: str | None = None
    width: str | None = None
    height: str | None = None
    thickness: str | None = None
    dimension_unit: str | None = None
    thickness_unit: str | None = None

    @field_validator("id", "entity_id", "length", "width", "height", "thickness", mode="before")
    @classmethod
    def _numbers_as_text(cls, value):
        return _number_as_text(value)


class FieldMatch(BaseModel):
    raw: str = ""
    match: MatchableItem | None = None
    suggestions: list[MatchableItem] = Field(default_factory=list)


class VariantMatch(BaseModel):
    raw: str = ""
    match: Variant | None = None
    suggestions: list[Variant] = Field(default_factory=list)


class Segments(BaseModel):
    """Raw text of each grammar slot, before any value is bound to it."""

    quantity: str | None = None
    item: str = ""
    item_text: str = ""
    variant: str = ""
    rate: str | None = None
    transaction_type: TransactionType | None = None
    source: str = ""
    transport_cost: str | None = None
    vehicle_type: str = ""
    reg_no: str = ""
    payment_status: PaymentStatus | None = None
    item_start: int | None = None
    source_span: tuple[int, int] | None = None


class ParsedCommand(BaseModel):
    quantity: float | None = None
    entity: FieldMatch = Field(default_factory=FieldMatch)
    variant: VariantMatch = Field(default_factory=VariantMatch)
    rate: float | None = None
    transaction_type: TransactionType = "debit"
    source: FieldMatch = Field(default_factory=FieldMatch)
    transport_cost: float | None = None
    vehicle_type: str | None = None
    reg_no: str | None = None
    payment_status: PaymentStatus = "pending"
    complete: bool = False
    errors: list[str] = Field(default_factory=list)


class SuggestionPrompt(BaseModel):
    field: SuggestionField
    label: str
    items: list[MatchableItem]


class ParsePreview(BaseModel):
    command: ParsedCommand
    amount: float | None = None
    suggestions: SuggestionPrompt | None = None
