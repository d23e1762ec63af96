import logging

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, Field

from ledger.config import settings
from ledger.quick_entry import (
    MatchableItem,
    ParsePreview,
    QuickEntryParser,
    Variant,
    apply_suggestion,
    preview,
    to_form_data,
)
from ledger.quick_entry.types import SuggestionField

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Ledger Quick Entry")
parser = QuickEntryParser()


class CatalogPayload(BaseModel):
    entities: list[MatchableItem] = Field(default_factory=list)
    destinations: list[MatchableItem] = Field(default_factory=list)
    variants: list[Variant] = Field(default_factory=list)


class ParseRequest(BaseModel):
    text: str = ""


class SuggestionRequest(BaseModel):
    text: str
    field: SuggestionField
    name: str


class FormDataRequest(BaseModel):
    text: str
    destination_id: str | None = None


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.put("/quick-entry/catalog")
async def replace_catalog(payload: CatalogPayload) -> dict[str, int]:
    catalog = parser.set_catalog(payload.entities, payload.destinations, payload.variants)
    return {
        "entities": len(catalog.entities),
        "destinations": len(catalog.destinations),
        "variants": len(catalog.variants),
    }


@app.post("/quick-entry/parse")
async def parse_line(payload: ParseRequest) -> ParsePreview:
    return preview(parser, payload.text)


@app.post("/quick-entry/suggestion")
async def accept_suggestion(payload: SuggestionRequest) -> dict[str, str]:
    command = parser.parse(payload.text)
    return {"text": apply_suggestion(payload.text, command, payload.field, payload.name)}


@app.post("/quick-entry/form-data")
async def form_data(payload: FormDataRequest) -> dict[str, str]:
    command = parser.parse(payload.text)
    try:
        return to_form_data(command, destination_id=payload.destination_id)
    except ValueError as exc:
        logger.info("quick_entry submit rejected errors=%s", command.errors)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(exc), "errors": command.errors},
        ) from exc
