from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from .api.models import (
    BatchSuggestRequest,
    BatchSuggestResponse,
    NameOut,
    RelevantResponse,
    SuggestResponse,
    TextRequest,
)
from .catalog.store import get_by_label, get_catalog, search_names
from .config import DEFAULT_SERVICE_CONFIG
from .matching.matcher import relevant, suggest

logging.getLogger("names_engine").setLevel(DEFAULT_SERVICE_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=DEFAULT_SERVICE_CONFIG.api_title,
    version=DEFAULT_SERVICE_CONFIG.api_version,
)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/names", response_model=list[NameOut])
def list_names(q: str | None = None) -> list[NameOut]:
    entries = get_catalog() if q is None else search_names(q)
    return [NameOut.from_entry(entry) for entry in entries]


@app.get("/names/{label}", response_model=NameOut)
def name_detail(label: str) -> NameOut:
    entry = get_by_label(label)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Unknown name: {label}")
    return NameOut.from_entry(entry)


# ── Suggestion endpoints ─────────────────────────────────────────────────


@app.post("/names/relevant", response_model=RelevantResponse)
def relevant_names(body: TextRequest) -> RelevantResponse:
    result = relevant(body.text)
    return RelevantResponse(
        names=[NameOut.from_entry(entry) for entry in result.names],
        is_default=result.is_default,
    )


@app.post("/names/suggest", response_model=SuggestResponse)
def suggest_name(body: TextRequest) -> SuggestResponse:
    return SuggestResponse.from_suggestion(suggest(body.text))


@app.post("/names/suggest/batch", response_model=BatchSuggestResponse)
def suggest_names(body: BatchSuggestRequest) -> BatchSuggestResponse:
    logger.info("Suggesting names for %d texts", len(body.texts))
    return BatchSuggestResponse(
        suggestions=[SuggestResponse.from_suggestion(suggest(text)) for text in body.texts],
    )
