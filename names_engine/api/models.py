from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.models import NamedAttribute
from ..config import DEFAULT_SERVICE_CONFIG
from ..matching.matcher import Suggestion


class NameOut(BaseModel):
    display_form: str
    label: str
    meaning: str
    usage: str
    citation: str

    @classmethod
    def from_entry(cls, entry: NamedAttribute) -> "NameOut":
        return cls(
            display_form=entry.display_form,
            label=entry.label,
            meaning=entry.meaning,
            usage=entry.usage,
            citation=entry.citation,
        )


class TextRequest(BaseModel):
    text: str = Field(..., description="Free-text request, may be empty")


class BatchSuggestRequest(BaseModel):
    texts: list[str] = Field(
        ...,
        max_length=DEFAULT_SERVICE_CONFIG.batch_limit,
        description="Request texts to suggest names for, in order",
    )


class RelevantResponse(BaseModel):
    names: list[NameOut]
    is_default: bool


class SuggestResponse(BaseModel):
    name: NameOut
    score: int
    is_default: bool

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestResponse":
        return cls(
            name=NameOut.from_entry(suggestion.name),
            score=suggestion.score,
            is_default=suggestion.is_default,
        )


class BatchSuggestResponse(BaseModel):
    suggestions: list[SuggestResponse]
