from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog.data import NAMES
from ..catalog.models import NamedAttribute
from .themes import THEMES, ThemeRule

logger = logging.getLogger(__name__)

MEANING_WORD_POINTS = 10
USAGE_WORD_POINTS = 15
LABEL_POINTS = 20
THEME_POINTS = 30
MIN_WORD_LENGTH = 4


@dataclass(frozen=True)
class ScoredName:
    name: NamedAttribute
    score: int


@dataclass(frozen=True)
class Suggestion:
    name: NamedAttribute
    score: int
    is_default: bool


@dataclass(frozen=True)
class Relevance:
    names: list[NamedAttribute]
    is_default: bool


def _word_points(phrase: str, normalized_text: str, points: int) -> int:
    """Award ``points`` for every long-enough word of ``phrase`` found in the text."""
    total = 0
    for word in phrase.lower().split():
        if len(word) >= MIN_WORD_LENGTH and word in normalized_text:
            total += points
    return total


def score_name(
    name: NamedAttribute,
    normalized_text: str,
    themes: Sequence[ThemeRule] = THEMES,
) -> int:
    """Compute the additive relevance score of one name for lowercased text."""
    score = _word_points(name.meaning, normalized_text, MEANING_WORD_POINTS)
    score += _word_points(name.usage, normalized_text, USAGE_WORD_POINTS)

    if name.label.lower() in normalized_text:
        score += LABEL_POINTS

    for theme in themes:
        if name.label in theme.labels and theme.triggered_by(normalized_text):
            score += THEME_POINTS

    return score


def score_names(
    text: str,
    catalog: Sequence[NamedAttribute] = NAMES,
    themes: Sequence[ThemeRule] = THEMES,
) -> list[ScoredName]:
    """Score every catalog entry against ``text``, keeping catalog order."""
    normalized = text.lower()
    return [ScoredName(name, score_name(name, normalized, themes)) for name in catalog]


def relevant(
    text: str,
    catalog: Sequence[NamedAttribute] = NAMES,
) -> Relevance:
    normalized = text.lower()
    matches = [
        name
        for name in catalog
        if name.meaning.lower() in normalized
        or name.usage.lower() in normalized
        or name.label.lower() in normalized
    ]
    if not matches:
        logger.debug("No literal matches, returning default pair")
        return Relevance(names=list(catalog[:2]), is_default=True)
    return Relevance(names=matches, is_default=False)


def find_relevant(
    text: str,
    catalog: Sequence[NamedAttribute] = NAMES,
) -> list[NamedAttribute]:
    """Return names whose meaning, usage or label appear verbatim in ``text``.

    Never empty: when nothing matches, the first two catalog entries are
    returned instead.
    """
    return relevant(text, catalog).names


def suggest(
    text: str,
    catalog: Sequence[NamedAttribute] = NAMES,
    themes: Sequence[ThemeRule] = THEMES,
) -> Suggestion:
    default = catalog[0]
    if not text or not text.strip():
        return Suggestion(name=default, score=0, is_default=True)

    best: ScoredName | None = None
    for scored in score_names(text, catalog, themes):
        # Strictly greater keeps the earliest entry on ties.
        if best is None or scored.score > best.score:
            best = scored

    if best is None or best.score == 0:
        logger.debug("No scoring rule fired, returning %s", default.label)
        return Suggestion(name=default, score=0, is_default=True)

    logger.debug("Suggested %s with score %d", best.name.label, best.score)
    return Suggestion(name=best.name, score=best.score, is_default=False)


def suggest_best(
    text: str,
    catalog: Sequence[NamedAttribute] = NAMES,
    themes: Sequence[ThemeRule] = THEMES,
) -> NamedAttribute:
    """Return the single most relevant name for ``text``."""
    return suggest(text, catalog, themes).name
