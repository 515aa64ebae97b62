from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog.data import NAMES
from ..catalog.models import NamedAttribute


@dataclass(frozen=True)
class ThemeRule:
    keywords: tuple[str, ...]
    labels: frozenset[str]

    def triggered_by(self, normalized_text: str) -> bool:
        return any(keyword in normalized_text for keyword in self.keywords)


# Labels are spelled as the names are commonly written, which does not always
# match the catalog's transliteration (e.g. "Al-Aleem" vs "Al-‘Aleem").
THEMES: tuple[ThemeRule, ...] = (
    ThemeRule(  # forgiveness
        keywords=("forgive", "forgiveness", "mercy", "pardon"),
        labels=frozenset({"Al-Ghaffar", "Al-Ghafoor", "Ar-Rahman", "Ar-Rahim"}),
    ),
    ThemeRule(  # guidance
        keywords=("guide", "guidance", "path", "direction"),
        labels=frozenset({"Al-Hadi", "Al-Hakeem", "An-Nur"}),
    ),
    ThemeRule(  # healing
        keywords=("heal", "health", "cure", "sickness", "pain", "disease"),
        labels=frozenset({"As-Salam", "Ash-Shafi"}),
    ),
    ThemeRule(  # provision
        keywords=("provide", "sustenance", "food", "wealth", "money", "provision"),
        labels=frozenset({"Ar-Razzaq", "Al-Wahhab", "Al-Muqeet"}),
    ),
    ThemeRule(  # protection
        keywords=("protect", "protection", "safety", "guard"),
        labels=frozenset({"Al-Hafeedh", "Al-Muhaymin", "Al-Wali"}),
    ),
    ThemeRule(  # love
        keywords=("love", "loved", "loving"),
        labels=frozenset({"Al-Wadud"}),
    ),
    ThemeRule(  # knowledge
        keywords=("know", "knowledge", "wisdom", "understand", "results"),
        labels=frozenset({"Al-Aleem", "Al-Hakeem"}),
    ),
    ThemeRule(  # strength
        keywords=("strength", "strong", "power"),
        labels=frozenset({"Al-Qawi", "Al-Aziz"}),
    ),
    ThemeRule(  # prayer
        keywords=("answer", "respond", "call", "prayer"),
        labels=frozenset({"Al-Mujeeb"}),
    ),
    ThemeRule(  # justice
        keywords=("justice", "judge", "fair"),
        labels=frozenset({"Al-Adl", "Al-Hakam"}),
    ),
)


def unresolved_theme_labels(
    catalog: Sequence[NamedAttribute] = NAMES,
    themes: Sequence[ThemeRule] = THEMES,
) -> set[str]:
    """Return theme target labels that no catalog entry carries."""
    known = {name.label for name in catalog}
    targets: set[str] = set()
    for theme in themes:
        targets.update(theme.labels)
    return targets - known
