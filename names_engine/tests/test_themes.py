from __future__ import annotations

from names_engine.catalog.models import NamedAttribute
from names_engine.matching.themes import THEMES, ThemeRule, unresolved_theme_labels


def test_ten_themes():
    assert len(THEMES) == 10


def test_theme_triggered_by_substring():
    theme = ThemeRule(keywords=("heal",), labels=frozenset({"X"}))
    assert theme.triggered_by("please bring healing")
    assert not theme.triggered_by("nothing here")


def test_unresolved_labels_in_shipped_catalog():
    assert unresolved_theme_labels() == {
        "Al-Hadi",
        "An-Nur",
        "Ash-Shafi",
        "Al-Wali",
        "Al-Aleem",
        "Al-Qawi",
        "Al-Adl",
    }


def test_unresolved_labels_with_custom_catalog():
    catalog = [NamedAttribute("x", "Al-Qawi", "The Strong", "Gives strength", "c")]
    theme = ThemeRule(keywords=("strong",), labels=frozenset({"Al-Qawi", "Al-Aziz"}))
    assert unresolved_theme_labels(catalog, [theme]) == {"Al-Aziz"}
