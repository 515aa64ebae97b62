from __future__ import annotations

import dataclasses

import pytest

from names_engine.catalog.data import NAMES
from names_engine.catalog.models import NamedAttribute
from names_engine.catalog.store import (
    _index_by_label,
    get_by_label,
    get_catalog,
    search_names,
)


def test_catalog_has_47_names():
    assert len(get_catalog()) == 47


def test_catalog_is_shared_tuple():
    assert isinstance(get_catalog(), tuple)
    assert get_catalog() is get_catalog()


def test_catalog_starts_with_mercy_names():
    first, second = get_catalog()[:2]
    assert first.label == "Ar-Rahman"
    assert second.label == "Ar-Rahim"


def test_labels_are_unique():
    labels = [name.label for name in NAMES]
    assert len(labels) == len(set(labels))


def test_entries_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        NAMES[0].label = "changed"


def test_duplicate_label_rejected():
    entry = NamedAttribute("x", "Dup", "m", "u", "c")
    with pytest.raises(ValueError):
        _index_by_label([entry, entry])


def test_get_by_label():
    entry = get_by_label("Al-Wadud")
    assert entry is not None
    assert entry.meaning == "The Most Loving"


def test_get_by_label_is_exact():
    assert get_by_label("al-wadud") is None
    assert get_by_label("") is None


class TestSearchNames:
    def test_empty_query_returns_everything(self):
        assert search_names("") == list(NAMES)

    def test_matches_label_case_insensitively(self):
        assert [n.label for n in search_names("razzaq")] == ["Ar-Razzaq"]

    def test_matches_meaning(self):
        labels = [n.label for n in search_names("forgiver")]
        assert labels == ["Al-Ghaffar", "Al-Ghafoor"]

    def test_matches_display_form(self):
        assert search_names(NAMES[0].display_form) == [NAMES[0]]

    def test_does_not_search_usage(self):
        assert search_names("sustenance") == []

    def test_keeps_catalog_order(self):
        results = search_names("the")
        positions = [NAMES.index(n) for n in results]
        assert positions == sorted(positions)
