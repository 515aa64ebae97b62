from __future__ import annotations

from collections.abc import Sequence

from .data import NAMES
from .models import NamedAttribute


def _index_by_label(names: Sequence[NamedAttribute]) -> dict[str, NamedAttribute]:
    index: dict[str, NamedAttribute] = {}
    for name in names:
        if name.label in index:
            raise ValueError(f"Duplicate label in catalog: {name.label!r}")
        index[name.label] = name
    return index


_BY_LABEL = _index_by_label(NAMES)


def get_catalog() -> tuple[NamedAttribute, ...]:
    """Return the shared, immutable catalog in canonical order."""
    return NAMES


def get_by_label(label: str) -> NamedAttribute | None:
    return _BY_LABEL.get(label)


def search_names(
    query: str,
    catalog: Sequence[NamedAttribute] = NAMES,
) -> list[NamedAttribute]:
    """Browse filter: entries whose display form, label or meaning contain the query."""
    query_lower = query.lower()
    return [
        name
        for name in catalog
        if query_lower in name.display_form.lower()
        or query_lower in name.label.lower()
        or query_lower in name.meaning.lower()
    ]
