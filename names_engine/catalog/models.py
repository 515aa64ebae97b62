from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NamedAttribute:
    display_form: str
    label: str
    meaning: str
    usage: str
    citation: str
