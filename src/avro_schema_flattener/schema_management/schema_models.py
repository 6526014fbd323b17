"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema tree."""

    root: Any


@dataclass(frozen=True)
class ExtractedRecord:
    """One record hoisted out of the schema tree."""

    name: str
    namespace: str
    raw_text: str

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"
