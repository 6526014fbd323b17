"""Provenance entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

UNKNOWN_REVISION = "UNKNOWN"


@dataclass(frozen=True)
class Provenance:
    """Metadata rendered into the header of generated sources."""

    generated_at: datetime
    command: str
    revision: str
