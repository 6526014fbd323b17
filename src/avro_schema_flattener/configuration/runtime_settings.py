"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationSettings:
    """Normalized settings for one generation run."""

    input_path: Path
    output_path: Path
    dedupe: bool
    target: str
    package_name: str
