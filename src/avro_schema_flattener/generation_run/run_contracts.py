"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from avro_schema_flattener.configuration.runtime_settings import GenerationSettings


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    settings: GenerationSettings
    argv: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_path: Path
    record_names: tuple[str, ...]
