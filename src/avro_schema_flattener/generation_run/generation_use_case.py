"""Generation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from avro_schema_flattener.provenance import Provenance, collect_provenance
from avro_schema_flattener.schema_management import SchemaError, extract_records, parse_schema
from avro_schema_flattener.schema_preprocessing import strip_doc_lines
from avro_schema_flattener.source_emission import render_source

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_schema_generation(
    request: GenerationRequest, *, provenance: Provenance | None = None
) -> GenerationOutcome:
    """Flatten the input schema and write the generated source file.

    Nothing is written unless the whole schema was extracted successfully.
    """
    settings = request.settings
    data = _read_input(settings.input_path)

    try:
        document = parse_schema(strip_doc_lines(data))
        records = extract_records(document.root, dedupe=settings.dedupe)
    except SchemaError as exc:
        raise GenerationError(f"{settings.input_path}: {exc}") from exc
    logger.info("Extracted %d records from %s", len(records), settings.input_path)

    resolved_provenance = provenance or collect_provenance(request.argv)
    try:
        source = render_source(
            records,
            resolved_provenance,
            target=settings.target,
            package_name=settings.package_name,
        )
    except ValueError as exc:
        raise GenerationError(f"{settings.input_path}: {exc}") from exc
    _write_output(settings.output_path, source)

    return GenerationOutcome(
        output_path=settings.output_path.resolve(),
        record_names=tuple(record.qualified_name for record in records),
    )


def _read_input(input_path: Path) -> bytes:
    logger.info("Opening JSON %s", input_path)
    try:
        return input_path.read_bytes()
    except OSError as exc:
        raise GenerationError(f"Couldn't read input {input_path}: {exc}") from exc


def _write_output(output_path: Path, source: str) -> None:
    logger.info("Writing %s", output_path)
    try:
        output_path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Couldn't write output {output_path}: {exc}") from exc
