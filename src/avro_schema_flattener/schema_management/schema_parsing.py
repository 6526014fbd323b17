"""Schema parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping

from .schema_models import SchemaDocument


class SchemaError(Exception):
    """Raised for schema parsing or extraction failures."""


class SchemaParseError(SchemaError):
    """Raised when schema bytes are not a JSON object."""


def parse_schema(data: bytes) -> SchemaDocument:
    """Parse preprocessed schema bytes into a structured document."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaParseError(f"Schema is not valid UTF-8: {exc}") from exc

    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Invalid Avro schema JSON: {exc}") from exc
    except RecursionError as exc:
        raise SchemaParseError("Avro schema JSON nests too deeply to parse.") from exc

    if not isinstance(root, Mapping):
        raise SchemaParseError("Avro schema root must be a JSON object.")

    return SchemaDocument(root=root)
