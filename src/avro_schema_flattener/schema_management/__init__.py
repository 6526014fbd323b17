"""Schema management exports."""

from .record_extraction import (
    ConflictingRecordError,
    MalformedArrayItemsError,
    MalformedFieldsError,
    MissingIdentityError,
    NestingTooDeepError,
    RecordShapeError,
    UnsupportedNestingShapeError,
    extract_records,
    serialize_node,
)
from .schema_models import ExtractedRecord, SchemaDocument
from .schema_parsing import SchemaError, SchemaParseError, parse_schema

__all__ = [
    "ConflictingRecordError",
    "ExtractedRecord",
    "MalformedArrayItemsError",
    "MalformedFieldsError",
    "MissingIdentityError",
    "NestingTooDeepError",
    "RecordShapeError",
    "SchemaDocument",
    "SchemaError",
    "SchemaParseError",
    "UnsupportedNestingShapeError",
    "extract_records",
    "parse_schema",
    "serialize_node",
]
