"""Nested record extraction service.

Records are only expected to nest inside array-typed fields:

    {"name": "items", "type": {"type": "array", "items": {<record>}}}

Every record found this way is hoisted into a flat list in pre-order, so a
record always precedes the records nested inside it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import ExtractedRecord
from .schema_parsing import SchemaError

logger = logging.getLogger(__name__)


class RecordShapeError(SchemaError):
    """Raised when a record node does not have the expected shape."""


class MissingIdentityError(RecordShapeError):
    """Raised when a record lacks a name or a namespace."""


class MalformedFieldsError(RecordShapeError):
    """Raised when a record's fields are not a list of objects."""


class UnsupportedNestingShapeError(RecordShapeError):
    """Raised when a field type object is not an array."""


class MalformedArrayItemsError(RecordShapeError):
    """Raised when an array field type has no record items."""


class NestingTooDeepError(RecordShapeError):
    """Raised when records nest deeper than the interpreter can walk."""


class ConflictingRecordError(SchemaError):
    """Raised when one qualified name carries two different definitions."""


def extract_records(root: Any, *, dedupe: bool = False) -> list[ExtractedRecord]:
    """Return every record of the schema tree in pre-order.

    Args:
      root: Parsed root record node.
      dedupe: Skip repeated occurrences of an identical record instead of
        emitting them again.

    Raises:
      RecordShapeError: On the first record or field with an unsupported shape, or
        when records nest beyond the interpreter recursion limit.
      ConflictingRecordError: If ``dedupe`` is set and a qualified name is
        defined twice with different contents.
    """
    records: list[ExtractedRecord] = []
    seen: dict[str, str] | None = {} if dedupe else None
    try:
        _extract_record(root, records=records, seen=seen)
    except RecursionError as exc:
        raise NestingTooDeepError("Records nest too deeply to extract.") from exc
    return records


def _extract_record(
    node: Any, *, records: list[ExtractedRecord], seen: dict[str, str] | None
) -> None:
    if not isinstance(node, Mapping):
        raise MissingIdentityError(f"Record must be an object: {_describe(node)}")

    name = _require_identity(node, "name")
    namespace = _require_identity(node, "namespace")
    record = ExtractedRecord(name=name, namespace=namespace, raw_text=serialize_node(node))

    if seen is not None:
        previous = seen.get(record.qualified_name)
        if previous is not None:
            if previous != record.raw_text:
                raise ConflictingRecordError(
                    f"Record {record.qualified_name} is defined more than once "
                    "with different contents."
                )
            logger.debug("Skipping repeated record %s", record.qualified_name)
            return
        seen[record.qualified_name] = record.raw_text

    records.append(record)

    for index, field in enumerate(_record_fields(node, name)):
        logger.debug("Scanning %s['fields'][%d]", name, index)
        field_type = field.get("type")
        if not isinstance(field_type, Mapping):
            continue
        if field_type.get("type") != "array":
            raise UnsupportedNestingShapeError(
                f"Expected {name}['fields'][{index}]['type']['type'] == 'array'"
            )
        items = field_type.get("items")
        if not isinstance(items, Mapping):
            raise MalformedArrayItemsError(
                f"Expected {name}['fields'][{index}]['type']['items'] == object"
            )
        _extract_record(items, records=records, seen=seen)


def _require_identity(node: Mapping[str, Any], key: str) -> str:
    value = node.get(key)
    if not isinstance(value, str) or not value:
        raise MissingIdentityError(f"Record lacks a {key}: {_describe(node)}")
    return value


def _record_fields(node: Mapping[str, Any], name: str) -> Sequence[Mapping[str, Any]]:
    fields = node.get("fields")
    if isinstance(fields, str) or not isinstance(fields, Sequence):
        raise MalformedFieldsError(f"Expected fields in record {name}")
    for index, field in enumerate(fields):
        if not isinstance(field, Mapping):
            raise MalformedFieldsError(f"Expected {name}['fields'][{index}] == object")
    return fields


def serialize_node(node: Any) -> str:
    """Serialize a schema node to compact JSON in declared key order."""
    return json.dumps(node, separators=(",", ":"), ensure_ascii=False)


def _describe(node: Any) -> str:
    text = serialize_node(node)
    return text if len(text) <= 120 else f"{text[:117]}..."
