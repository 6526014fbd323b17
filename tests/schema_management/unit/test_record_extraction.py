"""Nested record extraction tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from avro_schema_flattener.schema_management import (
    ConflictingRecordError,
    MalformedArrayItemsError,
    MalformedFieldsError,
    MissingIdentityError,
    NestingTooDeepError,
    UnsupportedNestingShapeError,
    extract_records,
    parse_schema,
)
from avro_schema_flattener.schema_preprocessing import strip_doc_lines


def _record(name: str, fields: list | None = None, namespace: str = "ns") -> dict:
    return {"name": name, "namespace": namespace, "fields": fields or []}


def _array_field(field_name: str, items: object) -> dict:
    return {"name": field_name, "type": {"type": "array", "items": items}}


def test_record_without_nesting_yields_only_the_root() -> None:
    root = _record("Outer", [{"name": "id", "type": "long"}])

    records = extract_records(root)

    assert len(records) == 1
    assert records[0].name == "Outer"
    assert records[0].namespace == "ns"
    assert json.loads(records[0].raw_text) == root


def test_nested_array_record_is_emitted_after_its_parent() -> None:
    root = json.loads(
        '{"name":"Outer","namespace":"ns","fields":[{"name":"inner","type":'
        '{"type":"array","items":{"name":"Inner","namespace":"ns","fields":[]}}}]}'
    )

    records = extract_records(root)

    assert [record.name for record in records] == ["Outer", "Inner"]
    assert records[1].raw_text == '{"name":"Inner","namespace":"ns","fields":[]}'


def test_raw_text_keeps_declared_key_order_and_nested_records() -> None:
    root = {
        "type": "record",
        "namespace": "ns",
        "name": "Outer",
        "fields": [_array_field("inner", _record("Inner"))],
    }

    records = extract_records(root)

    assert records[0].raw_text == (
        '{"type":"record","namespace":"ns","name":"Outer","fields":[{"name":"inner",'
        '"type":{"type":"array","items":{"name":"Inner","namespace":"ns","fields":[]}}}]}'
    )


def test_raw_text_keeps_non_ascii_characters() -> None:
    records = extract_records(_record("Größe", namespace="maße"))

    assert records[0].raw_text == '{"name":"Größe","namespace":"maße","fields":[]}'


def test_traversal_is_pre_order_depth_first_in_field_order() -> None:
    root = _record(
        "A",
        [
            _array_field("b", _record("B", [_array_field("c", _record("C"))])),
            {"name": "plain", "type": "string"},
            _array_field("d", _record("D")),
        ],
    )

    names = [record.name for record in extract_records(root)]

    assert names == ["A", "B", "C", "D"]


def test_reordering_fields_reorders_output() -> None:
    root = _record(
        "A",
        [
            _array_field("d", _record("D")),
            _array_field("b", _record("B", [_array_field("c", _record("C"))])),
        ],
    )

    names = [record.name for record in extract_records(root)]

    assert names == ["A", "D", "B", "C"]


def test_same_record_via_two_fields_is_emitted_twice_by_default() -> None:
    inner = _record("Inner")
    root = _record("Outer", [_array_field("first", inner), _array_field("second", inner)])

    records = extract_records(root)

    assert [record.name for record in records] == ["Outer", "Inner", "Inner"]
    assert records[1] == records[2]


def test_dedupe_skips_identical_repeated_record() -> None:
    inner = _record("Inner", [_array_field("leaf", _record("Leaf"))])
    root = _record("Outer", [_array_field("first", inner), _array_field("second", inner)])

    records = extract_records(root, dedupe=True)

    assert [record.qualified_name for record in records] == ["ns.Outer", "ns.Inner", "ns.Leaf"]


def test_dedupe_keeps_same_name_in_different_namespaces() -> None:
    root = _record(
        "Outer",
        [
            _array_field("first", _record("Inner", namespace="a")),
            _array_field("second", _record("Inner", namespace="b")),
        ],
    )

    records = extract_records(root, dedupe=True)

    assert [record.qualified_name for record in records] == ["ns.Outer", "a.Inner", "b.Inner"]


def test_dedupe_rejects_conflicting_definitions_of_one_name() -> None:
    root = _record(
        "Outer",
        [
            _array_field("first", _record("Inner")),
            _array_field("second", _record("Inner", [{"name": "x", "type": "int"}])),
        ],
    )

    with pytest.raises(ConflictingRecordError, match="ns.Inner"):
        extract_records(root, dedupe=True)


@pytest.mark.parametrize("missing_key", ["name", "namespace"])
def test_root_missing_identity_fails(missing_key: str) -> None:
    root = _record("Outer")
    del root[missing_key]

    with pytest.raises(MissingIdentityError, match=f"lacks a {missing_key}"):
        extract_records(root)


def test_empty_namespace_fails() -> None:
    with pytest.raises(MissingIdentityError):
        extract_records(_record("Outer", namespace=""))


def test_non_string_name_fails() -> None:
    root = {"name": 7, "namespace": "ns", "fields": []}

    with pytest.raises(MissingIdentityError):
        extract_records(root)


def test_nested_record_missing_namespace_fails() -> None:
    root = _record("Outer", [_array_field("inner", {"name": "Inner", "fields": []})])

    with pytest.raises(MissingIdentityError, match="lacks a namespace"):
        extract_records(root)


def test_map_typed_field_is_unsupported_nesting() -> None:
    root = _record("Outer", [{"name": "lookup", "type": {"type": "map", "items": _record("V")}}])

    with pytest.raises(UnsupportedNestingShapeError, match=r"Outer\['fields'\]\[0\]"):
        extract_records(root)


def test_record_nested_directly_as_field_type_is_unsupported_nesting() -> None:
    nested = {"type": "record", **_record("Inner")}
    root = _record("Outer", [{"name": "inner", "type": nested}])

    with pytest.raises(UnsupportedNestingShapeError):
        extract_records(root)


def test_field_type_object_without_type_key_is_unsupported_nesting() -> None:
    root = _record("Outer", [{"name": "weird", "type": {"items": _record("Inner")}}])

    with pytest.raises(UnsupportedNestingShapeError):
        extract_records(root)


def test_union_field_type_is_skipped() -> None:
    root = _record("Outer", [{"name": "maybe", "type": ["null", "string"]}])

    assert [record.name for record in extract_records(root)] == ["Outer"]


@pytest.mark.parametrize("items", [None, "string", ["null", "string"]])
def test_array_without_object_items_is_malformed(items: object) -> None:
    field_type: dict = {"type": "array"}
    if items is not None:
        field_type["items"] = items
    root = _record("Outer", [{"name": "values", "type": field_type}])

    with pytest.raises(MalformedArrayItemsError, match=r"\['items'\] == object"):
        extract_records(root)


@pytest.mark.parametrize("fields", [None, "id", [{"name": "ok", "type": "int"}, "bad"]])
def test_malformed_fields_fail(fields: object) -> None:
    root = {"name": "Outer", "namespace": "ns"}
    if fields is not None:
        root["fields"] = fields

    with pytest.raises(MalformedFieldsError):
        extract_records(root)


def test_failure_deep_in_tree_produces_no_partial_result() -> None:
    root = _record(
        "Outer",
        [
            _array_field("ok", _record("Ok")),
            _array_field("bad", {"name": "Bad", "fields": []}),
        ],
    )

    with pytest.raises(MissingIdentityError):
        extract_records(root)


def test_records_nested_beyond_recursion_limit_fail() -> None:
    root = _record("Level0")
    for depth in range(1, 5000):
        root = _record(f"Level{depth}", [_array_field("child", root)])

    with pytest.raises(NestingTooDeepError, match="nest too deeply"):
        extract_records(root)


def test_sample_schema_flattens_in_declaration_order() -> None:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "sample-nested-schema.avsc"
    document = parse_schema(strip_doc_lines(sample_path.read_bytes()))

    records = extract_records(document.root)

    assert [record.qualified_name for record in records] == [
        "dcos.metrics.MetricList",
        "dcos.metrics.Tag",
        "dcos.metrics.Datapoint",
    ]
    assert '"doc"' not in records[0].raw_text
