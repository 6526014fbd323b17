"""Generated source rendering service."""

from __future__ import annotations

from collections.abc import Sequence

from avro_schema_flattener.provenance.provenance_models import Provenance
from avro_schema_flattener.schema_management.schema_models import ExtractedRecord

from .source_templates import (
    BANNER_LINES,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_TARGET,
    FOOTER_LINE,
    IDENTIFIER_PATTERN,
    NAMESPACE_SUFFIX,
    PYTHON_GROUP_NAME,
    SCHEMA_SUFFIX,
)


def render_source(
    records: Sequence[ExtractedRecord],
    provenance: Provenance,
    *,
    target: str = DEFAULT_TARGET,
    package_name: str = DEFAULT_PACKAGE_NAME,
) -> str:
    """Render extracted records as named constants of the target language.

    Args:
      records: Extracted records in emission order.
      provenance: Metadata written to the header comment.
      target: ``"go"`` or ``"python"``.
      package_name: Go package clause; ignored for Python.

    Raises:
      ValueError: If ``target`` is not supported or a record name cannot be
        used as an identifier.
    """
    for record in records:
        if not IDENTIFIER_PATTERN.fullmatch(record.name):
            raise ValueError(
                f"Record name '{record.name}' of {record.qualified_name} "
                "is not a valid identifier."
            )
    if target == "go":
        return _render_go(records, provenance, package_name)
    if target == "python":
        return _render_python(records, provenance)
    raise ValueError(f"Unsupported target: {target}")


def _render_go(
    records: Sequence[ExtractedRecord], provenance: Provenance, package_name: str
) -> str:
    lines = [f"package {package_name}", ""]
    lines.extend(f"// {line}" for line in BANNER_LINES)
    lines.append("")
    lines.extend(f"// {line}" for line in _provenance_lines(provenance))
    lines.extend(["", "const (", ""])
    for record in records:
        lines.append(f"\t{record.name}{NAMESPACE_SUFFIX} = {go_raw_string(record.namespace)}")
        lines.append(f"\t{record.name}{SCHEMA_SUFFIX} = {go_raw_string(record.raw_text)}")
        lines.append("")
    lines.extend([")", "", f"// {FOOTER_LINE}", ""])
    return "\n".join(lines)


def _render_python(records: Sequence[ExtractedRecord], provenance: Provenance) -> str:
    lines = [f"# {line}" for line in BANNER_LINES]
    lines.append("")
    lines.extend(f"# {line}" for line in _provenance_lines(provenance))
    lines.extend(["", "", f"class {PYTHON_GROUP_NAME}:", ""])
    if not records:
        lines.extend(["    pass", ""])
    for record in records:
        lines.append(f"    {record.name}{NAMESPACE_SUFFIX} = {record.namespace!r}")
        lines.append(f"    {record.name}{SCHEMA_SUFFIX} = {record.raw_text!r}")
        lines.append("")
    lines.extend(["", f"# {FOOTER_LINE}", ""])
    return "\n".join(lines)


def go_raw_string(value: str) -> str:
    """Quote ``value`` as a Go raw string literal.

    Raw strings cannot contain a backtick, so backticks are spliced in as
    interpreted string literals.
    """
    return " + \"`\" + ".join(f"`{part}`" for part in value.split("`"))


def _provenance_lines(provenance: Provenance) -> tuple[str, str, str]:
    return (
        f"Generated at: {provenance.generated_at.isoformat()}",
        f"Command: {_single_line(provenance.command)}",
        f"Git revision: {provenance.revision}",
    )


def _single_line(text: str) -> str:
    return " ".join(text.splitlines())
