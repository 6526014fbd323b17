"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "flattener.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation settings for avro-schema-flattener.
# Command line options override every value set here.
# Relative paths are resolved against the directory of this file.

# Avro record schema to flatten (required).
infile: "schema.avsc"

# Generated source file to write (required).
outfile: "schema_gen.go"

# Skip repeated nested records that share a name and definition.
dedupe: false

# Output language: go or python.
target: "go"

# Go package clause of the generated file.
package: "collector"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML settings template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
