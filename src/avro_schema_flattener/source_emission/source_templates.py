"""Generated source layout constants."""

import re

GENERATOR_NAME = "avro-schema-flattener"
DEFAULT_PACKAGE_NAME = "collector"
SUPPORTED_TARGETS = ("go", "python")
DEFAULT_TARGET = "go"

BANNER_LINES = (
    f"THIS FILE IS AUTOGENERATED BY {GENERATOR_NAME}. DO NOT EDIT.",
    "The Avro runtime registers one record at a time, so every nested record is hoisted here.",
)
FOOTER_LINE = f"AGAIN, THIS FILE IS AUTOGENERATED BY {GENERATOR_NAME}. DO NOT EDIT."

NAMESPACE_SUFFIX = "Namespace"
SCHEMA_SUFFIX = "Schema"
PYTHON_GROUP_NAME = "Schemas"

# Record names and the Go package clause become identifiers in both targets.
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
