"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from avro_schema_flattener.source_emission.source_templates import (
    DEFAULT_PACKAGE_NAME,
    DEFAULT_TARGET,
    IDENTIFIER_PATTERN,
    SUPPORTED_TARGETS,
)

from .runtime_settings import GenerationSettings

_KNOWN_KEYS = frozenset({"infile", "outfile", "dedupe", "target", "package"})


class ConfigurationError(Exception):
    """Raised when the generation settings are invalid."""


def build_settings(
    *,
    input_path: Path | str | None = None,
    output_path: Path | str | None = None,
    dedupe: bool | None = None,
    target: str | None = None,
    package_name: str | None = None,
    config_path: Path | str | None = None,
) -> GenerationSettings:
    """Merge explicit values over an optional settings file and validate them.

    Explicit arguments win over values read from ``config_path``. Relative paths
    in the settings file are resolved against the file's directory.
    """
    file_values = load_settings_file(config_path) if config_path is not None else {}

    resolved_input = _resolve_required_path(input_path, file_values.get("infile"), "infile")
    resolved_output = _resolve_required_path(output_path, file_values.get("outfile"), "outfile")
    resolved_dedupe = dedupe if dedupe is not None else file_values.get("dedupe", False)
    resolved_target = target if target is not None else file_values.get("target", DEFAULT_TARGET)
    resolved_package = (
        package_name
        if package_name is not None
        else file_values.get("package", DEFAULT_PACKAGE_NAME)
    )

    return GenerationSettings(
        input_path=resolved_input,
        output_path=resolved_output,
        dedupe=_require_bool(resolved_dedupe, "dedupe"),
        target=_require_target(resolved_target),
        package_name=_require_package_name(resolved_package),
    )


def load_settings_file(config_path: Path | str) -> dict[str, Any]:
    """Load the YAML settings file into a normalized mapping."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    values = dict(parsed)
    for key in ("infile", "outfile"):
        if values.get(key) is not None:
            raw_path = _require_non_empty_string(values[key], key)
            values[key] = _resolve_path(path.parent, raw_path)
    return values


def _resolve_required_path(explicit: Path | str | None, from_file: Any, field_name: str) -> Path:
    if explicit is not None:
        return Path(_require_non_empty_string(str(explicit), field_name))
    if from_file is None:
        raise ConfigurationError(f"Missing argument: --{field_name}")
    return Path(from_file)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_target(value: Any) -> str:
    target = _require_non_empty_string(value, "target").lower()
    if target not in SUPPORTED_TARGETS:
        raise ConfigurationError(
            f"target must be one of {', '.join(SUPPORTED_TARGETS)}; got '{target}'."
        )
    return target


def _require_package_name(value: Any) -> str:
    package_name = _require_non_empty_string(value, "package")
    if not IDENTIFIER_PATTERN.fullmatch(package_name):
        raise ConfigurationError(f"package '{package_name}' is not a valid identifier.")
    return package_name


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
