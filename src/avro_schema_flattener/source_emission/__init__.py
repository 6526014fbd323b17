"""Source emission exports."""

from .source_renderer import go_raw_string, render_source
from .source_templates import DEFAULT_PACKAGE_NAME, DEFAULT_TARGET, SUPPORTED_TARGETS

__all__ = [
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_TARGET",
    "SUPPORTED_TARGETS",
    "go_raw_string",
    "render_source",
]
