"""Schema preprocessing exports."""

from .doc_line_stripper import DOC_MARKER, strip_doc_lines

__all__ = ["DOC_MARKER", "strip_doc_lines"]
