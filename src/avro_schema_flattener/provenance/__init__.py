"""Provenance domain exports."""

from .provenance_models import UNKNOWN_REVISION, Provenance
from .revision_lookup import (
    ProvenanceUnavailableError,
    collect_provenance,
    lookup_git_revision,
)

__all__ = [
    "UNKNOWN_REVISION",
    "Provenance",
    "ProvenanceUnavailableError",
    "collect_provenance",
    "lookup_git_revision",
]
