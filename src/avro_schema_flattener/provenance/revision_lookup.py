"""Provenance collection for generated sources."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from .provenance_models import UNKNOWN_REVISION, Provenance

logger = logging.getLogger(__name__)

CommandRunner = Callable[[tuple[str, ...], Path | None], str]
RevisionLookup = Callable[[], str]
Clock = Callable[[], datetime]

GIT_REVISION_COMMAND = ("git", "rev-parse", "HEAD")


class ProvenanceUnavailableError(Exception):
    """Raised when the source revision cannot be determined."""


def lookup_git_revision(
    *, cwd: Path | None = None, run_command: CommandRunner | None = None
) -> str:
    """Return the current git revision of ``cwd``."""
    command_runner = run_command or _run_output_command
    revision = command_runner(GIT_REVISION_COMMAND, cwd).strip()
    if not revision:
        raise ProvenanceUnavailableError("git rev-parse HEAD returned no revision.")
    logger.info("Git revision: %s", revision)
    return revision


def collect_provenance(
    argv: Sequence[str],
    *,
    clock: Clock | None = None,
    revision_lookup: RevisionLookup | None = None,
) -> Provenance:
    """Collect timestamp, command line and revision, degrading to UNKNOWN revision."""
    now = clock or (lambda: datetime.now(UTC))
    lookup = revision_lookup or lookup_git_revision
    try:
        revision = lookup()
    except ProvenanceUnavailableError as exc:
        logger.warning("Failed to get Git revision: %s", exc)
        revision = UNKNOWN_REVISION
    return Provenance(generated_at=now(), command=shlex.join(argv), revision=revision)


def _run_output_command(command: tuple[str, ...], cwd: Path | None) -> str:
    """Run one command and wrap subprocess errors as provenance failures."""
    try:
        completed = subprocess.run(
            list(command), cwd=cwd, check=True, capture_output=True, text=True
        )
    except FileNotFoundError as exc:
        raise ProvenanceUnavailableError(
            f"Command not found: {shlex.join(command)}"
        ) from exc
    except OSError as exc:
        raise ProvenanceUnavailableError(
            f"Command could not be run: {shlex.join(command)}: {exc}"
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise ProvenanceUnavailableError(
            f"Command failed with exit code {exc.returncode}: {shlex.join(command)}"
        ) from exc
    return completed.stdout
