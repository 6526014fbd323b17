"""Documentation line stripping.

``json.loads`` gives no hook for dropping individual keys while keeping the
rest of the text intact, so ``"doc"`` annotations are removed line by line
before parsing. Any line mentioning ``"doc"`` is dropped, including lines where
it only appears inside a value.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DOC_MARKER = b'"doc"'


def strip_doc_lines(data: bytes) -> bytes:
    """Return ``data`` without the lines containing the ``"doc"`` key."""
    kept: list[bytes] = []
    for line_number, line in enumerate(data.splitlines(keepends=True), start=1):
        if DOC_MARKER in line:
            logger.info(
                "Skipping doc (line %d): %s",
                line_number,
                line.strip().decode("utf-8", errors="replace"),
            )
            continue
        kept.append(line)
    return b"".join(kept)
