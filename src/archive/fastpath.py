"""Single-input shortcut: use an input as the archive without packaging it."""
from __future__ import annotations

import logging
import os
import re
from typing import Optional, Sequence

from archive.inputs import is_url
from common.errors import ArchiveIOError

logger = logging.getLogger(__name__)

# Local file header, and end-of-central-directory for an empty archive.
ZIP_MAGIC = (b"PK\x03\x04", b"PK\x05\x06")
_GLOB_CHARS = re.compile(r"[*?\[]")


def is_zip_file(path: str) -> bool:
    """Detect a zip container by its leading magic bytes, not its extension."""
    if not os.path.isfile(path):
        return False
    with open(path, "rb") as fh:
        head = fh.read(4)
    return head in ZIP_MAGIC


def fast_path(inputs: Sequence[str], resolved: Sequence[str], no_zip: bool) -> Optional[str]:
    """Return the path or URL to use as-is, or None when packaging is required.

    Args:
        inputs: Input tokens as given by the caller.
        resolved: Files those tokens expanded to.
        no_zip: Caller opted out of packaging; honoured only for a single file.

    Raises:
        ArchiveIOError: The single resolved file vanished since resolution.
    """
    if len(inputs) == 1 and is_url(inputs[0]):
        return inputs[0]

    if len(resolved) != 1:
        return None

    path = resolved[0]
    try:
        os.stat(path)
        is_zip = is_zip_file(path)
    except OSError as exc:
        raise ArchiveIOError(f"open input file {path}", exc) from exc

    # A literal single path is handed back exactly as the caller wrote it.
    chosen = inputs[0] if len(inputs) == 1 and not _GLOB_CHARS.search(inputs[0]) else path

    if is_zip:
        logger.debug("Input %s is already a zip archive", chosen)
        return chosen
    if no_zip:
        logger.debug("Using %s without packaging (nozip)", chosen)
        return chosen
    return None
