"""Build zip archives from input globs in a process-scoped temporary directory."""
from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from archive.fastpath import fast_path
from archive.inputs import find_all_globs
from archive.naming import RandomStringProvider, archive_name
from common.errors import ArchiveIOError
from common.logging_utils import extra_context, is_debug_enabled, Timer
from constants import Constants

logger = logging.getLogger(__name__)

_temp_dir: Optional[str] = None


def get_temp_dir() -> str:
    """Return this process's temp directory, creating it on first use.

    Raises:
        ArchiveIOError: The directory could not be created.
    """
    global _temp_dir  # pylint: disable=global-statement
    if _temp_dir is None or not os.path.isdir(_temp_dir):
        try:
            _temp_dir = tempfile.mkdtemp(prefix=Constants.TEMP_DIR_PREFIX)
        except OSError as exc:
            raise ArchiveIOError("create temporary archive directory", exc) from exc
    return _temp_dir


def _archive_members(files: Sequence[str]) -> Iterator[Tuple[str, str]]:
    """Yield (source path, member name) pairs for the files to archive."""
    if len(files) == 1 and os.path.isdir(files[0]):
        # A lone directory is archived by its contents.
        roots = [(files[0], files[0])]
    else:
        roots = [(f, os.path.dirname(f)) for f in files]

    for path, base in roots:
        if os.path.isdir(path):
            for dirpath, dirnames, filenames in os.walk(path):
                dirnames.sort()
                for fname in sorted(filenames):
                    full = os.path.join(dirpath, fname)
                    yield full, os.path.relpath(full, base).replace(os.sep, "/")
        else:
            yield path, os.path.basename(path)


def make_archive(target_name: str, globs: Sequence[str]) -> str:
    """Zip everything ``globs`` matches into ``target_name`` (``.zip`` appended if missing).

    Returns:
        str: Absolute path of the written archive.

    Raises:
        ArchiveIOError: The archive could not be written.
    """
    if not target_name.endswith(Constants.ARCHIVE_SUFFIX):
        target_name += Constants.ARCHIVE_SUFFIX

    files = find_all_globs(globs)
    seen: Set[str] = set()
    with Timer() as t:
        try:
            with zipfile.ZipFile(target_name, "w", compression=zipfile.ZIP_DEFLATED) as zf:
                for source, member in _archive_members(files):
                    if member in seen:
                        logger.warning("Skipping %s: %s is already in the archive", source, member)
                        continue
                    seen.add(member)
                    zf.write(source, member)
        except OSError as exc:
            raise ArchiveIOError("create archive file", exc) from exc

    if is_debug_enabled(logger):
        logger.debug(
            "Archive written",
            extra=extra_context(
                event="archive_write",
                component="materialize",
                action="make_archive",
                target=target_name,
                members=len(seen),
                duration_ms=t.duration_ms(),
            ),
        )
    return os.path.abspath(target_name)


def materialize(inputs: Sequence[str], name: str) -> str:
    """Package ``inputs`` as ``{tempdir}/{name}.zip`` and return its path.

    Globs are expanded again here so the archive reflects the disk as it is now.
    """
    return make_archive(os.path.join(get_temp_dir(), name), inputs)


def make_archive_file_if_needed(
    inputs: Sequence[str],
    no_zip: bool,
    name_hint: str = "",
    rng: Optional[RandomStringProvider] = None,
) -> str:
    """Return a path or URL usable as the archive, packaging only when required.

    A single zip file, a single URL, or a single file with ``no_zip`` is used
    as-is. ``no_zip`` is ignored when there is more than one input file.
    """
    name = archive_name(name_hint, inputs, rng)
    files: List[str] = find_all_globs(inputs)
    direct = fast_path(inputs, files, no_zip)
    if direct is not None:
        return direct
    logger.debug("Packaging %d input(s) as %s", len(files), name)
    return materialize(inputs, name)
