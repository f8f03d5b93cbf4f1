"""Resolve archive inputs into a single archive descriptor."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from archive.inputs import validate_inputs
from archive.materialize import make_archive_file_if_needed
from archive.models import ArchiveDescriptor
from archive.naming import RandomStringProvider
from constants import Constants
from controller.client import ControllerClient
from controller.upload import upload_archive
from spec.dedup import resolve_spec_reference

logger = logging.getLogger(__name__)


def create_archive(
    client: Optional[ControllerClient],
    include_files: Sequence[str],
    no_zip: bool = False,
    spec_dir: Optional[str] = None,
    spec_file: Optional[str] = None,
    rng: Optional[RandomStringProvider] = None,
) -> ArchiveDescriptor:
    """Return an archive descriptor for ``include_files``.

    With ``spec_file`` an archive upload spec is recorded (or reused) in
    ``spec_dir`` and an archive:// reference is returned. Otherwise the inputs
    are packaged if needed and uploaded through ``client``. ``no_zip`` is
    ignored when there is more than one input file.

    Raises:
        ArchiveValidationError: Some inputs matched no files.
        ArchiveIOError, SpecStoreError, TransportError: From the step that failed.
    """
    validate_inputs(include_files).raise_for_errors()

    if spec_file:
        return resolve_spec_reference(
            spec_dir or Constants.SPEC_DIR,
            include_files,
            spec_file,
            rng=rng,
        )

    if client is None:
        raise ValueError("a controller client is required outside spec mode")
    archive_path = make_archive_file_if_needed(include_files, no_zip, rng=rng)
    return upload_archive(client, archive_path)
