"""Turn a local archive path (or URL) into an uploaded archive descriptor."""
from __future__ import annotations

import hashlib
import logging
import os

from archive.inputs import is_url
from archive.models import Checksum, UploadedArchive
from common.errors import ArchiveIOError
from constants import ArchiveType, Constants
from controller.client import ControllerClient

logger = logging.getLogger(__name__)


def file_checksum(path: str) -> Checksum:
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(65536), b""):
            digest.update(chunk)
    return Checksum(sum=digest.hexdigest())


def upload_archive(client: ControllerClient, path: str) -> UploadedArchive:
    """Small files are inlined as literals; larger ones go to the storage service.

    Raises:
        ArchiveIOError: The local file could not be read.
        TransportError: The storage upload failed.
    """
    if is_url(path):
        return UploadedArchive(type=ArchiveType.URL, url=path)

    try:
        size = os.path.getsize(path)
        if size < Constants.ARCHIVE_LITERAL_SIZE_LIMIT:
            with open(path, "rb") as fh:
                return UploadedArchive(type=ArchiveType.LITERAL, literal=fh.read())
        checksum = file_checksum(path)
    except OSError as exc:
        raise ArchiveIOError(f"read archive {path}", exc) from exc

    logger.info("Uploading %s (%d bytes)", path, size)
    archive_id = client.upload_file(path)
    return UploadedArchive(type=ArchiveType.URL, url=client.storage_url(archive_id), checksum=checksum)
