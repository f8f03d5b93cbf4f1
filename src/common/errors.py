"""Error types raised by the staging core.

Every error names the operation that failed so the CLI can print
``"<operation>: <cause>"`` without knowing which layer raised it.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple


class StageError(Exception):
    """Base class for all staging failures."""

    def __init__(self, operation: str, cause: Optional[object] = None):
        self.operation = operation
        self.cause = cause
        message = operation if cause is None else f"{operation}: {cause}"
        super().__init__(message)


class ArchiveValidationError(StageError):
    """One or more inputs resolved to zero files."""

    def __init__(self, errors: Iterable):
        self.errors: Tuple = tuple(errors)
        detail = "; ".join(str(e) for e in self.errors)
        super().__init__("validate archive inputs", f"{len(self.errors)} error(s) occurred: {detail}")

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(e.path for e in self.errors)


class ArchiveIOError(StageError):
    """Filesystem failure while preparing an archive."""


class SpecStoreError(StageError):
    """The spec directory could not be read or written."""


class TransportError(StageError):
    """Network or HTTP-level failure talking to the controller."""

    def __init__(self, operation: str, cause: Optional[object] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(operation, cause)
