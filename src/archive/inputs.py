"""Input resolution: glob expansion and existence validation for archive inputs.

URLs are accepted as-is. Every other entry must expand to at least one file;
failures are collected across all entries instead of stopping at the first.
"""
from __future__ import annotations

import glob
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from common.errors import ArchiveValidationError
from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

URL_PREFIXES = ("http://", "https://")

# Wildcards match dotfiles too; glob only accepts include_hidden from 3.11 on.
_GLOB_OPTIONS = {"recursive": True}
if sys.version_info >= (3, 11):
    _GLOB_OPTIONS["include_hidden"] = True


@dataclass(frozen=True)
class InputError:
    """A single input entry that did not resolve."""
    path: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Ok:
    """All inputs resolved."""

    @property
    def ok(self) -> bool:
        return True

    def raise_for_errors(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    """At least one input resolved to nothing; ``errors`` is never empty."""
    errors: Tuple[InputError, ...]

    def __post_init__(self):
        if not self.errors:
            raise ValueError("Failed requires at least one error")

    @property
    def ok(self) -> bool:
        return False

    def raise_for_errors(self) -> None:
        raise ArchiveValidationError(self.errors)


ValidationResult = Union[Ok, Failed]


def is_url(path: str) -> bool:
    """Return True for http(s) URLs."""
    return path.startswith(URL_PREFIXES)


def find_all_globs(patterns: Sequence[str]) -> List[str]:
    """Expand glob patterns into absolute paths, keeping pattern order.

    A pattern that matches nothing contributes nothing; it is not an error here.
    """
    files: List[str] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, **_GLOB_OPTIONS))
        files.extend(os.path.abspath(m) for m in matches)
    return files


def validate_inputs(inputs: Sequence[str]) -> ValidationResult:
    """Check that every non-URL input matches at least one file.

    Returns:
        Ok() or Failed(errors) naming every entry that matched nothing.
    """
    errors: List[InputError] = []
    for path in inputs:
        if is_url(path):
            continue
        if not find_all_globs([path]):
            errors.append(InputError(path, f'Error finding any files with path "{path}"'))

    if is_debug_enabled(logger):
        logger.debug(
            "Validated archive inputs",
            extra=extra_context(
                event="validate",
                component="inputs",
                action="validate_inputs",
                outcome="success" if not errors else "failed",
                count=len(inputs),
                failures=len(errors),
            ),
        )

    if errors:
        return Failed(tuple(errors))
    return Ok()
