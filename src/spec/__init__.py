"""Declarative spec directory support.

Archive upload specs record the intent to package a set of globs under a
name; the spec directory is read back to reuse an equivalent record instead
of declaring a duplicate.
"""

from .store import DeclaredResource, SpecResources, read_specs, spec_save, specs_equivalent
from .dedup import resolve_spec_reference

__all__ = [
    "DeclaredResource",
    "SpecResources",
    "read_specs",
    "spec_save",
    "specs_equivalent",
    "resolve_spec_reference",
]
