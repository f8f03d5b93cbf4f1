"""Data models for archive staging."""

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from constants import ArchiveType, Constants


@dataclass
class ArchiveUploadSpec:
    """Declarative intent to package ``include_globs`` into an archive named ``name``."""
    name: str
    include_globs: List[str]
    exclude_globs: List[str] = field(default_factory=list)

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "kind": Constants.SPEC_KIND_ARCHIVE_UPLOAD,
            "name": self.name,
            "include": list(self.include_globs),
        }
        if self.exclude_globs:
            doc["exclude"] = list(self.exclude_globs)
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ArchiveUploadSpec":
        return cls(
            name=str(doc.get("name") or ""),
            include_globs=_as_list(doc.get("include")),
            exclude_globs=_as_list(doc.get("exclude")),
        )


def _as_list(value: Any) -> List[str]:
    # A lone glob may be written as a scalar instead of a one-item list.
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


@dataclass
class Checksum:
    """Content checksum attached to uploaded archives."""
    sum: str
    type: str = "sha256"


@dataclass
class UrlReference:
    """Symbolic reference into the spec store, bound to bytes at reconciliation time."""
    archive_store_key: str

    @property
    def name(self) -> str:
        return self.archive_store_key[len(Constants.ARCHIVE_URL_PREFIX):]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": ArchiveType.URL.value, "url": self.archive_store_key}


@dataclass
class UploadedArchive:
    """Archive that is ready to use: inline bytes or a fetchable URL."""
    type: ArchiveType
    literal: Optional[bytes] = None
    url: Optional[str] = None
    checksum: Optional[Checksum] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type.value}
        if self.literal is not None:
            out["literal"] = base64.b64encode(self.literal).decode("ascii")
        if self.url is not None:
            out["url"] = self.url
        if self.checksum is not None:
            out["checksum"] = {"type": self.checksum.type, "sum": self.checksum.sum}
        return out


ArchiveDescriptor = Union[UrlReference, UploadedArchive]


@dataclass
class FunctionRef:
    """A deployed function and the package it points at."""
    name: str
    namespace: str
    package_name: Optional[str]

    @classmethod
    def from_api(cls, obj: Dict[str, Any]) -> "FunctionRef":
        metadata = obj.get("metadata") or {}
        package = (obj.get("spec") or {}).get("package") or {}
        ref = package.get("packageref") or {}
        return cls(
            name=str(metadata.get("name", "")),
            namespace=str(metadata.get("namespace", "")),
            package_name=ref.get("name"),
        )
