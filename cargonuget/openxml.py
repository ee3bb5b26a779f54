"""OpenXML package parts needed inside a nupkg."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath

from .xmlwriter import XmlWriter

_CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
_RELATIONSHIPS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
_MANIFEST_TYPE = "http://schemas.microsoft.com/packaging/2010/07/manifest"

_DEFAULT_TYPES = [
    ("rels", "application/vnd.openxmlformats-package.relationships+xml"),
    ("txt", "application/octet"),
    ("dll", "application/octet"),
    ("dylib", "application/octet"),
    ("so", "application/octet"),
    ("nuspec", "application/octet"),
]


def content_types() -> tuple[PurePosixPath, bytes]:
    """The `[Content_Types].xml` part and its path in the package."""
    writer = XmlWriter()
    with writer.elem("Types", [("xmlns", _CONTENT_TYPES_NS)]):
        for extension, content_type in _DEFAULT_TYPES:
            writer.empty("Default", [("Extension", extension), ("ContentType", content_type)])
    return PurePosixPath("[Content_Types].xml"), writer.getvalue()


def relationships(nuspec_path: str | PurePath) -> tuple[PurePosixPath, bytes]:
    """The `_rels/.rels` part pointing at the nuspec manifest."""
    writer = XmlWriter()
    with writer.elem("Relationships", [("xmlns", _RELATIONSHIPS_NS)]):
        writer.empty(
            "Relationship",
            [("Type", _MANIFEST_TYPE), ("Target", f"/{nuspec_path}")],
        )
    return PurePosixPath("_rels/.rels"), writer.getvalue()