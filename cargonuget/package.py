"""Packing a nuspec and native libraries into a nupkg archive."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path, PurePosixPath

from .openxml import content_types, relationships
from .spec import Nuspec
from .targets import Target

LibPath = str | PathLike[str]
Libs = Mapping[Target, LibPath] | Iterable[tuple[Target, LibPath]]


class NugetPackError(Exception):
    """The nupkg could not be built."""


class NoValidTargetsError(NugetPackError):
    """None of the supplied libraries had a known platform target."""

    def __init__(self) -> None:
        super().__init__(
            "No valid platform targets were supplied\n"
            "This probably means you're running on an unsupported platform"
        )


class WriteLibError(NugetPackError):
    """A native library could not be added to the package."""

    def __init__(self, rid: str, lib_path: str, err: Exception) -> None:
        super().__init__(
            f"Error reading lib {rid} at path {lib_path}\n"
            f"Caused by: Error reading lib\nCaused by: {err}"
        )
        self.rid = rid
        self.lib_path = lib_path
        self.err = err


@dataclass(frozen=True)
class Nupkg:
    """A built nupkg: its file name, included runtime ids and archive bytes."""

    name: str
    rids: list[str] = field(default_factory=list)
    buf: bytes = field(default=b"", repr=False)


def _lib_entry(id: str, rid: str, lib_path: Path) -> str:
    entry = PurePosixPath("runtimes", rid, "native", id)
    if lib_path.suffix:
        entry = entry.with_suffix(lib_path.suffix)
    return str(entry)


def pack(id: str, version: str, spec: bytes, libs: Libs) -> Nupkg:
    """Build a nupkg holding the nuspec and one native library per known target."""
    pairs = libs.items() if isinstance(libs, Mapping) else libs
    pkgs = [
        (target.rid(), Path(path))
        for target, path in pairs
        if not target.is_unknown()
    ]
    if not pkgs:
        raise NoValidTargetsError()

    nuspec_path = PurePosixPath(id).with_suffix(".nuspec")
    buffer = io.BytesIO()

    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            rels_path, rels_xml = relationships(nuspec_path)
            archive.writestr(str(rels_path), rels_xml)

            types_path, types_xml = content_types()
            archive.writestr(str(types_path), types_xml)

            archive.writestr(str(nuspec_path), spec)

            for rid, lib_path in pkgs:
                try:
                    data = lib_path.read_bytes()
                except OSError as err:
                    raise WriteLibError(rid, str(lib_path), err) from err
                archive.writestr(_lib_entry(id, rid, lib_path), data)
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as err:
        raise NugetPackError(f"Error building nupkg\nCaused by: {err}") from err

    return Nupkg(
        name=f"{id}.{version}.nupkg",
        rids=[rid for rid, _ in pkgs],
        buf=buffer.getvalue(),
    )


def pack_nuspec(nuspec: Nuspec, libs: Libs) -> Nupkg:
    """Build a nupkg from a formatted nuspec and the built libraries."""
    return pack(nuspec.id, nuspec.version, nuspec.xml, libs)