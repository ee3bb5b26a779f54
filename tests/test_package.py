import io
import zipfile

import pytest

from cargonuget.openxml import content_types, relationships
from cargonuget.package import (
    NoValidTargetsError,
    NugetPackError,
    WriteLibError,
    pack,
    pack_nuspec,
)
from cargonuget.spec import spec
from cargonuget.targets import Arch, CrossTarget, Platform, Target

LINUX_X64 = Target.of(CrossTarget(Platform.LINUX, Arch.X64))
WIN_X86 = Target.of(CrossTarget(Platform.WINDOWS, Arch.X86))


def _open(buf: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(buf))


def test_pack_with_no_targets():
    with pytest.raises(NoValidTargetsError):
        pack("some_pkg", "0.1.1", b"", {})


def test_pack_with_unknown_target():
    with pytest.raises(NoValidTargetsError):
        pack("some_pkg", "0.1.1", b"", {Target.unknown(): ""})


def test_no_valid_targets_is_pack_error():
    with pytest.raises(NugetPackError):
        pack("some_pkg", "0.1.1", b"", [])


def test_pack_writes_all_parts(tmp_path):
    lib = tmp_path / "libsome_pkg.so"
    lib.write_bytes(b"native bytes")

    nupkg = pack("some_pkg", "0.1.1", b"<package />", {LINUX_X64: lib})

    assert nupkg.name == "some_pkg.0.1.1.nupkg"
    assert nupkg.rids == ["linux-x64"]

    with _open(nupkg.buf) as archive:
        assert archive.namelist() == [
            "_rels/.rels",
            "[Content_Types].xml",
            "some_pkg.nuspec",
            "runtimes/linux-x64/native/some_pkg.so",
        ]
        assert archive.read("some_pkg.nuspec") == b"<package />"
        assert archive.read("runtimes/linux-x64/native/some_pkg.so") == b"native bytes"
        assert archive.read("_rels/.rels") == relationships("some_pkg.nuspec")[1]
        assert archive.read("[Content_Types].xml") == content_types()[1]
        assert all(
            info.compress_type == zipfile.ZIP_DEFLATED for info in archive.infolist()
        )


def test_pack_skips_unknown_targets_and_keeps_order(tmp_path):
    so = tmp_path / "lib.so"
    so.write_bytes(b"so")
    dll = tmp_path / "lib.dll"
    dll.write_bytes(b"dll")

    nupkg = pack(
        "pkg",
        "1.0.0",
        b"",
        [(WIN_X86, dll), (Target.unknown(), so), (LINUX_X64, so)],
    )

    assert nupkg.rids == ["win-x86", "linux-x64"]
    with _open(nupkg.buf) as archive:
        assert archive.read("runtimes/win-x86/native/pkg.dll") == b"dll"
        assert archive.read("runtimes/linux-x64/native/pkg.so") == b"so"


def test_pack_lib_without_extension(tmp_path):
    lib = tmp_path / "plainlib"
    lib.write_bytes(b"x")

    nupkg = pack("pkg", "1.0.0", b"", {LINUX_X64: lib})

    with _open(nupkg.buf) as archive:
        assert "runtimes/linux-x64/native/pkg" in archive.namelist()


def test_pack_missing_lib_raises_write_lib_error(tmp_path):
    missing = tmp_path / "absent.so"

    with pytest.raises(WriteLibError) as info:
        pack("pkg", "1.0.0", b"", {LINUX_X64: missing})

    assert info.value.rid == "linux-x64"
    assert info.value.lib_path == str(missing)
    assert isinstance(info.value.err, OSError)


def test_pack_nuspec_uses_spec_identity(tmp_path):
    lib = tmp_path / "lib.dylib"
    lib.write_bytes(b"mac")
    nuspec = spec("native", "0.1.0", "Someone", "desc", "http://examplerepository.com")
    mac = Target.of(CrossTarget(Platform.MACOS, Arch.X64))

    nupkg = pack_nuspec(nuspec, {mac: lib})

    assert nupkg.name == "native.0.1.0.nupkg"
    assert nupkg.rids == ["osx-x64"]
    with _open(nupkg.buf) as archive:
        assert archive.read("native.nuspec") == nuspec.xml
        assert archive.read("runtimes/osx-x64/native/native.dylib") == b"mac"