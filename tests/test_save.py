from pathlib import Path

import pytest

from cargonuget.save import NugetSaveError, nupkg_path, save_nupkg


def test_nupkg_path_defaults_to_current_dir():
    assert nupkg_path("pkg.0.1.0.nupkg") == Path(".") / "pkg.0.1.0.nupkg"


def test_nupkg_path_in_dir():
    assert nupkg_path("pkg.0.1.0.nupkg", "out") == Path("out") / "pkg.0.1.0.nupkg"


def test_save_round_trip(tmp_path):
    target = tmp_path / "pkg.nupkg"
    result = save_nupkg(target, b"PK\x03\x04data")
    assert result == target
    assert target.read_bytes() == b"PK\x03\x04data"


def test_save_truncates_existing(tmp_path):
    target = tmp_path / "pkg.nupkg"
    target.write_bytes(b"a much longer previous content")
    save_nupkg(target, b"short")
    assert target.read_bytes() == b"short"


def test_save_into_missing_dir_raises(tmp_path):
    with pytest.raises(NugetSaveError) as info:
        save_nupkg(tmp_path / "missing" / "pkg.nupkg", b"data")
    assert str(info.value).startswith("Error saving nupkg")


def test_save_with_nupkg_path(tmp_path):
    target = nupkg_path("native.0.1.0.nupkg", tmp_path)
    save_nupkg(target, b"content")
    assert (tmp_path / "native.0.1.0.nupkg").read_bytes() == b"content"