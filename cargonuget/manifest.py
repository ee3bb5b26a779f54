"""Reading package metadata from a Cargo manifest."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

_DYLIB_TYPES = frozenset({"dylib", "cdylib"})


class CargoParseError(Exception):
    """The Cargo manifest could not be read or understood."""


class CargoKeyError(CargoParseError):
    """A required key is missing from the manifest."""

    def __init__(self, key: str) -> None:
        super().__init__(f"The '{key}' key is required, but wasn't found")
        self.key = key


class NotADylibError(CargoParseError):
    """The crate does not build a dynamic library."""

    def __init__(self) -> None:
        super().__init__("The crate must include `dylib` in `lib.crate-type`")


@dataclass(frozen=True)
class CargoConfig:
    """The package metadata taken from a manifest."""

    name: str
    version: str
    authors: list[str] = field(default_factory=list)
    repository: str = ""
    description: str = ""


def _get(table: dict[str, Any], key: str, kind: type) -> Any:
    value = table.get(key)
    if not isinstance(value, kind):
        raise CargoKeyError(key)
    return value


def _is_dylib(toml: dict[str, Any]) -> bool:
    lib = toml.get("lib")
    if not isinstance(lib, dict):
        return False
    crate_types = lib.get("crate-type")
    if not isinstance(crate_types, list):
        return False
    return any(isinstance(t, str) and t in _DYLIB_TYPES for t in crate_types)


def parse_toml(data: bytes | str) -> CargoConfig:
    """Parse manifest contents into a `CargoConfig`."""
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise CargoParseError(f"Error parsing config\nCaused by: {err}") from err
    else:
        text = data

    try:
        toml = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise CargoParseError(f"Error parsing config\nCaused by: {err}") from err

    if not _is_dylib(toml):
        raise NotADylibError()

    package = _get(toml, "package", dict)
    name = _get(package, "name", str)
    version = _get(package, "version", str)
    repository = _get(package, "repository", str)
    description = _get(package, "description", str)
    authors = [a for a in _get(package, "authors", list) if isinstance(a, str)]

    return CargoConfig(
        name=name,
        version=version,
        authors=authors,
        repository=repository,
        description=description,
    )


def parse_toml_file(path: str | PathLike[str]) -> CargoConfig:
    """Read and parse the manifest at `path`."""
    try:
        data = Path(path).read_bytes()
    except OSError as err:
        raise CargoParseError(
            f"Error reading config from '{path}'\nCaused by: {err}"
        ) from err
    return parse_toml(data)


def manifest_path(work_dir: str | PathLike[str] | None = None) -> Path:
    """The manifest path for a crate directory, or the current one."""
    if work_dir is None:
        return Path("Cargo.toml")
    return Path(work_dir) / "Cargo.toml"