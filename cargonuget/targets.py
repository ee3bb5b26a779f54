"""Runtime identifiers for native targets and the command-line parser."""

from __future__ import annotations

import argparse
import platform
import struct
import sys
from dataclasses import dataclass
from enum import Enum

VERSION = "0.1.0"

PACK_CMD = "pack"
CROSS_CMD = "cross"


class Arch(Enum):
    """A processor architecture, named as in a dotnet runtime identifier."""

    X64 = "x64"
    X86 = "x86"

    @staticmethod
    def local() -> Arch | None:
        """The architecture of the running interpreter, if it is a known one."""
        machine = platform.machine().lower()
        pointer_bits = struct.calcsize("P") * 8
        if machine in {"x86_64", "amd64", "x64"}:
            return Arch.X64 if pointer_bits == 64 else Arch.X86
        if machine in {"i386", "i486", "i586", "i686", "x86"}:
            return Arch.X86
        return None

    def rid(self) -> str:
        return self.value

    @staticmethod
    def from_rid(rid: str) -> Arch | None:
        try:
            return Arch(rid)
        except ValueError:
            return None


class Platform(Enum):
    """An operating system, named as in a dotnet runtime identifier."""

    WINDOWS = "win"
    MACOS = "osx"
    LINUX = "linux"


@dataclass(frozen=True)
class CrossTarget:
    """A concrete platform and architecture pair."""

    platform: Platform
    arch: Arch

    @staticmethod
    def local() -> CrossTarget | None:
        """The target the program is running on, if it is a supported one."""
        arch = Arch.local()
        if arch is None:
            return None
        if sys.platform.startswith("win"):
            return CrossTarget(Platform.WINDOWS, arch)
        if sys.platform == "darwin":
            return CrossTarget(Platform.MACOS, arch)
        if sys.platform.startswith("linux"):
            return CrossTarget(Platform.LINUX, arch)
        return None

    def rid(self) -> str:
        return f"{self.platform.value}-{self.arch.rid()}"

    @staticmethod
    def from_rid(rid: str) -> CrossTarget | None:
        parts = rid.split("-")
        if len(parts) < 2:
            return None
        arch = Arch.from_rid(parts[1])
        if arch is None:
            return None
        try:
            plat = Platform(parts[0])
        except ValueError:
            return None
        return CrossTarget(plat, arch)


class _Kind(Enum):
    LOCAL = "local"
    UNKNOWN = "unknown"
    CROSS = "cross"


@dataclass(frozen=True)
class Target:
    """The machine a library is built for: local, unknown or a given target."""

    kind: _Kind
    target: CrossTarget | None = None

    @staticmethod
    def local() -> Target:
        return Target(_Kind.LOCAL)

    @staticmethod
    def unknown() -> Target:
        return Target(_Kind.UNKNOWN)

    @staticmethod
    def of(cross_target: CrossTarget) -> Target:
        return Target(_Kind.CROSS, cross_target)

    def cross(self) -> CrossTarget | None:
        if self.kind is _Kind.LOCAL:
            return CrossTarget.local()
        if self.kind is _Kind.CROSS:
            return self.target
        return None

    def is_unknown(self) -> bool:
        return self.cross() is None

    def rid(self) -> str:
        cross = self.cross()
        return cross.rid() if cross is not None else "any"

    @staticmethod
    def from_rid(rid: str) -> Target:
        cross = CrossTarget.from_rid(rid)
        return Target.of(cross) if cross is not None else Target.unknown()


def target_path_arg(target: CrossTarget) -> str:
    """The name of the option giving a prebuilt library for a target."""
    return f"{target.rid()}-path"


def _path_targets() -> list[CrossTarget]:
    return [
        CrossTarget(plat, arch)
        for arch in (Arch.X86, Arch.X64)
        for plat in (Platform.WINDOWS, Platform.MACOS, Platform.LINUX)
    ]


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-q", "--cargo-build-quiet", action="store_true",
                        help="don't print output from cargo commands")
    parser.add_argument("-t", "--test", action="store_true", help="run cargo tests")
    parser.add_argument("-r", "--release", action="store_true", help="run an optimised build")
    parser.add_argument("--nupkg-dir", help="path to save the nupkg")


def build_parser() -> argparse.ArgumentParser:
    """The command-line parser with the pack and cross subcommands."""
    parser = argparse.ArgumentParser(prog="cargo-nuget")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command")

    pack = commands.add_parser(
        PACK_CMD, help="Pack a Rust library as a Nuget package for local development")
    pack.add_argument("--cargo-dir", help="path to the Rust crate")
    _add_common(pack)

    cross = commands.add_parser(
        CROSS_CMD,
        help="Pack a Rust library as a Nuget package for cross-platform distribution")
    cross.add_argument("--cargo-dir", help="path to the Rust crate")
    cross.add_argument("--targets", nargs="+", required=True,
                       help="set of dotnet rids to include")
    _add_common(cross)
    for target in _path_targets():
        cross.add_argument(
            f"--{target_path_arg(target)}",
            help=f"a specific path to the output for the {target.rid()} target")

    return parser