"""Package metadata written as `nuspec` XML."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .manifest import CargoConfig
from .xmlwriter import XmlWriter

_NUSPEC_NS = "http://schemas.microsoft.com/packaging/2012/06/nuspec.xsd"


@dataclass(frozen=True)
class NugetDependency:
    """A Nuget package the generated package depends on."""

    id: str
    version: str


@dataclass(frozen=True)
class Nuspec:
    """A formatted nuspec document together with the package identity."""

    id: str
    version: str
    xml: bytes

    def __repr__(self) -> str:
        return f"Nuspec(id={self.id!r}, version={self.version!r})"


def default_dependencies() -> list[NugetDependency]:
    """The platforms package, needed to resolve the right native binary at runtime."""
    return [NugetDependency("Microsoft.NETCore.Platforms", "[1.0.1, )")]


def spec(
    id: str,
    version: str,
    authors: str,
    description: str,
    repository: str,
    dependencies: Iterable[NugetDependency] | None = None,
) -> Nuspec:
    """Format package metadata as a nuspec XML document."""
    deps = list(dependencies) if dependencies is not None else default_dependencies()

    writer = XmlWriter()
    with writer.elem("package", [("xmlns", _NUSPEC_NS)]):
        with writer.elem("metadata"):
            writer.val("id", id)
            writer.val("version", version)
            writer.val("authors", authors)
            writer.empty("repository", [("url", repository)])
            writer.val("description", description)
            with writer.elem("dependencies"):
                for dependency in deps:
                    writer.empty(
                        "dependency",
                        [("id", dependency.id), ("version", dependency.version)],
                    )

    return Nuspec(id=id, version=version, xml=writer.getvalue())


def spec_from_config(config: CargoConfig) -> Nuspec:
    """Format the nuspec for a crate's manifest metadata."""
    return spec(
        id=config.name,
        version=config.version,
        authors=", ".join(config.authors),
        description=config.description,
        repository=config.repository,
        dependencies=default_dependencies(),
    )