"""Read Cargo manifests, write nuspec metadata and pack native libraries into nupkg archives."""

__version__ = "0.1.0"