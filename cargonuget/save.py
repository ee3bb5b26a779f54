"""Saving a built nupkg to disk."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

_log = logging.getLogger(__name__)


class NugetSaveError(Exception):
    """The nupkg could not be written."""


def nupkg_path(nupkg_name: str, nupkg_dir: str | PathLike[str] | None = None) -> Path:
    """Where a nupkg of the given name is saved: in `nupkg_dir`, or the current directory."""
    return Path(nupkg_dir if nupkg_dir is not None else ".") / nupkg_name


def save_nupkg(path: str | PathLike[str], data: bytes) -> Path:
    """Write the nupkg bytes to `path`, replacing any existing file."""
    target = Path(path)
    try:
        with target.open("wb") as f:
            f.write(data)
    except OSError as err:
        raise NugetSaveError(f"Error saving nupkg\nCaused by: {err}") from err
    _log.info("nupkg written to: %s", target)
    return target