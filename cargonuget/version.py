"""Tagging a crate version for local development builds."""

from __future__ import annotations

from datetime import datetime, timezone

import semver


class LocalVersionError(Exception):
    """The version could not be given a development tag."""


def add_pretag(version: semver.Version | str, tag: str, num: int) -> semver.Version:
    """Append `num` to the pre-release, starting it with `tag` if absent; drop build metadata."""
    if isinstance(version, str):
        version = semver.Version.parse(version)
    prerelease = f"{version.prerelease}.{num}" if version.prerelease else f"{tag}.{num}"
    return version.replace(prerelease=prerelease, build=None)


def local_version_tag(version: str, now: datetime | None = None) -> str:
    """The version with a `dev` pre-release stamped with the current time."""
    try:
        parsed = semver.Version.parse(version)
    except (ValueError, TypeError) as err:
        raise LocalVersionError(f"Error adding dev pretag\nCaused by: {err}") from err

    moment = now if now is not None else datetime.now(timezone.utc)
    stamp = int(moment.timestamp())
    if stamp < 0:
        raise LocalVersionError(
            "Current timestamp is before the epoch\n"
            "You are either a time traveller or there's an error with your clock"
        )

    return str(add_pretag(parsed, "dev", stamp))