"""Version reporting and dojo dependency version checks."""

from __future__ import annotations

import os


class DojoVersionError(Exception):
    """Raised when a package depends on a mismatching dojo-core version."""


def generate_version(
    dojo_version: str, scarb_version: str, cairo_version: str, sierra_version: str
) -> str:
    """Return the multi-line version string of the toolchain."""
    return (
        f"{dojo_version}\nscarb: {scarb_version}\n"
        f"cairo: {cairo_version}\nsierra: {sierra_version}"
    )


def check_package_dojo_version(
    dependency: str | None,
    dojo_version: str,
    manifest_path: str | os.PathLike[str],
) -> None:
    """Check the textual form of a package's dojo dependency.

    Only a git dependency pinned to a `v` tag is checked: it must mention the
    expected version. Raises DojoVersionError naming the manifest otherwise.
    """
    if dependency is None:
        return
    if "git+" in dependency and "tag=v" in dependency and dojo_version not in dependency:
        raise DojoVersionError(
            f"Found dojo-core version mismatch: expected {dojo_version}. "
            f"Please verify your dojo dependency in {os.fspath(manifest_path)}"
        )