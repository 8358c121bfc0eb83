"""Command-line helpers: UI verbosity, profile selection and address detection."""

from __future__ import annotations

import enum
import logging

DEV_PROFILE = "dev"
RELEASE_PROFILE = "release"


class Verbosity(enum.Enum):
    """How much the user interface prints."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


def ui_verbosity(level: int | None) -> Verbosity:
    """Map a logging level to a UI verbosity.

    `None` means logging is off. Warning or more detailed levels are verbose;
    any other enabled level is normal.
    """
    if level is None:
        return Verbosity.QUIET
    if level <= logging.WARNING:
        return Verbosity.VERBOSE
    return Verbosity.NORMAL


def determine_profile(
    profile: str | None = None, release: bool = False, dev: bool = False
) -> str:
    """Return the profile name selected by the options, `dev` by default.

    At most one of the options may be given; raises ValueError otherwise or
    when the profile name is empty.
    """
    given = sum((profile is not None, release, dev))
    if given > 1:
        raise ValueError("only one of --profile, --release and --dev may be given")
    if release:
        return RELEASE_PROFILE
    if dev:
        return DEV_PROFILE
    if profile is not None:
        if not profile.strip():
            raise ValueError("profile name must not be empty")
        return profile
    return DEV_PROFILE


def is_address(tag_or_address: str) -> bool:
    """Return True if the text is a hexadecimal address rather than a tag."""
    return tag_or_address.startswith("0x")