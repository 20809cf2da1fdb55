#!/usr/bin/env python3
"""Size catalog: which icon widths each platform profile needs."""

from constants import (
    PROFILE_IOS,
    PROFILE_ANDROID,
    PROFILE_ALL,
    DEFAULT_PROFILE,
    IOS_SIZES,
    ANDROID_SIZES,
    ALL_SIZES,
)
from errors import UnknownProfileError

SIZE_CATALOG = {
    PROFILE_IOS: IOS_SIZES,
    PROFILE_ANDROID: ANDROID_SIZES,
    PROFILE_ALL: ALL_SIZES,
}

PROFILES = tuple(SIZE_CATALOG)


def normalize_profile(value):
    """Turn user input into a known profile name.

    None or an empty string select the default profile. Anything else
    that is not a known profile is rejected.
    """
    if value is None:
        return DEFAULT_PROFILE

    profile = str(value).strip().lower()
    if not profile:
        return DEFAULT_PROFILE
    if profile not in SIZE_CATALOG:
        raise UnknownProfileError(
            f"Unknown profile '{value}', expected one of: {', '.join(PROFILES)}"
        )
    return profile


def resolve_sizes(profile):
    """Return the ordered widths for a normalized profile."""
    return SIZE_CATALOG[profile]
