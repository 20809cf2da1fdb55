#!/usr/bin/env python3
"""Shared constants for the appiconizer tools."""

VERSION = "0.1"

# Platform profiles
PROFILE_IOS = "ios"
PROFILE_ANDROID = "android"
PROFILE_ALL = "all"

DEFAULT_PROFILE = PROFILE_ALL

# Target widths in pixels, in output order
IOS_SIZES = (29, 48, 55, 58, 87, 88, 80, 120, 180, 40, 76, 152, 167, 172, 196)
ANDROID_SIZES = (48, 72, 96, 144, 192)
# Both platforms. 48 appears in each set and is kept twice.
ALL_SIZES = (29, 48, 55, 58, 87, 88, 80, 120, 180, 40, 76, 152, 167, 48, 72, 96, 144, 192, 172, 196)

# Largest documented platform icon size
MAX_ICON_SIZE = 196

OUTPUT_PREFIX = "appiconizer"
TIMESTAMP_FORMAT = "%Y-%m-%d %H.%M.%S"
ICON_NAME_FORMAT = "icon_{width}.png"
ARCHIVE_SUFFIX = ".zip"

# Zip epoch; keeps archive bytes independent of the run time
ARCHIVE_ENTRY_DATE = (1980, 1, 1, 0, 0, 0)
