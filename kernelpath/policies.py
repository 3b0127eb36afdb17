"""Configurable behaviors that differ between OS generations or callers."""

from enum import Enum


class DeviceNamePolicy(Enum):
    """Which reserved device name matching algorithm to use."""

    MODERN = "modern"
    LEGACY = "legacy"


class DriveStreamStrictness(Enum):
    """How to treat `X:name`, which may also read as file `X`, stream `name`."""

    STRICT = "strict"  # reject the ambiguous form
    LENIENT = "lenient"  # always read it as drive-relative
