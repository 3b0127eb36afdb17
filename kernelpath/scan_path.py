"""Splits a raw path into its root prefix and components."""

import dataclasses
from dataclasses import dataclass
from enum import Enum

from kernelpath.canonicalize_win32 import normalize_separators
from kernelpath.code_units import SEPARATOR, is_ascii_letter
from kernelpath.errors import InvalidRoot

VERBATIM_PREFIX = "\\\\?\\"
DEVICE_MARKERS = (".", "?")


class Prefix(Enum):
    """Root syntax recognized at the start of a path."""

    VERBATIM = "verbatim"  # \\?\
    DEVICE = "device"  # \\.\
    UNC = "unc"  # \\server\share
    DRIVE = "drive"  # C:\
    DRIVE_RELATIVE = "drive_relative"  # C:
    ROOT_RELATIVE = "root_relative"  # \
    NONE = "none"


@dataclass(frozen=True)
class ScanResult:
    """The prefix found by the scanner and the unconsumed remainder."""

    prefix: Prefix
    remainder: str
    components: tuple[str, ...]
    trailing_separator: bool = False
    drive: str | None = None
    server: str | None = None
    share: str | None = None
    device_marker: str = "."


def scan_path(path: str) -> ScanResult:
    """Identify the root prefix of `path` and split the rest into components.

    Verbatim paths must use backslashes exactly and their remainder is split
    without dropping empty segments. Everything else has `/` rewritten to `\\`
    first, and empty components are dropped.
    """
    if path.startswith(VERBATIM_PREFIX):
        remainder = path[len(VERBATIM_PREFIX) :]
        components = tuple(remainder.split(SEPARATOR)) if remainder else ()
        return ScanResult(Prefix.VERBATIM, remainder, components)

    path = normalize_separators(path)

    # Order matters: each pattern is a prefix of the ones tested before it.
    if path[:2] == SEPARATOR * 2 and path[2:3] in DEVICE_MARKERS and path[3:4] == SEPARATOR:
        return _finish(Prefix.DEVICE, path[4:], device_marker=path[2])
    if path[:2] == SEPARATOR * 2:
        return _scan_unc(path[2:])
    if path[:1] == SEPARATOR:
        return _finish(Prefix.ROOT_RELATIVE, path[1:])
    if len(path) >= 2 and is_ascii_letter(path[0]) and path[1] == ":":
        if path[2:3] == SEPARATOR:
            return _finish(Prefix.DRIVE, path[3:], drive=path[0].upper())
        return _finish(Prefix.DRIVE_RELATIVE, path[2:], drive=path[0].upper())
    return _finish(Prefix.NONE, path)


def _scan_unc(rest: str) -> ScanResult:
    """Parse `server\\share` after the leading `\\\\`."""
    server, _, after_server = rest.partition(SEPARATOR)
    share, share_separator, remainder = after_server.partition(SEPARATOR)
    if not server:
        msg = "UNC path is missing its server name"
        raise InvalidRoot(msg)
    if not share:
        msg = f"UNC path to server {server!r} is missing its share name"
        raise InvalidRoot(msg)
    result = _finish(Prefix.UNC, remainder, server=server, share=share)
    if not result.components and share_separator:
        # `\\server\share\` keeps its trailing separator.
        return dataclasses.replace(result, trailing_separator=True)
    return result


def _finish(prefix: Prefix, remainder: str, **fields: str) -> ScanResult:
    components = tuple(c for c in remainder.split(SEPARATOR) if c)
    trailing = bool(components) and remainder.endswith(SEPARATOR)
    return ScanResult(prefix, remainder, components, trailing, **fields)
