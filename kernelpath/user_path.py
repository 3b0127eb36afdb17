"""Cleaning of Win32 paths and conversion of verbatim paths to user form."""

import dataclasses
import logging

from kernelpath.canonicalize_win32 import (
    CURRENT_DIR,
    FILENAME_TRAILERS,
    MAX_PATH_LENGTH,
    PARENT_DIR,
    canonicalize_win32,
)
from kernelpath.classify import classify
from kernelpath.code_units import SEPARATOR, ascii_upper
from kernelpath.errors import InvalidRoot
from kernelpath.root_kind import Namespace, RootKind, VerbatimFlavor
from kernelpath.scan_path import VERBATIM_PREFIX
from kernelpath.to_win32_string import to_win32_string

logger = logging.getLogger(__name__)

UNC_MARKER = "UNC"


def clean_path(path: str) -> str:
    """Canonicalize a path without making it absolute or changing its prefix.

    Relative paths keep surplus leading `..` components. A trailing separator
    survives when the input had one, or when the final component strips away
    entirely (`dir\\...` becomes `dir\\`). Verbatim paths are returned as-is.
    """
    parsed = classify(path)
    if parsed.namespace is Namespace.NT:
        return path

    cleaned = canonicalize_win32(
        parsed.components,
        is_final_component_filename=not parsed.trailing_separator,
        extended_length=True,
        keep_leading_parents=not parsed.is_absolute,
    )
    if cleaned:
        trailing = parsed.trailing_separator or _strips_to_nothing(parsed.components)
    else:
        trailing = parsed.trailing_separator and not parsed.components
    result = dataclasses.replace(
        parsed, components=tuple(cleaned), trailing_separator=trailing
    )
    return to_win32_string(result)


def to_user_path(path: str, *, extended_length: bool = False) -> str:
    """Convert a verbatim path to the Win32 path that means the same thing.

    `\\\\?\\C:\\x` becomes `C:\\x` and `\\\\?\\UNC\\srv\\shr\\x` becomes
    `\\\\srv\\shr\\x`. If the Win32 form would be rewritten by cleaning (so it
    would name something else), is not a valid root, or exceeds the length
    bound, the verbatim path is returned unchanged. Non-verbatim paths are
    returned unchanged.

    The drive letter is uppercased (`\\\\?\\c:\\x` becomes `C:\\x`), matching
    the form `clean_path` and the resolver produce for drive roots.
    """
    parsed = classify(path)
    if parsed.root.kind is not RootKind.VERBATIM:
        return path

    remainder = path[len(VERBATIM_PREFIX) :]
    flavor = parsed.root.verbatim_flavor
    if flavor is VerbatimFlavor.DRIVE:
        candidate = ascii_upper(remainder[:1]) + remainder[1:]
    elif flavor is VerbatimFlavor.UNC:
        candidate = SEPARATOR + remainder[len(UNC_MARKER) :]
    else:
        candidate = f"{SEPARATOR * 2}.{SEPARATOR}{remainder}"

    try:
        absolute = classify(candidate).is_absolute
        cleaned = clean_path(candidate)
    except InvalidRoot:
        logger.debug("Keeping %r verbatim: %r has no valid root", path, candidate)
        return path
    if not absolute:
        # `\\?\C:` would become the drive-relative `C:`.
        return path
    if cleaned != candidate:
        logger.debug("Keeping %r verbatim: Win32 form cleans to %r", path, cleaned)
        return path
    if not extended_length and len(candidate) > MAX_PATH_LENGTH:
        return path
    return candidate


def _strips_to_nothing(components: tuple[str, ...]) -> bool:
    if not components:
        return False
    last = components[-1]
    return last not in (CURRENT_DIR, PARENT_DIR) and not last.rstrip(FILENAME_TRAILERS)
