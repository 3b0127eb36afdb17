"""Rendering of parsed paths in their user-facing Win32 form."""

from kernelpath.code_units import SEPARATOR
from kernelpath.parsed_path import ParsedPath
from kernelpath.root_kind import RelativeForm, Root, RootKind


def root_text(root: Root) -> str:
    """Return the root prefix as written in a Win32 path.

    Components follow this prefix directly, except for UNC roots where a
    separator is needed between the share and the first component.
    """
    if root.kind is RootKind.DRIVE:
        return f"{root.letter}:{SEPARATOR}"
    if root.kind is RootKind.UNC:
        return f"{SEPARATOR * 2}{root.server}{SEPARATOR}{root.share}"
    if root.kind is RootKind.DEVICE_NS:
        return f"{SEPARATOR * 2}{root.device_marker}{SEPARATOR}"
    if root.kind is RootKind.VERBATIM:
        return f"{SEPARATOR * 2}?{SEPARATOR}"
    if root.relative_form is RelativeForm.ROOT:
        return SEPARATOR
    if root.relative_form is RelativeForm.DRIVE:
        return f"{root.letter}:"
    return ""


def root_length(root: Root) -> int:
    """Length of the root prefix, counting the UNC share separator."""
    text = root_text(root)
    return len(text) + 1 if root.kind is RootKind.UNC else len(text)


def to_win32_string(path: ParsedPath) -> str:
    """Render a parsed path as a Win32 path string."""
    prefix = root_text(path.root)
    trailer = SEPARATOR if path.trailing_separator else ""
    body = SEPARATOR.join(path.components)
    if not body:
        # Only the UNC prefix lacks a separator of its own.
        return prefix + trailer if path.root.kind is RootKind.UNC else prefix
    if path.root.kind is RootKind.UNC:
        prefix += SEPARATOR
    return f"{prefix}{body}{trailer}"
