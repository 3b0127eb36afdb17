"""Maps scanned prefixes to root kinds and namespaces."""

import logging
from collections.abc import Callable

from kernelpath.code_units import ascii_upper
from kernelpath.parsed_path import ParsedPath
from kernelpath.root_kind import RelativeForm, Root, VerbatimFlavor
from kernelpath.scan_path import Prefix, ScanResult, scan_path

logger = logging.getLogger(__name__)


def _verbatim_root(scan: ScanResult) -> Root:
    """Recover the Win32 root hidden behind `\\\\?\\` (display only)."""
    first = scan.components[0] if scan.components else ""
    if first == "UNC":
        return Root.verbatim(VerbatimFlavor.UNC)
    if len(first) == 2 and first[1] == ":":  # noqa: PLR2004
        return Root.verbatim(VerbatimFlavor.DRIVE, letter=ascii_upper(first[0]))
    return Root.verbatim(VerbatimFlavor.DEVICE)


ROOT_TABLE: dict[Prefix, Callable[[ScanResult], Root]] = {
    Prefix.VERBATIM: _verbatim_root,
    Prefix.DEVICE: lambda s: Root.device(s.device_marker),
    Prefix.UNC: lambda s: Root.unc(s.server or "", s.share or ""),
    Prefix.DRIVE: lambda s: Root.drive(s.drive or ""),
    Prefix.DRIVE_RELATIVE: lambda s: Root.relative(RelativeForm.DRIVE, s.drive),
    Prefix.ROOT_RELATIVE: lambda _: Root.relative(RelativeForm.ROOT),
    Prefix.NONE: lambda _: Root.relative(RelativeForm.PATH),
}

_RELATIVE_PREFIXES = frozenset(
    {Prefix.DRIVE_RELATIVE, Prefix.ROOT_RELATIVE, Prefix.NONE}
)


def classify(path: str) -> ParsedPath:
    """Classify a raw path into a ParsedPath.

    Raises InvalidRoot for malformed UNC prefixes. The empty string is a
    path-relative path with no components.
    """
    scan = scan_path(path)
    root = ROOT_TABLE[scan.prefix](scan)
    parsed = ParsedPath(
        namespace=root.namespace,
        root=root,
        components=scan.components,
        is_absolute=scan.prefix not in _RELATIVE_PREFIXES,
        trailing_separator=scan.trailing_separator,
    )
    logger.debug(
        "Classified %r as %s (%d components)",
        path,
        root.relative_form.value if root.relative_form else root.kind.value,
        len(parsed.components),
    )
    return parsed
