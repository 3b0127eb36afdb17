"""Synthesis of NT object namespace paths from resolved paths."""

from collections.abc import Callable

from kernelpath.code_units import SEPARATOR
from kernelpath.parsed_path import ParsedPath
from kernelpath.root_kind import Namespace, Root, RootKind

KERNEL_PREFIX = "\\??\\"

# The device marker of `\\.\` only selected the namespace, so it is dropped.
PREFIX_TABLE: dict[tuple[Namespace, RootKind], Callable[[Root], str]] = {
    (Namespace.NT, RootKind.VERBATIM): lambda _: KERNEL_PREFIX,
    (Namespace.WIN32, RootKind.DRIVE): lambda r: f"{KERNEL_PREFIX}{r.letter}:{SEPARATOR}",
    (Namespace.WIN32, RootKind.UNC): lambda r: (
        f"{KERNEL_PREFIX}UNC{SEPARATOR}{r.server}{SEPARATOR}{r.share}{SEPARATOR}"
    ),
    (Namespace.WIN32, RootKind.DEVICE_NS): lambda _: KERNEL_PREFIX,
}


def to_kernel_path(path: ParsedPath) -> str:
    """Concatenate the kernel prefix and components of a resolved path.

    No canonicalization is applied here. Relative paths must be resolved
    first and raise ValueError.
    """
    build_prefix = PREFIX_TABLE.get((path.namespace, path.root.kind))
    if build_prefix is None:
        msg = "Relative paths must be resolved before synthesizing a kernel path"
        raise ValueError(msg)
    return build_prefix(path.root) + SEPARATOR.join(path.components)
