"""Detection of reserved DOS device names such as CON, NUL and COM1."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from kernelpath.code_units import ascii_upper
from kernelpath.parsed_path import ParsedPath
from kernelpath.policies import DeviceNamePolicy
from kernelpath.root_kind import Namespace, RelativeForm, Root, RootKind
from kernelpath.to_win32_string import to_win32_string

logger = logging.getLogger(__name__)

NUL = "NUL"

# Superscript one, two and three are the only superscript digits in the
# legacy code page, so they are the only ones with device aliases.
_SUPERSCRIPT_DIGITS = ("¹", "²", "³")

RESERVED_NAMES: frozenset[str] = frozenset(
    {"AUX", "CON", "CONIN$", "CONOUT$", NUL, "PRN"}
    | {f"{port}{n}" for port in ("COM", "LPT") for n in range(1, 10)}
    | {f"{port}{d}" for port in ("COM", "LPT") for d in _SUPERSCRIPT_DIGITS}
)


@dataclass(frozen=True)
class DeviceCandidate:
    """A component that matched a reserved name."""

    name: str  # canonical uppercase reserved name
    parent: str | None  # directory that must exist, if any


def modern_device_key(component: str) -> str:
    """Uppercase ASCII letters and strip all trailing dots and spaces."""
    return ascii_upper(component).rstrip(". ")


def legacy_device_key(component: str) -> str:
    """Cut at the first dot, strip trailing spaces and uppercase ASCII letters."""
    return ascii_upper(component.split(".", 1)[0].rstrip(" "))


def find_device_candidate(
    path: ParsedPath, policy: DeviceNamePolicy
) -> DeviceCandidate | None:
    """Return the reserved name `path` would address, without checking existence.

    Only path-relative paths (before resolution) and drive-rooted absolute
    paths are considered.
    """
    if path.namespace is not Namespace.WIN32 or not path.components:
        return None
    if path.trailing_separator:  # `nul\` names a directory
        return None

    whole_relative = (
        path.root.relative_form is RelativeForm.PATH and len(path.components) == 1
    )
    on_drive = path.root.kind is RootKind.DRIVE
    if not (whole_relative or on_drive):
        return None

    last = path.components[-1]
    if policy is DeviceNamePolicy.LEGACY:
        key = legacy_device_key(last)
        if key not in RESERVED_NAMES:
            return None
        return DeviceCandidate(key, None if whole_relative else _parent_of(path))

    key = modern_device_key(last)
    if key not in RESERVED_NAMES:
        return None
    if whole_relative:
        return DeviceCandidate(key, None)
    # On a drive only NUL is honored, and only inside an existing directory.
    if key == NUL:
        return DeviceCandidate(key, _parent_of(path))
    return None


def resolve_device_name(
    path: ParsedPath,
    policy: DeviceNamePolicy,
    exists: Callable[[str], bool],
) -> ParsedPath:
    """Replace `path` with a device path if it names a reserved device.

    Under the modern policy a NUL match inside a directory is only honored if
    `exists` reports the parent directory as present. Under the legacy policy
    no existence check is made; the parent is returned as `deferred_parent`
    for the caller to verify.
    """
    candidate = find_device_candidate(path, policy)
    if candidate is None:
        return path

    deferred = None
    if candidate.parent is not None:
        if policy is DeviceNamePolicy.MODERN:
            if not exists(candidate.parent):
                logger.debug(
                    "Not treating %r as NUL: %r is not a directory",
                    to_win32_string(path),
                    candidate.parent,
                )
                return path
        else:
            deferred = candidate.parent

    logger.debug("Resolved %r to device %s", to_win32_string(path), candidate.name)
    return device_path(candidate.name, deferred_parent=deferred)


def device_path(name: str, deferred_parent: str | None = None) -> ParsedPath:
    """Build the `\\\\.\\NAME` path for a reserved device."""
    return ParsedPath(
        namespace=Namespace.WIN32,
        root=Root.device(),
        components=(name,),
        is_absolute=True,
        deferred_parent=deferred_parent,
    )


def _parent_of(path: ParsedPath) -> str:
    parent = ParsedPath(
        namespace=path.namespace,
        root=path.root,
        components=path.components[:-1],
        is_absolute=path.is_absolute,
    )
    return to_win32_string(parent)
