"""Root kinds, namespaces and the Root value carried by every parsed path."""

from dataclasses import dataclass
from enum import Enum


class Namespace(Enum):
    """Whether the path is rewritten (Win32) or passed through (NT)."""

    WIN32 = "win32"
    NT = "nt"


class RootKind(Enum):
    """The entry point of a path into the object namespace."""

    DRIVE = "drive"
    UNC = "unc"
    DEVICE_NS = "device_ns"
    VERBATIM = "verbatim"
    RELATIVE = "relative"  # placeholder until resolved


class RelativeForm(Enum):
    """The three ways a path can be relative."""

    PATH = "path"  # file.txt
    ROOT = "root"  # \file.txt
    DRIVE = "drive"  # C:file.txt


class VerbatimFlavor(Enum):
    """The Win32 root hidden behind a verbatim prefix (display only)."""

    DRIVE = "drive"
    UNC = "unc"
    DEVICE = "device"


# Every root kind except verbatim is rewritten.
NAMESPACE_BY_KIND: dict[RootKind, Namespace] = {
    RootKind.DRIVE: Namespace.WIN32,
    RootKind.UNC: Namespace.WIN32,
    RootKind.DEVICE_NS: Namespace.WIN32,
    RootKind.VERBATIM: Namespace.NT,
    RootKind.RELATIVE: Namespace.WIN32,
}


@dataclass(frozen=True)
class Root:
    """The non-rewritable prefix of a path."""

    kind: RootKind
    letter: str | None = None  # uppercase; Drive, drive-relative, verbatim drive
    server: str | None = None
    share: str | None = None
    device_marker: str = "."  # `.` or `?` as written in `\\.\` / `\\?\`
    verbatim_flavor: VerbatimFlavor | None = None
    relative_form: RelativeForm | None = None

    @property
    def namespace(self) -> Namespace:
        """Return the namespace this root selects."""
        return NAMESPACE_BY_KIND[self.kind]

    @classmethod
    def drive(cls, letter: str) -> "Root":
        """Create a drive root such as `C:\\`."""
        return cls(RootKind.DRIVE, letter=letter.upper())

    @classmethod
    def unc(cls, server: str, share: str) -> "Root":
        """Create a UNC root such as `\\\\server\\share`."""
        return cls(RootKind.UNC, server=server, share=share)

    @classmethod
    def device(cls, marker: str = ".") -> "Root":
        """Create a device namespace root (`\\\\.\\`)."""
        return cls(RootKind.DEVICE_NS, device_marker=marker)

    @classmethod
    def verbatim(cls, flavor: VerbatimFlavor, letter: str | None = None) -> "Root":
        """Create a verbatim root (`\\\\?\\`)."""
        return cls(RootKind.VERBATIM, letter=letter, verbatim_flavor=flavor)

    @classmethod
    def relative(cls, form: RelativeForm, letter: str | None = None) -> "Root":
        """Create the placeholder root of a relative path."""
        return cls(
            RootKind.RELATIVE,
            letter=letter.upper() if letter else None,
            relative_form=form,
        )
