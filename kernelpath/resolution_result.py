"""Data model for the outcome of resolving a raw path."""

from dataclasses import dataclass

from kernelpath.parsed_path import ParsedPath
from kernelpath.root_kind import RelativeForm


@dataclass(frozen=True)
class ResolutionResult:
    """Represents a raw path resolved to its kernel namespace form."""

    raw: str
    path: ParsedPath  # final, resolved and canonicalized
    kernel_path: str
    relative_form: RelativeForm | None = None  # form of the input, if relative
    device_name: str | None = None  # reserved device the input resolved to
    deferred_parent: str | None = None  # must exist for the device path to be valid
