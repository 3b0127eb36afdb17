"""Resolution of path-relative, root-relative and drive-relative paths."""

import logging

from kernelpath.canonicalize_win32 import CURRENT_DIR, PARENT_DIR, canonicalize_win32
from kernelpath.current_directory import CurrentDirectoryState
from kernelpath.errors import AmbiguousDriveStream
from kernelpath.parsed_path import ParsedPath
from kernelpath.policies import DriveStreamStrictness
from kernelpath.root_kind import Namespace, RelativeForm
from kernelpath.stream_syntax import parse_stream_suffix
from kernelpath.to_win32_string import root_length, to_win32_string

logger = logging.getLogger(__name__)


def resolve_relative(
    path: ParsedPath,
    state: CurrentDirectoryState,
    *,
    strictness: DriveStreamStrictness = DriveStreamStrictness.STRICT,
    extended_length: bool = False,
) -> ParsedPath:
    """Resolve a relative path against the current directory state.

    - Path-relative (`a\\b`): appended to the process current directory.
    - Root-relative (`\\a`): appended to the root of the process current
      directory.
    - Drive-relative (`X:a`): appended to drive X's recorded directory, or
      to `X:\\` if none is recorded.

    The combined components are canonicalized before returning. Absolute
    paths are returned unchanged.
    """
    form = path.relative_form
    if form is None:
        return path
    if form is RelativeForm.DRIVE and strictness is DriveStreamStrictness.STRICT:
        check_drive_stream(path)

    is_filename = bool(path.components) and not path.trailing_separator
    with state.reading() as snapshot:
        if form is RelativeForm.DRIVE:
            base = snapshot.for_drive(path.root.letter or "")
            joined = base.components + path.components
        elif form is RelativeForm.ROOT:
            base = snapshot.process_default
            joined = path.components
        else:
            base = snapshot.process_default
            joined = base.components + path.components

        components = canonicalize_win32(
            joined,
            is_final_component_filename=is_filename,
            root_length=root_length(base.root),
            extended_length=extended_length,
        )

    resolved = ParsedPath(
        namespace=Namespace.WIN32,
        root=base.root,
        components=tuple(components),
        is_absolute=True,
        trailing_separator=path.trailing_separator and bool(components),
    )
    logger.debug(
        "Resolved %s-relative %r to %r",
        form.value,
        to_win32_string(path),
        to_win32_string(resolved),
    )
    return resolved


def check_drive_stream(path: ParsedPath) -> None:
    """Reject `X:name` when it also reads as stream `name` of a file called X.

    Only a single component with no trailing separator can be a stream name.
    """
    if len(path.components) != 1 or path.trailing_separator:
        return
    component = path.components[0]
    if component in (CURRENT_DIR, PARENT_DIR):
        return
    if parse_stream_suffix(f"{path.root.letter}:{component}") is not None:
        msg = (
            f"{to_win32_string(path)!r} is ambiguous: drive-relative path or "
            f"stream {component!r} of file {path.root.letter!r}"
        )
        raise AmbiguousDriveStream(msg)
