"""Process-wide and per-drive current directory state."""

import dataclasses
import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType

from kernelpath.canonicalize_win32 import canonicalize_win32
from kernelpath.classify import classify
from kernelpath.code_units import is_ascii_letter
from kernelpath.errors import InvalidCurrentDirectory
from kernelpath.parsed_path import ParsedPath
from kernelpath.root_kind import Namespace, Root, RootKind
from kernelpath.rwlock import ReadWriteLock
from kernelpath.to_win32_string import root_length, to_win32_string

logger = logging.getLogger(__name__)

DEFAULT_CURRENT_DIRECTORY = "C:\\"

_ALLOWED_ROOTS = (RootKind.DRIVE, RootKind.UNC)


def drive_root(letter: str) -> ParsedPath:
    """Return the implicit root directory of a drive."""
    return ParsedPath(Namespace.WIN32, Root.drive(letter), (), is_absolute=True)


@dataclass(frozen=True)
class CurrentDirectorySnapshot:
    """A consistent, read-only view of the current directory state."""

    process_default: ParsedPath
    drives: Mapping[str, ParsedPath] = field(default_factory=dict)

    def for_drive(self, letter: str) -> ParsedPath:
        """Return the recorded directory for a drive, or the drive root."""
        return self.drives.get(letter.upper()) or drive_root(letter)


class CurrentDirectoryState:
    """Holds the process current directory and per-drive overrides.

    All reads and writes go through a readers-writer lock. Existence checks
    are made by `set_current_directory` before the lock is taken.
    """

    def __init__(self, process_default: ParsedPath | None = None) -> None:
        """Initialize with `process_default`, or `C:\\` when omitted."""
        default = process_default or classify(DEFAULT_CURRENT_DIRECTORY)
        _check_directory_root(default)
        components = canonicalize_win32(
            default.components, is_final_component_filename=False, extended_length=True
        )
        default = dataclasses.replace(
            default, components=tuple(components), trailing_separator=False
        )
        self._lock = ReadWriteLock()
        self._process_default = default
        self._drives: dict[str, ParsedPath] = {}
        if default.root.kind is RootKind.DRIVE and default.root.letter:
            self._drives[default.root.letter] = default

    def snapshot(self) -> CurrentDirectorySnapshot:
        """Return a copy of the current state."""
        with self.reading() as snap:
            return snap

    @contextmanager
    def reading(self) -> Iterator[CurrentDirectorySnapshot]:
        """Hold the read lock and yield a snapshot for one resolution."""
        with self._lock.read_locked():
            yield CurrentDirectorySnapshot(
                self._process_default, MappingProxyType(dict(self._drives))
            )

    def store(self, path: ParsedPath, drive: str | None = None) -> None:
        """Record an already validated directory.

        Setting the process directory to a drive path also records it as
        that drive's directory.
        """
        with self._lock.write_locked():
            if drive is None:
                self._process_default = path
                if path.root.kind is RootKind.DRIVE and path.root.letter:
                    self._drives[path.root.letter] = path
            else:
                self._drives[drive.upper()] = path


def set_current_directory(
    state: CurrentDirectoryState,
    path: ParsedPath,
    drive: str | None = None,
    *,
    exists: Callable[[str], bool],
    extended_length: bool = False,
) -> ParsedPath:
    """Validate `path` and make it the process (or per-drive) current directory.

    Raises InvalidCurrentDirectory for verbatim, relative or device paths, for
    a per-drive directory on another drive, and when `exists` reports that
    the directory is missing. Returns the stored, canonicalized path.
    """
    _check_directory_root(path)
    if drive is not None:
        if not is_ascii_letter(drive):
            msg = f"Drive must be a single ASCII letter, got {drive!r}"
            raise InvalidCurrentDirectory(msg)
        if path.root.kind is not RootKind.DRIVE or path.root.letter != drive.upper():
            msg = f"{to_win32_string(path)!r} is not on drive {drive.upper()}:"
            raise InvalidCurrentDirectory(msg)

    components = canonicalize_win32(
        path.components,
        is_final_component_filename=False,
        root_length=root_length(path.root),
        extended_length=extended_length,
    )
    directory = dataclasses.replace(
        path, components=tuple(components), trailing_separator=False
    )
    text = to_win32_string(directory)

    # Never called with the lock held; the predicate may block on storage.
    if not exists(text):
        msg = f"Current directory does not exist: {text!r}"
        raise InvalidCurrentDirectory(msg)

    state.store(directory, drive)
    if drive is None:
        logger.info("Current directory set to %s", text)
    else:
        logger.info("Current directory for drive %s: set to %s", drive.upper(), text)
    return directory


def _check_directory_root(path: ParsedPath) -> None:
    if path.root.kind is RootKind.VERBATIM:
        msg = "A verbatim path cannot be the current directory"
        raise InvalidCurrentDirectory(msg)
    if path.root.kind not in _ALLOWED_ROOTS:
        msg = (
            "The current directory must be an absolute drive or UNC path, "
            f"got {to_win32_string(path)!r}"
        )
        raise InvalidCurrentDirectory(msg)
