"""Win32 namespace rewrite rules applied to path components."""

import logging
from collections.abc import Sequence

from kernelpath.code_units import ALT_SEPARATOR, SEPARATOR
from kernelpath.errors import PathTooLong

logger = logging.getLogger(__name__)

# MAX_PATH (260) minus the terminating null.
MAX_PATH_LENGTH = 259

CURRENT_DIR = "."
PARENT_DIR = ".."
FILENAME_TRAILERS = ". "


def normalize_separators(path: str) -> str:
    """Rewrite the alternate separator to the primary one."""
    return path.replace(ALT_SEPARATOR, SEPARATOR)


def canonicalize_win32(
    components: Sequence[str],
    is_final_component_filename: bool = True,  # noqa: FBT001, FBT002
    *,
    root_length: int = 0,
    extended_length: bool = False,
    keep_leading_parents: bool = False,
) -> list[str]:
    """Apply the Win32 rewrite rules to a list of non-root components.

    Rules, in order:
    1. Empty components are dropped (runs of separators collapse).
    2. `.` components are dropped.
    3. `..` removes the nearest preceding component; at the root it is dropped,
       unless `keep_leading_parents` is set (used when a relative path is
       cleaned without a base to resolve against).
    4. Non-final components lose a single trailing `.`; a run of two or more
       trailing dots is left alone.
    5. The final component loses all trailing dots and spaces when it is a
       filename. If that leaves nothing, the component is dropped and the new
       final component is stripped the same way.
    6. `root_length` plus the joined components must fit in MAX_PATH_LENGTH
       unless `extended_length` is set.
    """
    stack: list[str] = []
    for component in components:
        if not component or component == CURRENT_DIR:
            continue
        if component == PARENT_DIR:
            if stack and stack[-1] != PARENT_DIR:
                stack.pop()
            elif keep_leading_parents:
                stack.append(component)
            continue
        stack.append(component)

    result = [_strip_directory_dot(c) for c in stack]

    if is_final_component_filename:
        while result and result[-1] != PARENT_DIR:
            stripped = result[-1].rstrip(FILENAME_TRAILERS)
            if stripped:
                result[-1] = stripped
                break
            result.pop()

    if not extended_length:
        length = root_length + len(SEPARATOR.join(result))
        if length > MAX_PATH_LENGTH:
            msg = f"Path is {length} code units long; the limit is {MAX_PATH_LENGTH}"
            raise PathTooLong(msg)

    logger.debug("Canonicalized %r -> %r", list(components), result)
    return result


def _strip_directory_dot(component: str) -> str:
    """Strip one trailing dot unless the component ends with two or more."""
    if component.endswith(".") and not component.endswith(".."):
        return component[:-1]
    return component
