"""Tests for the Win32 component rewrite rules."""

import pytest

from kernelpath.canonicalize_win32 import (
    MAX_PATH_LENGTH,
    canonicalize_win32,
    normalize_separators,
)
from kernelpath.errors import PathTooLong

SAMPLES = [
    [],
    ["a", "b", "c"],
    ["path", "..", "..", "..", "to", ".", "file.. .."],
    ["dir.", "dir..", "dir...", "name...   "],
    ["a..", "..."],
    ["x ", ". .", ".."],
    ["..", "..", "a"],
    ["a", "", "", "b"],
    ["COM1 . .ext"],
    ["...", "a."],
]


def test_normalize_separators() -> None:
    """Verify that `/` becomes `\\` everywhere."""
    assert normalize_separators("C:/a/b\\c") == "C:\\a\\b\\c"


def test_dot_components_are_dropped() -> None:
    """Verify that `.` components disappear."""
    assert canonicalize_win32([".", "a", ".", "b", "."]) == ["a", "b"]


def test_dotdot_removes_previous_component() -> None:
    """Verify that `..` removes the component before it."""
    assert canonicalize_win32(["a", "b", "..", "c"]) == ["a", "c"]


def test_dotdot_never_crosses_root() -> None:
    """Verify that surplus `..` components are dropped at the root."""
    assert canonicalize_win32(["..", "..", "a", "..", "..", "b"]) == ["b"]


def test_keep_leading_parents() -> None:
    """Verify that cleaning a relative path keeps surplus `..` components."""
    result = canonicalize_win32(
        ["path", "..", "..", "to", "file"], keep_leading_parents=True
    )
    assert result == ["..", "to", "file"]
    assert canonicalize_win32(
        ["a", "..", "..", ".."], keep_leading_parents=True
    ) == ["..", ".."]


def test_trailing_dot_rule_for_directories() -> None:
    """Verify that one trailing dot is stripped from directories, two or more are kept."""
    result = canonicalize_win32(["dir.", "dir..", "dir...", "name...   "])
    assert result == ["dir", "dir..", "dir...", "name"]


def test_final_component_strips_dots_and_spaces() -> None:
    """Verify that the filename loses every trailing dot and space."""
    assert canonicalize_win32(["file.. .."]) == ["file"]
    assert canonicalize_win32(["file . . "]) == ["file"]
    assert canonicalize_win32(["file.txt. "]) == ["file.txt"]


def test_final_component_as_directory() -> None:
    """Verify that a directory final component follows the directory rule."""
    assert canonicalize_win32(["a", "dir."], is_final_component_filename=False) == [
        "a",
        "dir",
    ]
    assert canonicalize_win32(["a", "dir.."], is_final_component_filename=False) == [
        "a",
        "dir..",
    ]


def test_final_component_that_strips_away() -> None:
    """Verify that an all-dots filename is dropped and its parent becomes final."""
    assert canonicalize_win32(["a..", "..."]) == ["a"]
    assert canonicalize_win32(["a", ". ."]) == ["a"]


def test_forward_slash_dotdot_example() -> None:
    """Verify the documented example path."""
    components = normalize_separators("path////../../../to/.////file.. ..").split("\\")
    assert canonicalize_win32(components, root_length=3) == ["to", "file"]


@pytest.mark.parametrize("components", SAMPLES)
def test_idempotent(components: list[str]) -> None:
    """Verify that canonicalizing twice changes nothing further."""
    once = canonicalize_win32(components)
    assert canonicalize_win32(once) == once


@pytest.mark.parametrize("components", SAMPLES)
def test_idempotent_keeping_parents(components: list[str]) -> None:
    """Verify idempotence when leading `..` components are kept."""
    once = canonicalize_win32(components, keep_leading_parents=True)
    assert canonicalize_win32(once, keep_leading_parents=True) == once


@pytest.mark.parametrize("components", SAMPLES)
def test_no_empty_or_dot_components(components: list[str]) -> None:
    """Verify that results never hold empty, `.` or `..` components."""
    for component in canonicalize_win32(components):
        assert component not in ("", ".", "..")


def test_length_bound() -> None:
    """Verify that 259 code units pass and 260 fail."""
    root = 3  # C:\
    fits = ["a" * 100, "b" * (MAX_PATH_LENGTH - root - 101)]
    assert canonicalize_win32(fits, root_length=root) == fits

    too_long = ["a" * 100, "b" * (MAX_PATH_LENGTH - root - 100)]
    with pytest.raises(PathTooLong):
        canonicalize_win32(too_long, root_length=root)
    assert canonicalize_win32(too_long, root_length=root, extended_length=True)


def test_length_counts_code_units_after_rewriting() -> None:
    """Verify that the bound applies to the rewritten form, not the input."""
    components = ["x" * 300, "..", "short"]
    assert canonicalize_win32(components, root_length=3) == ["short"]
