"""Tests for scanning and classifying raw paths."""

import pytest

from kernelpath.classify import classify
from kernelpath.errors import InvalidRoot
from kernelpath.root_kind import Namespace, RelativeForm, RootKind, VerbatimFlavor
from kernelpath.scan_path import Prefix, scan_path


def test_scan_drive_path() -> None:
    """Verify that a drive prefix is split from its components."""
    scan = scan_path("c:\\Windows\\System32")
    assert scan.prefix is Prefix.DRIVE
    assert scan.drive == "C"
    assert scan.components == ("Windows", "System32")


def test_scan_collapses_separators_and_alternates() -> None:
    """Verify that `/` and runs of separators never produce empty components."""
    scan = scan_path("C:/a//b\\/c")
    assert scan.components == ("a", "b", "c")


def test_scan_trailing_separator() -> None:
    """Verify that a trailing separator is recorded."""
    assert scan_path("C:\\a\\").trailing_separator
    assert not scan_path("C:\\a").trailing_separator
    assert not scan_path("C:\\").trailing_separator


def test_scan_verbatim_is_exact() -> None:
    """Verify that only `\\\\?\\` with backslashes is verbatim."""
    assert scan_path("\\\\?\\C:\\a").prefix is Prefix.VERBATIM
    scan = scan_path("//?/C:/a")
    assert scan.prefix is Prefix.DEVICE
    assert scan.device_marker == "?"


def test_scan_verbatim_keeps_empty_segments() -> None:
    """Verify that verbatim remainders are split without dropping anything."""
    scan = scan_path("\\\\?\\C:\\a\\\\b\\")
    assert scan.components == ("C:", "a", "", "b", "")


def test_classify_drive() -> None:
    """Verify drive classification and letter normalization."""
    parsed = classify("c:\\Windows")
    assert parsed.root.kind is RootKind.DRIVE
    assert parsed.root.letter == "C"
    assert parsed.namespace is Namespace.WIN32
    assert parsed.is_absolute
    assert classify("C:\\Windows") == parsed


def test_classify_unc() -> None:
    """Verify UNC server and share extraction."""
    parsed = classify("\\\\server\\share\\dir\\file.txt")
    assert parsed.root.kind is RootKind.UNC
    assert parsed.root.server == "server"
    assert parsed.root.share == "share"
    assert parsed.components == ("dir", "file.txt")


def test_classify_unc_forward_slashes() -> None:
    """Verify that `//server/share` is a UNC path."""
    parsed = classify("//server/share")
    assert parsed.root.kind is RootKind.UNC
    assert parsed.components == ()


@pytest.mark.parametrize("path", ["\\\\", "\\\\server", "\\\\server\\", "\\\\\\share"])
def test_classify_unc_missing_parts(path: str) -> None:
    """Verify that a UNC path needs both a server and a share."""
    with pytest.raises(InvalidRoot):
        classify(path)


def test_classify_device() -> None:
    """Verify the device namespace prefix."""
    parsed = classify("\\\\.\\COM1")
    assert parsed.root.kind is RootKind.DEVICE_NS
    assert parsed.namespace is Namespace.WIN32
    assert parsed.components == ("COM1",)


def test_classify_verbatim_flavors() -> None:
    """Verify that the nested root of a verbatim path is recovered."""
    drive = classify("\\\\?\\c:\\Windows")
    assert drive.namespace is Namespace.NT
    assert drive.root.verbatim_flavor is VerbatimFlavor.DRIVE
    assert drive.root.letter == "C"

    unc = classify("\\\\?\\UNC\\server\\share")
    assert unc.root.verbatim_flavor is VerbatimFlavor.UNC

    device = classify("\\\\?\\pipe\\name")
    assert device.root.verbatim_flavor is VerbatimFlavor.DEVICE


def test_classify_relative_forms() -> None:
    """Verify the three relative forms."""
    assert classify("a\\b").relative_form is RelativeForm.PATH
    assert classify("\\a").relative_form is RelativeForm.ROOT
    drive_relative = classify("d:a")
    assert drive_relative.relative_form is RelativeForm.DRIVE
    assert drive_relative.root.letter == "D"
    assert not drive_relative.is_absolute


def test_classify_empty_string() -> None:
    """Verify that the empty string is a zero-component path-relative path."""
    parsed = classify("")
    assert parsed.relative_form is RelativeForm.PATH
    assert parsed.components == ()


def test_classify_non_ascii_drive_letter_is_relative() -> None:
    """Verify that only ASCII letters form drive prefixes."""
    assert classify("é:\\x").relative_form is RelativeForm.PATH
    assert classify("1:\\x").relative_form is RelativeForm.PATH


def test_classify_keeps_nulls_and_surrogates() -> None:
    """Verify that odd code units pass through untouched."""
    parsed = classify("C:\\a\x00b\\\ud800")
    assert parsed.components == ("a\x00b", "\ud800")
