"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from kernelpath.cli import main


def test_resolves_each_path(capsys) -> None:
    """Verify that one kernel path is printed per argument."""
    assert main(["C:/a/../b", "\\\\srv\\shr\\x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["\\??\\C:\\b", "\\??\\UNC\\srv\\shr\\x"]


def test_current_directories(capsys) -> None:
    """Verify the process and per-drive directory options."""
    argv = ["--cwd", "D:\\w", "--drive-cwd", "e=E:\\d", "x", "E:f\\g"]
    assert main(argv) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["\\??\\D:\\w\\x", "\\??\\E:\\d\\f\\g"]


def test_clean_mode(capsys) -> None:
    """Verify that --clean only cleans."""
    assert main(["--clean", "a\\..\\..\\b. "]) == 0
    assert capsys.readouterr().out.strip() == "..\\b"


def test_user_path_mode(capsys) -> None:
    """Verify that --user-path converts verbatim paths."""
    assert main(["--user-path", "\\\\?\\C:\\x"]) == 0
    assert capsys.readouterr().out.strip() == "C:\\x"


def test_legacy_policy(capsys) -> None:
    """Verify that --policy selects the device name algorithm."""
    assert main(["--policy", "legacy", "COM1.txt"]) == 0
    assert capsys.readouterr().out.strip() == "\\??\\COM1"


def test_errors_are_reported_per_path(capsys) -> None:
    """Verify that a bad path sets the exit status but later paths still resolve."""
    assert main(["\\\\server", "C:\\ok"]) == 1
    captured = capsys.readouterr()
    assert "error: \\\\server" in captured.err
    assert captured.out.strip() == "\\??\\C:\\ok"


def test_ambiguous_drive_stream(capsys) -> None:
    """Verify strict and lenient handling on the command line."""
    assert main(["C:name"]) == 1
    assert "ambiguous" in capsys.readouterr().err
    assert main(["--lenient", "C:name"]) == 0
    assert capsys.readouterr().out.strip() == "\\??\\C:\\name"


def test_config_file(tmp_path: Path, capsys) -> None:
    """Verify that settings are read from the config file."""
    config_file = tmp_path / "kernelpath.yml"
    config_file.write_text("current_directory: 'F:\\base'\n", encoding="utf-8")
    assert main(["--config", str(config_file), "x"]) == 0
    assert capsys.readouterr().out.strip() == "\\??\\F:\\base\\x"


def test_invalid_config(tmp_path: Path, capsys) -> None:
    """Verify that a bad config file is reported before resolving."""
    config_file = tmp_path / "kernelpath.yml"
    config_file.write_text("device_policy: newest\n", encoding="utf-8")
    assert main(["--config", str(config_file), "x"]) == 1
    assert "device_policy" in capsys.readouterr().err


def test_invalid_current_directory(capsys) -> None:
    """Verify that a relative --cwd is rejected."""
    assert main(["--cwd", "relative", "x"]) == 1
    assert "error:" in capsys.readouterr().err


def test_bad_drive_cwd_argument() -> None:
    """Verify that --drive-cwd needs a drive letter."""
    with pytest.raises(SystemExit):
        main(["--drive-cwd", "1=C:\\x", "x"])


def test_astral_characters_are_printed_as_text(capsys) -> None:
    """Verify that surrogate pairs are joined back before printing."""
    assert main(["C:\\dir\\\U0001f600.txt"]) == 0
    assert capsys.readouterr().out.strip() == "\\??\\C:\\dir\\\U0001f600.txt"
    assert main(["--clean", "a\\..\\\U0001f600. "]) == 0
    assert capsys.readouterr().out.strip() == "\U0001f600"
    assert main(["--user-path", "\\\\?\\C:\\\U0001f600"]) == 0
    assert capsys.readouterr().out.strip() == "C:\\\U0001f600"
