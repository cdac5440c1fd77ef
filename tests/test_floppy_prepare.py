"""Tests for floppy configuration preparation."""

from __future__ import annotations

from pathlib import Path

import pytest

from vm_floppy import FloppyConfig, prepare
from vm_floppy.errors import ErrorCategory, codes


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from a scratch directory with a few floppy inputs."""
    (tmp_path / "real_file.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "Autounattend.xml").write_text("<unattend/>", encoding="utf-8")
    (tmp_path / "drivers" / "net").mkdir(parents=True)
    (tmp_path / "drivers" / "storage").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_unset_lists_are_normalized_to_empty_without_errors(workdir: Path) -> None:
    """prepare should default both list fields to empty lists."""
    config = FloppyConfig()

    errors = prepare(config)

    assert errors == []
    assert config.floppy_files == []
    assert config.floppy_directories == []


def test_existing_literal_paths_pass(workdir: Path) -> None:
    """Plain paths that exist should not produce errors."""
    config = FloppyConfig(
        floppy_files=["real_file.txt", str(workdir / "Autounattend.xml")],
        floppy_directories=["drivers"],
    )

    assert prepare(config) == []


def test_missing_file_reports_exactly_one_error(workdir: Path) -> None:
    """Only the missing entry should be reported; valid ones stay clean."""
    config = FloppyConfig(floppy_files=["real_file.txt", "missing.iso"])

    errors = prepare(config)

    assert len(errors) == 1
    error = errors[0]
    assert error.code == codes.BAD_FLOPPY_FILE
    assert error.category == ErrorCategory.NOT_FOUND
    assert error.message.startswith("bad floppy disk file 'missing.iso': ")
    assert "No such file or directory" in error.message
    assert error.metadata["path"] == "missing.iso"
    assert error.metadata["field"] == "floppy_files"
    assert error.metadata["exception_type"] == "FileNotFoundError"


def test_missing_directory_uses_directory_message(workdir: Path) -> None:
    """Directory entries should be reported with the directory wording."""
    config = FloppyConfig(floppy_directories=["drivers", "no-such-dir"])

    errors = prepare(config)

    assert len(errors) == 1
    assert errors[0].code == codes.BAD_FLOPPY_DIRECTORY
    assert errors[0].message.startswith("bad floppy disk directory 'no-such-dir': ")
    assert errors[0].metadata["field"] == "floppy_dirs"


def test_matching_directory_glob_passes(workdir: Path) -> None:
    """A directory pattern matching subdirectories should be accepted."""
    config = FloppyConfig(floppy_directories=["drivers/*"])

    assert prepare(config) == []


def test_glob_with_no_matches_is_lenient_by_default(workdir: Path) -> None:
    """Zero matches is not an error unless strict mode is requested."""
    config = FloppyConfig(floppy_files=["*.iso", "real_?ile.txt"])

    assert prepare(config) == []


def test_glob_with_no_matches_fails_in_strict_mode(workdir: Path) -> None:
    """Strict mode should reject patterns that match nothing."""
    config = FloppyConfig(floppy_files=["*.iso", "*.txt"])

    errors = prepare(config, require_glob_matches=True)

    assert [error.message for error in errors] == [
        "bad floppy disk file '*.iso': pattern matched no files"
    ]
    assert errors[0].category == ErrorCategory.NOT_FOUND


def test_malformed_pattern_reports_exact_path(workdir: Path) -> None:
    """An unterminated character class should be reported as a bad pattern."""
    config = FloppyConfig(
        floppy_files=["foo[bar"],
        floppy_directories=["drivers/[]"],
    )

    errors = prepare(config)

    assert [str(error) for error in errors] == [
        "bad floppy disk file 'foo[bar': syntax error in pattern",
        "bad floppy disk directory 'drivers/[]': syntax error in pattern",
    ]
    assert all(error.category == ErrorCategory.VALIDATION for error in errors)
    assert errors[0].metadata["exception_type"] == "PatternError"


def test_errors_are_collected_across_both_lists_in_order(workdir: Path) -> None:
    """Failures should accumulate without short-circuiting."""
    config = FloppyConfig(
        floppy_files=["missing-a", "real_file.txt", "missing-b"],
        floppy_directories=["missing-dir", "drivers/*"],
    )

    errors = prepare(config)

    assert [error.metadata["path"] for error in errors] == [
        "missing-a",
        "missing-b",
        "missing-dir",
    ]
    assert [error.code for error in errors] == [
        codes.BAD_FLOPPY_FILE,
        codes.BAD_FLOPPY_FILE,
        codes.BAD_FLOPPY_DIRECTORY,
    ]


def test_path_through_regular_file_is_a_validation_error(workdir: Path) -> None:
    """Stat failures other than missing entries map to validation errors."""
    config = FloppyConfig(floppy_files=["real_file.txt/child"])

    errors = prepare(config)

    assert len(errors) == 1
    assert errors[0].category == ErrorCategory.VALIDATION
    assert errors[0].metadata["exception_type"] == "NotADirectoryError"


def test_regular_file_listed_as_directory_passes(workdir: Path) -> None:
    """Directory entries are only checked for existence."""
    config = FloppyConfig(floppy_directories=["real_file.txt"])

    assert prepare(config) == []


def test_content_and_label_are_not_validated(workdir: Path) -> None:
    """floppy_content and floppy_label pass through untouched."""
    config = FloppyConfig(
        floppy_content={"meta-data": "{}", "missing/user-data": "#cloud-config"},
        floppy_label="cidata",
    )

    assert prepare(config) == []
    assert config.floppy_content == {
        "meta-data": "{}",
        "missing/user-data": "#cloud-config",
    }
    assert config.floppy_label == "cidata"


def test_method_form_accepts_interpolation_context(workdir: Path) -> None:
    """FloppyConfig.prepare should accept and ignore a context object."""
    config = FloppyConfig.model_validate({"floppy_dirs": ["drivers/*"]})

    assert config.prepare(ctx={"build_name": "win"}) == []
    assert config.floppy_files == []
    assert config.floppy_directories == ["drivers/*"]
