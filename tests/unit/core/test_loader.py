from __future__ import annotations

"""
Unit tests for Include-Path File Access.

Verifies include path resolution order, BOM stripping, Python file
inclusion and missing-file behavior.
"""

import os
from pathlib import Path

import pytest

from dirkit.core.loader import (
    file_exists,
    include_file,
    load_file,
    remove_bom,
    resolve_include_path,
)
from dirkit.domain.errors import PathNotFoundError

BOM = b"\xef\xbb\xbf"


@pytest.fixture
def include_dirs(tmp_path: Path) -> tuple:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (second / "shared.txt").write_text("from second", encoding="utf-8")
    (first / "shared.txt").write_text("from first", encoding="utf-8")
    (second / "only_second.txt").write_text("second only", encoding="utf-8")
    return first, second

# -----------------------------------------------------------------------------
# RESOLUTION
# -----------------------------------------------------------------------------

def test_first_matching_directory_wins(include_dirs: tuple) -> None:
    """TC-01: Directories are searched in order."""
    first, second = include_dirs

    assert resolve_include_path("shared.txt", [str(first), str(second)]) == str(first / "shared.txt")
    assert resolve_include_path("only_second.txt", [str(first), str(second)]) == \
        str(second / "only_second.txt")


def test_pathsep_string_include_path(include_dirs: tuple) -> None:
    """TC-01: A pathsep-separated string is accepted."""
    first, second = include_dirs
    include_path = os.pathsep.join([str(second), str(first)])

    assert resolve_include_path("shared.txt", include_path) == str(second / "shared.txt")


def test_default_include_path_is_cwd(include_dirs: tuple, monkeypatch: pytest.MonkeyPatch) -> None:
    first, _ = include_dirs
    monkeypatch.chdir(first)

    resolved = resolve_include_path("shared.txt")
    assert resolved is not None
    assert os.path.samefile(resolved, first / "shared.txt")


def test_absolute_names_bypass_search(include_dirs: tuple) -> None:
    first, second = include_dirs
    target = str(second / "shared.txt")

    assert resolve_include_path(target, [str(first)]) == target


def test_unresolvable_names(include_dirs: tuple) -> None:
    first, _ = include_dirs

    assert resolve_include_path("nope.txt", [str(first)]) is None
    assert resolve_include_path("", [str(first)]) is None


def test_file_exists_modes(include_dirs: tuple) -> None:
    """TC-02: file_exists honors use_include_path."""
    first, _ = include_dirs

    assert file_exists("shared.txt", include_path=[str(first)]) is True
    assert file_exists("missing.txt", include_path=[str(first)]) is False
    assert file_exists(str(first / "shared.txt"), use_include_path=False) is True

# -----------------------------------------------------------------------------
# LOADING
# -----------------------------------------------------------------------------

def test_load_file_strips_bom(tmp_path: Path) -> None:
    """TC-03: A leading UTF-8 BOM is removed."""
    f = tmp_path / "bom.txt"
    f.write_bytes(BOM + "héllo".encode("utf-8"))

    assert load_file(str(f), use_include_path=False) == "héllo"


def test_load_file_without_bom_is_unchanged(tmp_path: Path) -> None:
    f = tmp_path / "plain.txt"
    f.write_text("plain\n", encoding="utf-8")

    assert load_file("plain.txt", include_path=[str(tmp_path)]) == "plain\n"


def test_load_missing_file(tmp_path: Path) -> None:
    """TC-04: Missing files give None, or raise in strict mode."""
    assert load_file("missing.txt", include_path=[str(tmp_path)]) is None
    assert load_file(str(tmp_path / "missing.txt"), use_include_path=False) is None
    with pytest.raises(PathNotFoundError):
        load_file("missing.txt", include_path=[str(tmp_path)], strict=True)


def test_load_file_replaces_invalid_utf8(tmp_path: Path) -> None:
    """TC-07: Latin-1 bytes are decoded with replacement characters, not an error."""
    f = tmp_path / "latin1.txt"
    f.write_bytes(b"caf\xe9\n")

    assert load_file(str(f), use_include_path=False) == "caf\ufffd\n"


def test_load_file_directory_is_not_a_file(tmp_path: Path) -> None:
    """TC-08: A directory given by name counts as a missing file."""
    assert load_file(str(tmp_path), use_include_path=False) is None
    with pytest.raises(PathNotFoundError):
        load_file(str(tmp_path), use_include_path=False, strict=True)


def test_remove_bom_variants() -> None:
    """TC-05: remove_bom handles both str and bytes, and only a leading mark."""
    assert remove_bom(BOM + b"data") == b"data"
    assert remove_bom(b"data") == b"data"
    assert remove_bom("\ufeffdata") == "data"
    assert remove_bom("da\ufeffta") == "da\ufeffta"


def test_include_file_executes_python(tmp_path: Path) -> None:
    """TC-06: include_file runs the module and returns its globals."""
    (tmp_path / "settings.py").write_text("VALUE = 6 * 7\n", encoding="utf-8")

    result = include_file("settings.py", [str(tmp_path)])

    assert result is not None
    assert result["VALUE"] == 42


def test_include_missing_file(tmp_path: Path) -> None:
    assert include_file("missing.py", [str(tmp_path)]) is None
