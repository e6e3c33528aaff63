from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures (sample trees, symlink capability checks).
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirkit.infra.fs import FileSystem  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a nested directory structure.

    Structure:
    /tree
      a.txt
      b.txt
      /sub
        c.txt
        /deeper
          d.txt
      /empty
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "b.txt").write_text("b", encoding="utf-8")

    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c", encoding="utf-8")

    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "d.txt").write_text("d", encoding="utf-8")

    (root / "empty").mkdir()
    return root


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> bool:
    """Skip the test if the platform/user cannot create symlinks."""
    probe_target = tmp_path / "_probe_target"
    probe_target.write_text("x", encoding="utf-8")
    probe_link = tmp_path / "_probe_link"
    try:
        os.symlink(probe_target, probe_link)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported in this environment.")
    probe_link.unlink()
    probe_target.unlink()
    return True


class CaseInsensitiveFileSystem(FileSystem):
    """
    Real filesystem that resolves names ignoring case, like NTFS.

    Every path is mapped to the on-disk spelling of each component before
    the underlying call, so 'build' reaches the directory 'Build'.
    """

    def _on_disk(self, path: str) -> str:
        path = os.path.abspath(path)
        head, tail = os.path.split(path)
        if not tail:
            return path
        head = self._on_disk(head)
        if os.path.isdir(head):
            names = os.listdir(head)
            if tail not in names:
                for name in names:
                    if name.lower() == tail.lower():
                        return os.path.join(head, name)
        return os.path.join(head, tail)

    def list_dir(self, path):
        return super().list_dir(self._on_disk(path))

    def real_path(self, path):
        return super().real_path(self._on_disk(path))

    def read_link(self, path):
        return super().read_link(self._on_disk(path))

    def remove_dir(self, path):
        super().remove_dir(self._on_disk(path))

    def unlink(self, path):
        super().unlink(self._on_disk(path))

    def exists(self, path):
        return super().exists(self._on_disk(path))

    def lexists(self, path):
        return super().lexists(self._on_disk(path))

    def is_dir(self, path):
        return super().is_dir(self._on_disk(path))

    def is_file(self, path):
        return super().is_file(self._on_disk(path))

    def is_link(self, path):
        return super().is_link(self._on_disk(path))


@pytest.fixture
def case_insensitive_fs() -> FileSystem:
    """A filesystem collaborator with Windows-style case-insensitive lookups."""
    return CaseInsensitiveFileSystem()
