from __future__ import annotations

"""
Platform Path Classification.

Decides, for a single filesystem entry, whether it is a regular file, a
real directory, or a symlink (possibly broken). The recursive remover
only talks to the PathClassifier interface; the platform branch is taken
once, when the classifier is selected.

Two strategies exist:
- WindowsPathClassifier: symlinks and junctions are detected by comparing
  the canonical path against the nominal path, before any directory check.
  Directory-type links must be removed with rmdir.
- PosixPathClassifier: symlinks present as their own file type (lstat) and
  are unlinked like regular files.
"""

import logging
import ntpath
import os
from abc import ABC, abstractmethod
from typing import Optional

from dirkit.domain.models import EntryKind, PathEntry
from dirkit.infra.fs import FileSystem, default_fs, normalize_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYMLINK RESOLUTION API
# -----------------------------------------------------------------------------

def is_symlink(
        path: str,
        fs: Optional[FileSystem] = None,
        case_insensitive: Optional[bool] = None,
) -> bool:
    """
    Check whether a path is a symlink, broken links included.

    The entry is a symlink when its canonical path differs from its
    nominal path. When canonicalization fails, the raw link text is read
    as a fallback to detect broken links.

    Args:
        path: Path to inspect. Backslashes are treated as separators.
        fs: Filesystem collaborator.
        case_insensitive: Compare paths ignoring case. Defaults to True on
            Windows, where a path typed in another case names the same entry.

    Returns:
        bool: True if the entry itself is a symlink.
    """
    fs = fs or default_fs
    nominal = _nominal_path(path, fs)

    real = fs.real_path(path)
    if real is not None:
        return not _same_path(real, nominal, case_insensitive)

    # Broken symlink fallback
    link = fs.read_link(path)
    return bool(link) and not _same_path(link, nominal, case_insensitive)


def symlink_target(
        path: str,
        fs: Optional[FileSystem] = None,
        case_insensitive: Optional[bool] = None,
) -> str:
    """
    Return the target of a symlink.

    Returns:
        str: The canonical target for a working link, the raw link text for
            a broken link, or the normalized path itself if it is not a link.
    """
    fs = fs or default_fs
    nominal = _nominal_path(path, fs)

    real = fs.real_path(path)
    if real is not None:
        if not _same_path(real, nominal, case_insensitive):
            return normalize_path(real)
        return normalize_path(path)

    link = fs.read_link(path)
    if link and not _same_path(link, nominal, case_insensitive):
        return normalize_path(link)

    return normalize_path(path)

# -----------------------------------------------------------------------------
# CLASSIFIER INTERFACE
# -----------------------------------------------------------------------------

class PathClassifier(ABC):
    """Platform capability used by the recursive remover to type each entry."""

    def __init__(self, fs: Optional[FileSystem] = None) -> None:
        self.fs = fs or default_fs

    @abstractmethod
    def classify(self, path: str) -> PathEntry:
        """Classify a single entry. Symlinks are never followed into."""

    @abstractmethod
    def is_directory_link(self, entry: PathEntry) -> bool:
        """Whether a symlink entry must be removed with the directory-remove call."""


class WindowsPathClassifier(PathClassifier):
    """Symlink detection by canonical path comparison, checked before is_dir."""

    def classify(self, path: str) -> PathEntry:
        nominal = normalize_path(path)

        # Must run before is_dir: a directory link would otherwise be walked.
        if is_symlink(path, self.fs, case_insensitive=True):
            target = symlink_target(path, self.fs, case_insensitive=True)
            return PathEntry(
                path=nominal,
                kind=EntryKind.SYMLINK,
                target=target,
                target_exists=self.fs.real_path(path) is not None,
            )

        if self.fs.is_dir(path):
            return PathEntry(path=nominal, kind=EntryKind.DIRECTORY)
        return PathEntry(path=nominal, kind=EntryKind.FILE)

    def is_directory_link(self, entry: PathEntry) -> bool:
        return bool(entry.target_exists and entry.target and self.fs.is_dir(entry.target))


class PosixPathClassifier(PathClassifier):
    """Dispatch on the entry's own file type; links are unlinked like files."""

    def classify(self, path: str) -> PathEntry:
        nominal = normalize_path(path)

        if self.fs.is_link(path):
            link = self.fs.read_link(path)
            return PathEntry(
                path=nominal,
                kind=EntryKind.SYMLINK,
                target=normalize_path(link) if link else None,
                target_exists=self.fs.exists(path),
            )

        if self.fs.is_dir(path):
            return PathEntry(path=nominal, kind=EntryKind.DIRECTORY)
        return PathEntry(path=nominal, kind=EntryKind.FILE)

    def is_directory_link(self, entry: PathEntry) -> bool:
        return False


def get_path_classifier(fs: Optional[FileSystem] = None) -> PathClassifier:
    """Select the classifier implementation for the running platform."""
    if os.name == "nt":
        return WindowsPathClassifier(fs)
    return PosixPathClassifier(fs)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _nominal_path(path: str, fs: FileSystem) -> str:
    """
    Build the path an entry would have if the entry itself were not a link.

    The parent directory is canonicalized so that links in ancestor
    directories (e.g. /tmp -> /private/tmp) do not mark every child as a
    symlink.
    """
    p = normalize_path(path)
    stripped = p.rstrip("/")
    if not stripped:
        return p

    parent, name = os.path.split(os.path.abspath(stripped))
    real_parent = fs.real_path(parent) or parent
    return normalize_path(os.path.join(real_parent, name))


def _same_path(a: str, b: str, case_insensitive: Optional[bool]) -> bool:
    """Compare two paths after separator normalization, optionally ignoring case."""
    if case_insensitive is None:
        case_insensitive = os.name == "nt"
    a, b = normalize_path(a), normalize_path(b)
    if case_insensitive:
        return ntpath.normcase(a) == ntpath.normcase(b)
    return a == b
