from __future__ import annotations

"""
Recursive Tree Removal.

Deletes a path and, for real directories, everything below it. Symlinks
(working or broken) are removed as links and never traversed, so a link
inside the tree cannot cause files outside the tree to be deleted.

Syscall failures are not caught: the first OSError aborts the traversal
and propagates, leaving unvisited siblings intact.
"""

import logging
import os
from typing import Optional

from dirkit.core.classifier import PathClassifier, get_path_classifier
from dirkit.domain.errors import PathNotFoundError
from dirkit.domain.models import EntryKind
from dirkit.infra.fs import FileSystem, normalize_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# REMOVER SERVICE
# -----------------------------------------------------------------------------

class RecursiveTreeRemover:
    """
    Stateless service removing a filesystem tree bottom-up.

    Args:
        classifier: Platform classifier. Defaults to the one matching the
            running OS.
        fs: Filesystem collaborator. Defaults to the classifier's.
    """

    def __init__(
            self,
            classifier: Optional[PathClassifier] = None,
            fs: Optional[FileSystem] = None,
    ) -> None:
        self.classifier = classifier or get_path_classifier(fs)
        self.fs = fs or self.classifier.fs

    def remove_tree(self, path: str, *, if_exists: bool = False) -> None:
        """
        Remove a file, a symlink, or a directory and all of its contents.

        Args:
            path: Entry to remove.
            if_exists: If True, a missing path is a no-op instead of an error.

        Raises:
            PathNotFoundError: If path does not exist and if_exists is False.
            OSError: If any removal syscall fails.
        """
        if not self.fs.lexists(path):
            if if_exists:
                logger.debug(f"Nothing to remove, path does not exist: {path}")
                return
            raise PathNotFoundError(path, "remove_tree")

        # Backslash is an ordinary filename character on POSIX
        if os.sep == "\\":
            path = normalize_path(path)
        # A trailing separator makes lstat follow a link to a directory
        removed = self._remove_entry(path.rstrip("/") or "/")
        logger.info(f"Removed '{path}' ({removed} entries).")

    def _remove_entry(self, path: str) -> int:
        """Remove one entry, recursing into real directories. Returns the entry count."""
        entry = self.classifier.classify(path)

        if entry.kind is EntryKind.SYMLINK:
            if self.classifier.is_directory_link(entry):
                self.fs.remove_dir(path)
            else:
                self.fs.unlink(path)
            logger.debug(f"Removed symlink: {path} -> {entry.target}")
            return 1

        if entry.kind is EntryKind.DIRECTORY:
            count = 0
            for name in self.fs.list_dir(path):
                if name in (".", ".."):
                    continue
                count += self._remove_entry(f"{path.rstrip('/')}/{name}")
            self.fs.remove_dir(path)
            logger.debug(f"Removed directory: {path}")
            return count + 1

        self.fs.unlink(path)
        return 1


def rrmdir(path: str, if_exists: bool = False) -> None:
    """Remove a directory recursively using the platform default classifier."""
    RecursiveTreeRemover().remove_tree(path, if_exists=if_exists)
