from __future__ import annotations

"""
Filesystem Entry Data Models.

Provides the classification types produced by the platform path
classifiers and the selector enums used by directory listing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    """Type of a filesystem entry as seen at traversal time."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class PathEntry:
    """
    A classified filesystem entry.

    Classification is computed once per visit and never cached across
    calls.

    Attributes:
        path: Nominal path of the entry, with forward-slash separators.
        kind: Entry type.
        target: Resolved target (real path, or raw link text when broken).
            Only set for symlinks.
        target_exists: Whether the symlink target resolves to an existing
            entry. Always False for non-links.
    """
    path: str
    kind: EntryKind
    target: Optional[str] = None
    target_exists: bool = False

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def is_broken_link(self) -> bool:
        return self.kind is EntryKind.SYMLINK and not self.target_exists

# -----------------------------------------------------------------------------
# LISTING SELECTORS
# -----------------------------------------------------------------------------

class ListType(int, Enum):
    """Which entries a directory listing returns."""
    ALL = 0
    FILES = 1
    DIRECTORIES = 2


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
