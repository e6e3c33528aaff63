from __future__ import annotations

"""
Directory Listing Service.

Lists the immediate children of a directory, optionally filtered by type
and sorted by name.
"""

import logging
from typing import List, Optional

from dirkit.domain.errors import PathNotFoundError
from dirkit.domain.models import ListType, SortOrder
from dirkit.infra.fs import FileSystem, default_fs

logger = logging.getLogger(__name__)


def dir_list(
        path: str,
        list_type: ListType = ListType.ALL,
        full_paths: bool = False,
        sort_order: Optional[SortOrder] = None,
        *,
        strict: bool = False,
        fs: Optional[FileSystem] = None,
) -> Optional[List[str]]:
    """
    List files and/or directories inside the specified path.

    The '.' and '..' entries are never returned. Type filters follow
    symlinks: a link to a directory counts as a directory.

    Args:
        path: Directory to list.
        list_type: Which entries to return.
        full_paths: Return 'path/name' instead of the bare name.
        sort_order: None keeps directory order; otherwise sort by name.
        strict: Raise instead of returning None when path is missing.
        fs: Filesystem collaborator.

    Returns:
        Optional[List[str]]: Entry names or paths, or None if path does
            not exist.

    Raises:
        PathNotFoundError: If path does not exist and strict is True.
        OSError: If path exists but cannot be listed.
    """
    fs = fs or default_fs
    if not fs.exists(path):
        if strict:
            raise PathNotFoundError(path, "dir_list")
        return None

    list_type = ListType(list_type)
    prefix = path if path.endswith(("/", "\\")) else f"{path}/"
    out: List[str] = []

    for name in fs.list_dir(path):
        if name in (".", ".."):
            continue
        full = f"{prefix}{name}"
        if list_type is ListType.FILES and not fs.is_file(full):
            continue
        if list_type is ListType.DIRECTORIES and not fs.is_dir(full):
            continue
        out.append(full if full_paths else name)

    if sort_order is not None:
        out.sort(reverse=SortOrder(sort_order) is SortOrder.DESC)

    logger.debug(f"Listed {len(out)} entries in '{path}'.")
    return out
