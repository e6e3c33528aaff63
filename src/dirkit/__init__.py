from __future__ import annotations

"""
dirkit: filesystem and string-formatting helpers.

Exposes relative-path computation, symlink-aware recursive removal,
directory listing, temporary directories, include-path file loading,
JSON persistence and terminal-aware formatting.
"""

from dirkit.core.classifier import is_symlink, symlink_target
from dirkit.core.listing import dir_list
from dirkit.core.loader import (
    file_exists,
    include_file,
    load_file,
    remove_bom,
    resolve_include_path,
)
from dirkit.core.relative import RelativePathResolver, get_relative_path
from dirkit.core.remover import RecursiveTreeRemover, rrmdir
from dirkit.domain.errors import DirkitError, PathNotFoundError
from dirkit.domain.models import EntryKind, ListType, PathEntry, SortOrder
from dirkit.infra.fs import dirname_ex, normalize_path, tempdir, updir
from dirkit.infra.json_io import json_load, json_save
from dirkit.utils.text import hr, hsprintf, is_cli

__version__ = "0.1.0"

__all__ = [
    "DirkitError",
    "EntryKind",
    "ListType",
    "PathEntry",
    "PathNotFoundError",
    "RecursiveTreeRemover",
    "RelativePathResolver",
    "SortOrder",
    "dir_list",
    "dirname_ex",
    "file_exists",
    "get_relative_path",
    "hr",
    "hsprintf",
    "include_file",
    "is_cli",
    "is_symlink",
    "json_load",
    "json_save",
    "load_file",
    "normalize_path",
    "remove_bom",
    "resolve_include_path",
    "rrmdir",
    "symlink_target",
    "tempdir",
    "updir",
]
