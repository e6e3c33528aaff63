from __future__ import annotations

"""
Include-Path File Access.

Resolves file names against a search path (an os.pathsep separated
string or a list of directories), loads text with the Unicode Byte Order
Mark removed, and executes Python files found on the search path.
"""

import logging
import os
import runpy
from typing import Any, Dict, Iterable, List, Optional, Union

from dirkit.domain.errors import PathNotFoundError

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"

IncludePath = Union[str, Iterable[str], None]

# -----------------------------------------------------------------------------
# PATH RESOLUTION
# -----------------------------------------------------------------------------

def resolve_include_path(filename: str, include_path: IncludePath = None) -> Optional[str]:
    """
    Find a file on the include path.

    Absolute names are checked as-is. Relative names are tried against
    each include directory in order; an empty include path means the
    current directory.

    Args:
        filename: File name or relative path to look up.
        include_path: Search directories.

    Returns:
        Optional[str]: Absolute path of the first match, or None.
    """
    if not filename:
        return None

    if os.path.isabs(filename):
        return filename if os.path.isfile(filename) else None

    for directory in _include_dirs(include_path):
        candidate = os.path.join(directory, filename)
        if os.path.isfile(candidate):
            return os.path.abspath(candidate)

    return None


def file_exists(
        filename: str,
        use_include_path: bool = True,
        include_path: IncludePath = None,
) -> bool:
    if use_include_path:
        return resolve_include_path(filename, include_path) is not None
    return os.path.exists(filename)

# -----------------------------------------------------------------------------
# LOADING
# -----------------------------------------------------------------------------

def include_file(filename: str, include_path: IncludePath = None) -> Optional[Dict[str, Any]]:
    """
    Execute a Python file found on the include path.

    Returns:
        Optional[Dict[str, Any]]: The module globals after execution, or
            None if the file was not found.
    """
    path = resolve_include_path(filename, include_path)
    if not path:
        logger.debug(f"Include file not found: {filename}")
        return None
    return runpy.run_path(path)


def load_file(
        filename: str,
        use_include_path: bool = True,
        include_path: IncludePath = None,
        *,
        strict: bool = False,
) -> Optional[str]:
    """
    Load a UTF-8 text file, stripping the Byte Order Mark if present.

    Byte sequences that are not valid UTF-8 are replaced with U+FFFD.

    Args:
        filename: File to read.
        use_include_path: Search the include path instead of using the name
            as given.
        include_path: Search directories.
        strict: Raise instead of returning None when the file is missing.

    Returns:
        Optional[str]: File content, or None if not found (directories
            count as not found).

    Raises:
        PathNotFoundError: If the file is missing and strict is True.
    """
    if use_include_path:
        path = resolve_include_path(filename, include_path)
    else:
        path = filename if os.path.isfile(filename) else None

    if path is None:
        if strict:
            raise PathNotFoundError(filename, "load_file")
        return None

    with open(path, "rb") as f:
        data = f.read()
    # Undecodable bytes become U+FFFD instead of aborting the read
    return remove_bom(data).decode("utf-8", errors="replace")


def remove_bom(content: Union[str, bytes]) -> Union[str, bytes]:
    """Strip a leading UTF-8 Byte Order Mark from text or bytes."""
    if isinstance(content, bytes):
        return content[len(UTF8_BOM):] if content.startswith(UTF8_BOM) else content
    return content[1:] if content.startswith("\ufeff") else content

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _include_dirs(include_path: IncludePath) -> List[str]:
    if include_path is None:
        return [os.curdir]
    if isinstance(include_path, str):
        dirs = [d for d in include_path.split(os.pathsep) if d]
    else:
        dirs = [d for d in include_path if d]
    return dirs or [os.curdir]
