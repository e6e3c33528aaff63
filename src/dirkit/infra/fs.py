from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the primitive syscall collaborator used by the core components,
cross-platform path helpers, and temporary directory creation. Acts as an
abstraction over the 'os' module so that core algorithms can be exercised
against a substitute filesystem in tests.
"""

import logging
import os
import random
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "dirkit"
UNIX_APP_DIR_NAME = ".dirkit"
TEMPDIR_MAX_SUFFIX = 9999999

# -----------------------------------------------------------------------------
# SYSCALL COLLABORATOR
# -----------------------------------------------------------------------------

class FileSystem:
    """
    Thin wrapper over the primitive filesystem calls used by dirkit.

    Mutating calls raise OSError on failure. Resolution calls that the
    classifiers use as probes return None instead of raising.
    """

    def list_dir(self, path: str) -> List[str]:
        """Return the names of the entries in a directory, without '.' and '..'."""
        return os.listdir(path)

    def real_path(self, path: str) -> Optional[str]:
        """
        Return the canonical path with all symlinks resolved.

        Returns:
            Optional[str]: The real path, or None if the path (or a link
                along it) cannot be resolved.
        """
        try:
            return os.path.realpath(path, strict=True)
        except (OSError, ValueError):
            return None

    def read_link(self, path: str) -> Optional[str]:
        """Return the raw text of a symlink, or None if path is not a readable link."""
        try:
            return os.readlink(path)
        except (OSError, ValueError):
            return None

    def remove_dir(self, path: str) -> None:
        os.rmdir(path)

    def unlink(self, path: str) -> None:
        os.unlink(path)

    def make_dir(self, path: str, mode: int = 0o777) -> None:
        os.mkdir(path, mode)

    # --- Queries ---

    def exists(self, path: str) -> bool:
        """True if path exists, following links."""
        return os.path.exists(path)

    def lexists(self, path: str) -> bool:
        """True if path exists, broken symlinks included."""
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_link(self, path: str) -> bool:
        return os.path.islink(path)


# Shared default instance; FileSystem holds no state.
default_fs = FileSystem()

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/dirkit
    - Linux/Mac: ~/.dirkit

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data directory '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: str) -> str:
    """Convert Windows directory separators to forward slashes."""
    return path.replace("\\", "/")


def updir(path: str, levels: int = 1) -> str:
    """
    Return an ancestor directory of the given path, `levels` levels above.

    Args:
        path: Starting path.
        levels: How many times to travel up the hierarchy.

    Returns:
        str: The resulting path.
    """
    for _ in range(max(levels, 0)):
        path = os.path.dirname(path)
    return path


def dirname_ex(path: str, levels: int = 1) -> str:
    """Like updir, but returns an empty string once the root is reached."""
    path = updir(path, levels)
    return "" if path in (os.sep, "/") else path

# -----------------------------------------------------------------------------
# DIRECTORY CREATION API
# -----------------------------------------------------------------------------

def tempdir(
        directory: str,
        prefix: str = "",
        mode: int = 0o700,
        fs: Optional[FileSystem] = None,
) -> str:
    """
    Create a uniquely named directory inside `directory`.

    Candidate names are `prefix` followed by a random integer; a name that
    already exists is retried with a new random suffix. Any other failure
    (missing parent, permission denied) propagates.

    Args:
        directory: Parent directory.
        prefix: Name prefix for the new directory.
        mode: Permission bits for the new directory.
        fs: Filesystem collaborator.

    Returns:
        str: Path of the created directory, with forward-slash separators.

    Raises:
        OSError: If the directory cannot be created.
    """
    fs = fs or default_fs
    if not directory.endswith(("/", "\\")):
        directory += "/"

    while True:
        path = f"{directory}{prefix}{random.randint(0, TEMPDIR_MAX_SUFFIX)}"
        try:
            fs.make_dir(path, mode)
        except FileExistsError:
            logger.debug(f"Temporary directory candidate exists, retrying: {path}")
            continue
        break

    logger.debug(f"Created temporary directory: {path}")
    return normalize_path(path)
