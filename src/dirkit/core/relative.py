from __future__ import annotations

"""
Relative Path Resolution.

Computes the shortest relative reference from one absolute path to
another. Only the path component matters (no scheme or host). Both paths
must be absolute and free of '.' and '..' segments; the resolver does not
canonicalize, and malformed input yields a best-effort string rather than
an error.

Relative references are useful when generating self-contained document
archives, and to shorten links inside documents.
"""

from typing import List

# -----------------------------------------------------------------------------
# RESOLVER SERVICE
# -----------------------------------------------------------------------------

class RelativePathResolver:
    """
    Stateless resolver of relative references between two paths.

    The base path names a file: its last segment is dropped, and the
    reference is computed from the directory that contains it.

    Example targets, given a base path of "/a/b/c/d":
    - "/a/b/c/d"     -> ""
    - "/a/b/c/"      -> "./"
    - "/a/b/"        -> "../"
    - "/a/b/c/other" -> "other"
    - "/a/x/y"       -> "../../x/y"
    """

    def resolve(self, base_path: str, target_path: str) -> str:
        """
        Return target_path as a reference relative to base_path.

        Args:
            base_path: Absolute path of the base file.
            target_path: Absolute path of the target.

        Returns:
            str: The relative reference.
        """
        if base_path == target_path:
            return ""

        source_dirs = _split_segments(base_path)
        target_dirs = _split_segments(target_path)
        source_dirs.pop()
        target_file = target_dirs.pop()

        common = 0
        for source, target in zip(source_dirs, target_dirs):
            if source != target:
                break
            common += 1

        source_dirs = source_dirs[common:]
        target_dirs = target_dirs[common:]
        target_dirs.append(target_file)

        path = "../" * len(source_dirs) + "/".join(target_dirs)

        if _needs_dot_prefix(path):
            return f"./{path}"
        return path


_default_resolver = RelativePathResolver()


def get_relative_path(base_path: str, target_path: str) -> str:
    """Module-level shortcut for RelativePathResolver().resolve()."""
    return _default_resolver.resolve(base_path, target_path)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_segments(path: str) -> List[str]:
    """Split on '/', ignoring a single leading separator."""
    if path.startswith("/"):
        path = path[1:]
    return path.split("/")


def _needs_dot_prefix(path: str) -> bool:
    """
    Check whether a reference must be prefixed with './'.

    Applies to a reference to the same directory (empty), to one that
    would read as absolute, and to one whose first segment contains a
    colon (e.g. "file:colon"), which would be mistaken for a scheme name
    (RFC 3986, section 4.2).
    """
    if path == "" or path.startswith("/"):
        return True

    colon_pos = path.find(":")
    if colon_pos == -1:
        return False
    slash_pos = path.find("/")
    return slash_pos == -1 or colon_pos < slash_pos
