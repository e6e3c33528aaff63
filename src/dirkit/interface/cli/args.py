from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global flags and one subcommand per
helper) and translates parsed namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from dirkit.domain.models import SortOrder

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirkit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirkit",
        description="Filesystem helpers: relative paths, safe recursive removal, listings.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path of the JSON config file (default: user data directory).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted config file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )
    p.add_argument(
        "--log",
        dest="log_default",
        action="store_true",
        help="Write logs to the default log file in the user data directory.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    # --- relpath ---
    sp = sub.add_parser("relpath", help="Relative reference from a base file path to a target path.")
    sp.add_argument("base", help="Absolute path of the base file.")
    sp.add_argument("target", help="Absolute path of the target.")

    # --- rmtree ---
    sp = sub.add_parser("rmtree", help="Remove a path recursively without following symlinks.")
    sp.add_argument("path")
    sp.add_argument(
        "--if-exists",
        action="store_true",
        help="Do nothing if the path does not exist.",
    )

    # --- ls ---
    sp = sub.add_parser("ls", help="List the entries of a directory.")
    sp.add_argument("path")
    kind = sp.add_mutually_exclusive_group()
    kind.add_argument("--files", action="store_true", help="Only regular files.")
    kind.add_argument("--dirs", action="store_true", help="Only directories.")
    sp.add_argument("--full", action="store_true", help="Print full paths.")
    sp.add_argument(
        "--sort",
        choices=[o.value for o in SortOrder],
        default=None,
        help="Sort entries by name.",
    )

    # --- tempdir ---
    sp = sub.add_parser("tempdir", help="Create a uniquely named directory.")
    sp.add_argument("directory", help="Parent directory.")
    sp.add_argument("--prefix", dest="temp_prefix", default=None)
    sp.add_argument(
        "--mode",
        dest="temp_mode",
        default=None,
        help="Octal permission bits (default: 700).",
    )

    # --- symlink ---
    sp = sub.add_parser("symlink", help="Report whether a path is a symlink and its target.")
    sp.add_argument("path")

    # --- cat ---
    sp = sub.add_parser("cat", help="Print a text file found on the include path, without BOM.")
    sp.add_argument("filename")
    sp.add_argument(
        "-I", "--include",
        dest="include_dirs",
        action="append",
        default=None,
        help="Include directory (repeatable). Replaces the configured include path.",
    )
    sp.add_argument(
        "--no-include-path",
        action="store_true",
        help="Use the file name as given.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary subset.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides. Unset options map to None.
    """
    overrides: Dict[str, Any] = {}

    overrides["log_level"] = "DEBUG" if args.debug else None
    overrides["log_file"] = args.log_file
    overrides["include_path"] = _clean_list(getattr(args, "include_dirs", None))
    overrides["temp_prefix"] = getattr(args, "temp_prefix", None)
    overrides["temp_mode"] = getattr(args, "temp_mode", None)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _clean_list(values: Optional[List[str]]) -> Optional[List[str]]:
    """Strip entries and drop empty ones. None stays None."""
    if values is None:
        return None
    parts = [x.strip() for x in values]
    return [x for x in parts if x]
