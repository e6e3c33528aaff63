from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging
(defaults, persisted file, CLI overrides), logging bootstrap, dispatch of
the selected subcommand and result rendering.
"""

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional

from dirkit.core.classifier import is_symlink, symlink_target
from dirkit.core.listing import dir_list
from dirkit.core.loader import load_file
from dirkit.core.relative import get_relative_path
from dirkit.core.remover import RecursiveTreeRemover
from dirkit.domain.config import get_default_config, load_config
from dirkit.domain.errors import DirkitError, PathNotFoundError
from dirkit.domain.models import ListType, SortOrder
from dirkit.domain.validator import validate_config
from dirkit.infra.fs import tempdir
from dirkit.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from dirkit.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration (defaults vs persisted state) and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    if args.log_default and not clean_conf["log_file"]:
        clean_conf["log_file"] = get_default_log_path()

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=clean_conf["json_indent"]))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_FAILURE

    # 3. Command execution
    handler = _COMMANDS[args.command]
    logger.debug(f"Running command '{args.command}'.")
    try:
        result = handler(args, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except PathNotFoundError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except (DirkitError, OSError) as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 4. Output rendering
    _render(result, args.json_output, clean_conf["json_indent"])
    return EXIT_OK

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _cmd_relpath(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return get_relative_path(args.base, args.target)


def _cmd_rmtree(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    RecursiveTreeRemover().remove_tree(args.path, if_exists=args.if_exists)
    return {"removed": args.path}


def _cmd_ls(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    if args.files:
        list_type = ListType.FILES
    elif args.dirs:
        list_type = ListType.DIRECTORIES
    else:
        list_type = ListType.ALL
    sort_order = SortOrder(args.sort) if args.sort else None
    return dir_list(args.path, list_type, args.full, sort_order, strict=True)


def _cmd_tempdir(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return tempdir(args.directory, conf["temp_prefix"], conf["temp_mode"])


def _cmd_symlink(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return {
        "path": args.path,
        "is_symlink": is_symlink(args.path),
        "target": symlink_target(args.path),
    }


def _cmd_cat(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return load_file(
        args.filename,
        use_include_path=not args.no_include_path,
        include_path=conf["include_path"],
        strict=True,
    )


_COMMANDS: Dict[str, Callable[[argparse.Namespace, Dict[str, Any]], Any]] = {
    "relpath": _cmd_relpath,
    "rmtree": _cmd_rmtree,
    "ls": _cmd_ls,
    "tempdir": _cmd_tempdir,
    "symlink": _cmd_symlink,
    "cat": _cmd_cat,
}

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides for known keys."""
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render(result: Any, as_json: bool, indent: int) -> None:
    if as_json:
        print(json.dumps(result, ensure_ascii=False, indent=indent))
        return

    if isinstance(result, list):
        for item in result:
            print(item)
    elif isinstance(result, dict):
        for k, v in result.items():
            print(f"{k}: {v}")
    elif isinstance(result, str):
        # load_file content already carries its own trailing newline
        print(result, end="" if result.endswith("\n") else "\n")


if __name__ == "__main__":
    sys.exit(main())
