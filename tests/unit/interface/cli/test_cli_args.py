from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Subcommand parsing.
2. Mapping of CLI flags to configuration overrides.
3. Handling of unset options (None) for the merge step.
"""

import pytest

from dirkit.interface.cli.app import _merge_config
from dirkit.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_relpath_positionals():
    args = parse_args(["relpath", "/a/b/c/d", "/a/x/y"])

    assert args.command == "relpath"
    assert args.base == "/a/b/c/d"
    assert args.target == "/a/x/y"


def test_rmtree_flags():
    args = parse_args(["rmtree", "/tmp/x", "--if-exists"])

    assert args.command == "rmtree"
    assert args.if_exists is True


def test_ls_filters_are_exclusive():
    """Only one of --files / --dirs may be given."""
    with pytest.raises(SystemExit):
        parse_args(["ls", ".", "--files", "--dirs"])


def test_ls_sort_choices():
    assert parse_args(["ls", ".", "--sort", "desc"]).sort == "desc"
    with pytest.raises(SystemExit):
        parse_args(["ls", ".", "--sort", "random"])


def test_global_flags_mapping():
    """Verify global flags are mapped to config overrides."""
    args = parse_args(["--debug", "--log-file", "/tmp/dirkit.log", "relpath", "/a", "/b"])

    overrides = args_to_overrides(args)

    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "/tmp/dirkit.log"
    assert overrides["include_path"] is None


def test_log_flag_defaults_off():
    """--log is a plain switch, independent of --log-file."""
    assert parse_args(["relpath", "a", "b"]).log_default is False

    args = parse_args(["--log", "relpath", "a", "b"])
    assert args.log_default is True
    assert args.log_file is None


def test_tempdir_overrides():
    args = parse_args(["tempdir", "/tmp", "--prefix", "job_", "--mode", "750"])

    overrides = args_to_overrides(args)

    assert overrides["temp_prefix"] == "job_"
    assert overrides["temp_mode"] == "750"


def test_include_dirs_are_cleaned():
    args = parse_args(["cat", "file.txt", "-I", " lib ", "-I", "", "--include", "vendor"])

    assert args_to_overrides(args)["include_path"] == ["lib", "vendor"]


def test_defaults_are_none_in_overrides():
    """Unset options stay None so the merge step keeps persisted values."""
    overrides = args_to_overrides(parse_args([]))

    assert all(v is None for v in overrides.values())


def test_merge_ignores_none_and_unknown_keys():
    base = {"log_level": "INFO", "temp_prefix": "p"}
    merged = _merge_config(base, {"log_level": "DEBUG", "temp_prefix": None, "other": 1})

    assert merged == {"log_level": "DEBUG", "temp_prefix": "p"}
