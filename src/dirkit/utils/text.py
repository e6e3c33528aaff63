from __future__ import annotations

"""
Terminal-aware String Formatting.

Chooses between a plain and an HTML message template depending on
whether the process runs on a console or behind a web gateway.
"""

import os
import shutil
from typing import Any

DEFAULT_TERMINAL_COLUMNS = 80


def is_cli() -> bool:
    """True unless the process was started by a CGI-style web gateway."""
    return "GATEWAY_INTERFACE" not in os.environ


def hsprintf(web_format: str, cli_format: str, *values: Any) -> str:
    """
    Hybrid printf-style formatting.

    Args:
        web_format: HTML template with %-placeholders.
        cli_format: Plain-text template with %-placeholders.
        *values: Values for each placeholder.

    Returns:
        str: The formatted message.
    """
    template = cli_format if is_cli() else web_format
    return template % values


def hr(char: str = "-") -> str:
    """Return a horizontal rule of `char` as wide as the terminal."""
    columns = shutil.get_terminal_size((DEFAULT_TERMINAL_COLUMNS, 24)).columns
    return char * columns
