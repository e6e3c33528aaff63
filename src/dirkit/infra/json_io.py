from __future__ import annotations

"""
JSON Persistence Helpers.

Writes documents with unescaped unicode and two-space indentation, the
format used for all JSON files produced by dirkit.
"""

import json
from typing import Any

JSON_INDENT = 2


def json_save(path: str, data: Any, pretty: bool = True) -> None:
    """
    Serialize data to a UTF-8 JSON file.

    Args:
        path: Destination file.
        data: JSON-serializable document.
        pretty: Indent the output; otherwise write it on one line.
    """
    with open(path, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(data, f, ensure_ascii=False, indent=JSON_INDENT)
        else:
            json.dump(data, f, ensure_ascii=False, separators=(",", ":"))


def json_load(path: str) -> Any:
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)
