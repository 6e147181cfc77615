"""Request/response plumbing for commands run by a host editor.

TIER 1: May import from core only.

The host sends one JSON object on stdin and reads one JSON object from
stdout.
"""

import json
import sys
from typing import Any


def read_request() -> dict[str, Any]:
    """Read and parse a command request from stdin.

    Returns:
        Parsed request dict, or empty dict if stdin is empty, invalid,
        or not a JSON object.
    """
    try:
        data = json.load(sys.stdin)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def output_response(response: dict[str, Any]) -> None:
    """Output command response as JSON."""
    print(json.dumps(response, ensure_ascii=False))


def message(level: str, text: str, *details: str) -> dict[str, Any]:
    """Build a notification entry for a response.

    Args:
        level: "info", "warning", or "error".
        text: Message shown to the user.
        details: Extra items (error cause, file path).
    """
    entry: dict[str, Any] = {"level": level, "text": text}
    if details:
        entry["details"] = list(details)
    return entry
