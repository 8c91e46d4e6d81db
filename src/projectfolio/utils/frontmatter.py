"""Front-matter extraction for project documents.

A document may start with a header block such as::

    ---
    title: My project
    tags: [python, cli]
    featured: true
    links: {"github": "https://github.com/me/project"}
    ---

``extract`` turns the block into a flat mapping.
"""

from __future__ import annotations

import json
import re
from typing import Any

from projectfolio.errors import MalformedStructuredValueError

FRONT_MATTER_DELIMITER = "---"

# str: plain value, bool: true/false, list[str]: [a, b], dict: {"json": "object"}
FrontMatterValue = str | bool | list[str] | dict[str, Any]

_BLOCK_REGEX = re.compile(
    rf"\A{FRONT_MATTER_DELIMITER}\s*\n(?P<block>.*?)\n{FRONT_MATTER_DELIMITER}",
    re.DOTALL,
)


def extract(text: str) -> dict[str, FrontMatterValue]:
    match = _BLOCK_REGEX.match(text)
    if not match:
        return {}
    meta: dict[str, FrontMatterValue] = {}
    for line in match.group("block").split("\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if not key:
            continue
        # Duplicate keys: the last occurrence wins.
        meta[key] = coerce_value(key, value.strip())
    return meta


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def coerce_value(key: str, value: str) -> FrontMatterValue:
    """Coerce a trimmed raw value by its surface syntax."""

    if value.startswith("[") and value.endswith("]"):
        # No escaping: commas always split, so "[]" yields [""].
        return [item.strip() for item in value[1:-1].split(",")]
    if value in ("true", "false"):
        return value == "true"
    if value.startswith("{") and value.endswith("}"):
        try:
            return json.loads(value, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise MalformedStructuredValueError(key, value, exc.msg) from exc
        except (ValueError, RecursionError) as exc:
            raise MalformedStructuredValueError(key, value, str(exc)) from exc
    return value
