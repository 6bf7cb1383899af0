"""
Value formatting for Slack attachment fields.

Profile properties can hold scalars, lists (interests, segments) or nested
dicts. Lists of scalars are joined, dicts are rendered as compact JSON so no
key is lost before truncation.
"""

import json
from typing import Any

MAX_FIELD_LENGTH = 65
ELLIPSIS = "..."


def format_value(val: Any) -> str:
    """
    Format a single value into a human-readable string.

    - ``None`` becomes an empty string.
    - Lists of primitives are joined with ", ".
    - Dicts become compact JSON.
    - Anything else goes through ``str(val)``.
    """
    if val is None:
        return ""

    if not isinstance(val, (dict, list, tuple, set, frozenset)):
        return str(val)

    if isinstance(val, (list, tuple, set, frozenset)):
        if all(not isinstance(v, (dict, list)) for v in val):
            return ", ".join(str(v) for v in val)
        return ", ".join(format_value(v) for v in val)

    try:
        return json.dumps(val, default=str)
    except (TypeError, ValueError):
        return "[complex value]"


def truncate(text: str, limit: int = MAX_FIELD_LENGTH) -> str:
    """Cut *text* to ``limit - 2`` characters plus an ellipsis when longer than *limit*."""
    if len(text) > limit:
        return text[: limit - 2] + ELLIPSIS
    return text
