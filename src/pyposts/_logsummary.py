"""Compact payload summaries for DEBUG logs.

Post bodies can be long and a fetched collection holds every post, so
payloads are shortened before they reach a log record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MAX_ITEMS = 3


def summarize_for_log(value: Any, *, max_string: int = 120, top_level: bool = True) -> Any:
    """Return a shortened copy of a decoded JSON *value*.

    Strings longer than *max_string* are cut. A top-level list keeps its
    first items followed by a ``"<+N more>"`` marker.
    """
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, Mapping):
        return {str(k): summarize_for_log(v, max_string=max_string, top_level=False) for k, v in value.items()}

    if isinstance(value, list):
        items = value[:_MAX_ITEMS] if top_level else value
        summary = [summarize_for_log(v, max_string=max_string, top_level=False) for v in items]
        if len(value) > len(items):
            summary.append(f"<+{len(value) - len(items)} more>")
        return summary

    return value
