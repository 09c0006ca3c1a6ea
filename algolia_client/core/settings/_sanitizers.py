"""Helpers to sanitize environment variable values before validation."""

from __future__ import annotations

import json
from typing import Any


def strip_inline_comment(value: str) -> str:
    """Remove inline comments of the form "value  # comment".

    Some env-file parsers keep inline comments, so values like
    ``30  # seconds`` show up in the process environment. The check on
    ``value[idx - 1]`` keeps strings like ``foo#bar`` intact because there is
    no preceding whitespace.
    """

    idx = value.find("#")
    if idx == -1:
        return value.strip()
    if idx == 0:
        return ""  # comment-only string
    if not value[idx - 1].isspace():
        return value.strip()
    return value[:idx].strip()


def sanitize_inline_numeric(value: Any) -> Any:
    """Normalize numeric env vars that may include inline comments."""

    if isinstance(value, str):
        cleaned = strip_inline_comment(value)
        if cleaned:
            return cleaned
    return value


def split_csv(value: Any) -> Any:
    """Turn a comma separated env string into a list of non-empty items."""

    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            return json.loads(stripped)
        return [item.strip() for item in stripped.split(",") if item.strip()]
    return value
