"""Type tests for parsed JSON/YAML document values."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


def is_plain_object(value: Any) -> bool:
    """Return True for JSON objects."""
    return isinstance(value, MutableMapping)


def is_array(value: Any) -> bool:
    """Return True for JSON arrays."""
    return isinstance(value, list)
