"""Payload shape checks shared by the builders.

Each check either returns the payload narrowed to the accepted shape or
raises FragmentError. Nothing is coerced.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from builders.kernel.errors import FragmentError


def require_iterable(values: Any, label: str) -> Iterable[Any]:
    # Strings are iterable but are never a collection of elements;
    # wrap them in an item fragment instead.
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise FragmentError(
            f"{label} collection must be a non-string iterable, got {type(values).__name__}",
            values,
        )
    return values


def require_str(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise FragmentError(f"{label} expects str, got {type(value).__name__}", value)
    return value


def require_lines(values: Any, label: str) -> list[str]:
    """A collection whose every element is a str."""
    lines = list(require_iterable(values, label))
    for line in lines:
        require_str(line, label)
    return lines
