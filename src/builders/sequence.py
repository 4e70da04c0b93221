"""Sequence builder - ordered lists by concatenation."""

from __future__ import annotations

from typing import Any, TypeVar

from builders.kernel.builder import Builder
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions
from builders.kernel.shapes import require_iterable

T = TypeVar("T")


class SequenceBuilder(Builder[list[T], T, list[T]]):
    """Build a list, preserving declaration order.

    combine(acc, next) = acc ++ next
    """

    accumulator_type = list

    def identity(self) -> list[T]:
        return []

    def lift_item(self, value: T) -> list[T]:
        return [value]

    def lift_collection(self, values: Any) -> list[T]:
        return list(require_iterable(values, self.label))

    def combine(self, accumulated: list[T], next: list[T]) -> list[T]:
        return [*accumulated, *next]


def build_list(*fragments: Fragment[Any], options: ComposeOptions | None = None) -> list[Any]:
    """Compose fragments into a list.

    Example:
        >>> build_list(Fragment.Item(1), Fragment.Collection([2, 3]), Fragment.Absent())
        [1, 2, 3]
    """
    return SequenceBuilder(options).compose(fragments)
