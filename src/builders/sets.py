"""Set builder - unordered sets by union."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, TypeVar

from builders.kernel.builder import Builder
from builders.kernel.errors import FragmentError
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions
from builders.kernel.shapes import require_iterable

T = TypeVar("T", bound=Hashable)


class SetBuilder(Builder[set[T], T, set[T]]):
    """Build a set. Duplicates across fragments are absorbed silently.

    combine(acc, next) = acc | next

    Collections may be sets or any other iterable of hashable elements.
    """

    accumulator_type = set

    def identity(self) -> set[T]:
        return set()

    def lift_item(self, value: T) -> set[T]:
        try:
            return {value}
        except TypeError as exc:
            raise FragmentError(f"{self.label} items must be hashable", value) from exc

    def lift_collection(self, values: Any) -> set[T]:
        elements = require_iterable(values, self.label)
        try:
            return set(elements)
        except TypeError as exc:
            raise FragmentError(f"{self.label} collection holds unhashable elements", values) from exc

    def combine(self, accumulated: set[T], next: set[T]) -> set[T]:
        return accumulated | next


def build_set(*fragments: Fragment[Any], options: ComposeOptions | None = None) -> set[Any]:
    """Compose fragments into a set."""
    return SetBuilder(options).compose(fragments)
