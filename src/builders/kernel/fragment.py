"""Fragment - the tagged unit every builder folds over."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")

FragmentKind = Literal["item", "collection", "absent", "present", "block"]


@dataclass(frozen=True)
class Fragment(Generic[T]):
    """
    One caller-declared contribution to a composition.

    Kinds:
    - item: A single element, lifted by the builder into its container kind
    - collection: A sub-collection, lifted as a whole
    - absent: An optional with no value; lifts to the identity element
    - present: An optional wrapping a single element; lifts like an item
    - block: The accumulator of a nested block (branch, loop, optional body);
      passes through unchanged
    """

    kind: FragmentKind
    payload: Any | None = None

    @staticmethod
    def Item(value: Any) -> Fragment[Any]:
        return Fragment(kind="item", payload=value)

    @staticmethod
    def Collection(values: Any) -> Fragment[Any]:
        return Fragment(kind="collection", payload=values)

    @staticmethod
    def Absent() -> Fragment[Any]:
        return Fragment(kind="absent")

    @staticmethod
    def Present(value: Any) -> Fragment[Any]:
        return Fragment(kind="present", payload=value)

    @staticmethod
    def Block(accumulated: Any) -> Fragment[Any]:
        return Fragment(kind="block", payload=accumulated)

    @staticmethod
    def Optional(value: Any | None) -> Fragment[Any]:
        """Absent for None, Present otherwise."""
        if value is None:
            return Fragment.Absent()
        return Fragment.Present(value)
