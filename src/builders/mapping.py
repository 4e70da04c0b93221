"""Mapping builder - dicts by right-biased merge.

Four source shapes are accepted and normalized to a single update rule,
``accumulated[key] = value`` applied entry by entry in declaration order:

- ``Fragment.Item(KeyValuePair(key, value))``
- ``Fragment.Item((key, value))``
- ``Fragment.Collection({key: value, ...})``
- ``Fragment.Collection([(key, value), ...])`` (pairs may also be KeyValuePair)

The later write always wins, whether the collision comes from two single
pairs or from a pair and an embedded sub-map.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from builders.kernel.builder import Builder
from builders.kernel.errors import FragmentError
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions
from builders.kernel.shapes import require_iterable

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class KeyValuePair(Generic[K, V]):
    """A single key-value entry."""

    key: K
    value: V


class MappingBuilder(Builder[dict[K, V], tuple[K, V], dict[K, V]]):
    """Build a dict. On duplicate keys the fragment declared later wins."""

    accumulator_type = dict

    def identity(self) -> dict[K, V]:
        return {}

    def lift_item(self, value: KeyValuePair[K, V] | tuple[K, V]) -> dict[K, V]:
        key, entry = self._pair(value)
        return {key: entry}

    def lift_collection(self, values: Any) -> dict[K, V]:
        lifted: dict[K, V] = {}
        for key, entry in self._entries(values):
            lifted[key] = entry
        return lifted

    def combine(self, accumulated: dict[K, V], next: dict[K, V]) -> dict[K, V]:
        merged = dict(accumulated)
        for key, entry in next.items():
            merged[key] = entry
        return merged

    def pair(self, key: K, value: V) -> Fragment[Any]:
        """Shorthand for Fragment.Item(KeyValuePair(key, value))."""
        return Fragment.Item(KeyValuePair(key, value))

    def _entries(self, values: Any) -> Iterable[tuple[K, V]]:
        if isinstance(values, Mapping):
            return values.items()
        return [self._pair(value) for value in require_iterable(values, self.label)]

    def _pair(self, value: Any) -> tuple[K, V]:
        if isinstance(value, KeyValuePair):
            key, entry = value.key, value.value
        elif isinstance(value, tuple) and len(value) == 2:
            key, entry = value
        else:
            raise FragmentError(
                f"{self.label} expects a KeyValuePair or a (key, value) tuple, got {value!r}",
                value,
            )
        if not isinstance(key, Hashable):
            raise FragmentError(f"{self.label} keys must be hashable, got {key!r}", value)
        return key, entry


def build_dict(*fragments: Fragment[Any], options: ComposeOptions | None = None) -> dict[Any, Any]:
    """Compose fragments into a dict.

    Example:
        >>> build_dict(Fragment.Collection({"a": 1, "b": 2}), Fragment.Item(("b", 3)))
        {'a': 1, 'b': 3}
    """
    return MappingBuilder(options).compose(fragments)
