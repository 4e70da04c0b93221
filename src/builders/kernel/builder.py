"""Builder - the combine/finalize protocol shared by every container kind."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Generic, TypeVar

from builders.kernel.errors import FragmentError
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions
from builders.kernel.trace import Trace

log = logging.getLogger(__name__)

A = TypeVar("A")
T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E")

Body = Fragment[Any] | Iterable[Fragment[Any]]


class Builder(ABC, Generic[A, T, R]):
    """Fold a sequence of fragments into a finished container.

    Type parameters:
        A: Accumulator type (the container being built)
        T: Element type accepted by item fragments
        R: Result type produced by finalize()

    Subclasses provide the identity element, the two lifts and combine.
    Everything else (exhaustive fragment matching, folding, control-flow
    lowering, tracing) lives here.

    Laws:
        combine(identity(), x) == x == combine(x, identity())
        combine(combine(a, b), c) == combine(a, combine(b, c))
        combine() never mutates or returns its arguments

    TextBuilder holds the first two only for non-empty fragments:
    combine("a", "") is "a\\n", because an empty fragment after content
    is a blank line. Left identity holds for every builder.
    """

    accumulator_type: ClassVar[type]

    def __init__(self, options: ComposeOptions | None = None, trace: Trace | None = None) -> None:
        self.options = options or ComposeOptions()
        if trace is None and self.options.trace:
            trace = Trace()
        self.trace = trace

    @property
    def label(self) -> str:
        return self.options.label or type(self).__name__

    # Protocol

    @abstractmethod
    def identity(self) -> A:
        """A fresh empty accumulator."""

    @abstractmethod
    def lift_item(self, value: T) -> A:
        """Lift a single element into the accumulator type."""

    @abstractmethod
    def lift_collection(self, values: Any) -> A:
        """Lift a sub-collection into the accumulator type."""

    @abstractmethod
    def combine(self, accumulated: A, next: A) -> A:
        """Merge the next lifted fragment into the accumulator."""

    def finalize(self, accumulated: A) -> R:
        """Transform the accumulator into the result. Identity by default."""
        return accumulated  # type: ignore[return-value]

    def lift(self, fragment: Fragment[Any]) -> A:
        """Lift any fragment into the accumulator type.

        Raises:
            FragmentError: If fragment is not a Fragment, or its kind or
                payload is outside what this builder accepts
        """
        if not isinstance(fragment, Fragment):
            log.debug("%s rejected non-fragment %r", self.label, fragment)
            raise FragmentError(
                f"{self.label} expects Fragment values, got {type(fragment).__name__}",
                fragment,
                builder=self.label,
            )

        try:
            return self._lift_kind(fragment)
        except FragmentError as exc:
            if exc.builder is None:
                exc.builder = self.label
            if exc.kind is None:
                exc.kind = fragment.kind
            log.debug("%s rejected %s fragment: %s", self.label, fragment.kind, exc)
            raise

    def lift_block(self, accumulated: Any) -> A:
        """Accept the accumulator of a nested block. Subclasses may check its contents."""
        if not isinstance(accumulated, self.accumulator_type):
            raise FragmentError(
                f"{self.label} block must hold a {self.accumulator_type.__name__}, "
                f"got {type(accumulated).__name__}",
                accumulated,
            )
        return accumulated

    def _lift_kind(self, fragment: Fragment[Any]) -> A:
        kind = fragment.kind
        if kind == "item" or kind == "present":
            return self.lift_item(fragment.payload)
        if kind == "collection":
            return self.lift_collection(fragment.payload)
        if kind == "absent":
            return self.identity()
        if kind == "block":
            return self.lift_block(fragment.payload)

        raise FragmentError(f"Unknown fragment kind: {kind!r}", fragment)

    # Folding

    def block(self, fragments: Iterable[Fragment[Any]]) -> A:
        """Fold fragments into an accumulator without finalizing.

        Used for nested bodies (branches, loops) whose value becomes a
        Block fragment of the enclosing composition.
        """
        return self._fold(fragments, "block")

    def compose(self, fragments: Iterable[Fragment[Any]]) -> R:
        """Fold fragments in declaration order and finalize the result.

        Args:
            fragments: Any iterable of fragments, including a generator

        Returns:
            The finished container
        """
        return self.finalize(self._fold(fragments, "compose"))

    def build(self, *fragments: Fragment[Any]) -> R:
        """Variadic form of compose()."""
        return self.compose(fragments)

    def _fold(self, fragments: Iterable[Fragment[Any]], action: str) -> A:
        trace = self.trace
        begin_id: int | None = None
        if trace is not None:
            begin_id = trace.record(f"{action}_begin", info={"builder": self.label})
            if begin_id is not None:
                trace.push(begin_id)

        count = 0
        try:
            accumulated = self.identity()
            for fragment in fragments:
                accumulated = self.combine(accumulated, self.lift(fragment))
                if trace is not None:
                    trace.record("combine", info={"index": count, "kind": fragment.kind})
                count += 1

            if trace is not None:
                trace.record(
                    f"{action}_end",
                    info={"fragments": count, "size": len(accumulated)},  # type: ignore[arg-type]
                    parent_id=begin_id,
                )
        finally:
            if trace is not None and begin_id is not None:
                trace.pop()

        log.debug("%s %s folded %d fragments", self.label, action, count)
        return accumulated

    # Control flow lowering

    def either(self, condition: bool, first: Body, second: Body = ()) -> Fragment[Any]:
        """Exactly one branch's body, as a Block fragment (if/else)."""
        return Fragment.Block(self.block(_as_fragments(first if condition else second)))

    def when(self, condition: bool, body: Body) -> Fragment[Any]:
        """The body as a Block when condition holds, Absent otherwise (if without else)."""
        if condition:
            return Fragment.Block(self.block(_as_fragments(body)))
        return Fragment.Absent()

    def optional(self, value: T | None) -> Fragment[Any]:
        return Fragment.Optional(value)

    def each(self, iterable: Iterable[E], body: Callable[[E], Body]) -> Fragment[Any]:
        """One body per element, in iteration order, joined into a Block (for loop)."""
        parts = [self.block(_as_fragments(body(element))) for element in iterable]
        return Fragment.Block(self.join_iterations(parts))

    def join_iterations(self, parts: list[A]) -> A:
        """Join per-iteration loop values. Folds with combine by default."""
        accumulated = self.identity()
        for part in parts:
            accumulated = self.combine(accumulated, part)
        return accumulated


def _as_fragments(body: Body) -> Iterable[Fragment[Any]]:
    if isinstance(body, Fragment):
        return (body,)
    return body
