"""Line-joined text builder.

combine(acc, next) is ``next`` when ``acc`` is empty and ``acc + "\\n" + next``
otherwise. The first fragment sets the baseline without a leading separator;
every later fragment is newline-joined, including empty strings, which show
up as blank lines. An absent optional contributes ``""`` and therefore still
emits a blank line once the text is non-empty.
"""

from __future__ import annotations

from typing import Any

from builders.kernel.builder import Builder
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions
from builders.kernel.shapes import require_lines, require_str

SEPARATOR = "\n"


class TextBuilder(Builder[str, str, str]):
    """Build a single newline-joined string."""

    accumulator_type = str

    def identity(self) -> str:
        return ""

    def lift_item(self, value: str) -> str:
        return require_str(value, self.label)

    def lift_collection(self, values: Any) -> str:
        return SEPARATOR.join(require_lines(values, self.label))

    def combine(self, accumulated: str, next: str) -> str:
        if not accumulated:
            return next
        return accumulated + SEPARATOR + next

    def join_iterations(self, parts: list[str]) -> str:
        # Loop bodies are a plain join: an empty first iteration still
        # yields a separator, unlike combine().
        return SEPARATOR.join(parts)


def build_text(*fragments: Fragment[Any], options: ComposeOptions | None = None) -> str:
    """Compose fragments into newline-joined text.

    Example:
        >>> build_text(Fragment.Item("a"), Fragment.Item(""))
        'a\\n'
    """
    return TextBuilder(options).compose(fragments)
