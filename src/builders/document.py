"""Document builder - lines of text with a pluggable finalize transform.

Fragments accumulate into an ordered list of lines (plain concatenation).
The finished document is produced by one of three transforms:

- plain: every line joined with a single newline
- paragraphs: empty lines dropped, the rest joined with a blank line
- sections: runs of non-empty lines joined with a newline, runs separated
  by a blank line; empty lines only terminate a run
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from builders.kernel.builder import Builder
from builders.kernel.fragment import Fragment
from builders.kernel.options import ComposeOptions, DocumentStyle
from builders.kernel.shapes import require_iterable, require_lines, require_str
from builders.kernel.trace import Trace

LINE_BREAK = "\n"
PARAGRAPH_BREAK = "\n\n"


def finalize_plain(lines: list[str]) -> str:
    return LINE_BREAK.join(lines)


def finalize_paragraphs(lines: list[str]) -> str:
    """Each non-empty line becomes its own paragraph.

    Multi-line paragraphs are not regrouped; use finalize_sections for that.
    """
    return PARAGRAPH_BREAK.join(line for line in lines if line)


def finalize_sections(lines: list[str]) -> str:
    """Group consecutive non-empty lines into sections.

    Example:
        >>> finalize_sections(["# Title", "intro", "", "body"])
        '# Title\\nintro\\n\\nbody'
    """
    sections: list[str] = []
    current: list[str] = []

    for line in lines:
        if line:
            current.append(line)
        elif current:
            sections.append(LINE_BREAK.join(current))
            current = []

    if current:
        sections.append(LINE_BREAK.join(current))

    return PARAGRAPH_BREAK.join(sections)


FINALIZERS: dict[str, Callable[[list[str]], str]] = {
    "plain": finalize_plain,
    "paragraphs": finalize_paragraphs,
    "sections": finalize_sections,
}


class DocumentBuilder(Builder[list[str], str, str]):
    """Build a text document from lines.

    The finalize style comes from the explicit ``style`` argument, falling
    back to ``options.document_style``.
    """

    accumulator_type = list

    def __init__(
        self,
        style: DocumentStyle | None = None,
        options: ComposeOptions | None = None,
        trace: Trace | None = None,
    ) -> None:
        super().__init__(options, trace)
        if style is not None:
            # Rebuilt rather than model_copy(update=...) so the style is validated.
            self.options = ComposeOptions(**{**self.options.model_dump(), "document_style": style})
        self.style: DocumentStyle = self.options.document_style

    def identity(self) -> list[str]:
        return []

    def lift_item(self, value: str) -> list[str]:
        return [require_str(value, self.label)]

    def lift_collection(self, values: Any) -> list[str]:
        """Lines, or groups of lines flattened in order.

        Mixing lines and groups, or nesting deeper than one level, is rejected.
        """
        entries = list(require_iterable(values, self.label))
        if not entries or any(isinstance(entry, str) for entry in entries):
            return require_lines(entries, self.label)

        lines: list[str] = []
        for group in entries:
            lines.extend(require_lines(group, self.label))
        return lines

    def lift_block(self, accumulated: Any) -> list[str]:
        return require_lines(super().lift_block(accumulated), self.label)

    def combine(self, accumulated: list[str], next: list[str]) -> list[str]:
        return [*accumulated, *next]

    def finalize(self, accumulated: list[str]) -> str:
        return FINALIZERS[self.style](accumulated)

    def lines(self, *fragments: Fragment[Any]) -> list[str]:
        """The accumulated lines, without any finalize transform."""
        return self.block(fragments)


def build_document(
    *fragments: Fragment[Any],
    style: DocumentStyle | None = None,
    options: ComposeOptions | None = None,
) -> str:
    """Compose fragments into a finished document."""
    return DocumentBuilder(style, options).compose(fragments)


def build_markdown(*fragments: Fragment[Any]) -> str:
    return build_document(*fragments, style="plain")


def build_paragraphs(*fragments: Fragment[Any]) -> str:
    return build_document(*fragments, style="paragraphs")


def build_sections(*fragments: Fragment[Any]) -> str:
    return build_document(*fragments, style="sections")
