import logging

from .document import (
    DocumentBuilder,
    build_document,
    build_markdown,
    build_paragraphs,
    build_sections,
    finalize_paragraphs,
    finalize_plain,
    finalize_sections,
)
from .kernel import (
    Builder,
    ComposeOptions,
    DocumentStyle,
    Fragment,
    FragmentError,
    Trace,
    TraceEvent,
)
from .mapping import KeyValuePair, MappingBuilder, build_dict
from .sequence import SequenceBuilder, build_list
from .sets import SetBuilder, build_set
from .text import TextBuilder, build_text

logging.getLogger("builders").addHandler(logging.NullHandler())

__all__ = [
    # Kernel
    "Fragment",
    "Builder",
    "FragmentError",
    "ComposeOptions",
    "DocumentStyle",
    # Tracing
    "Trace",
    "TraceEvent",
    # Builders
    "SequenceBuilder",
    "SetBuilder",
    "MappingBuilder",
    "KeyValuePair",
    "TextBuilder",
    "DocumentBuilder",
    # Compose entry points
    "build_list",
    "build_set",
    "build_dict",
    "build_text",
    "build_document",
    "build_markdown",
    "build_paragraphs",
    "build_sections",
    # Document finalizers
    "finalize_plain",
    "finalize_paragraphs",
    "finalize_sections",
]
