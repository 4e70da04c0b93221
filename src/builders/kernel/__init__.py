"""Kernel layer - the fragment type and the combine/finalize protocol."""

from builders.kernel.builder import Builder
from builders.kernel.errors import FragmentError
from builders.kernel.fragment import Fragment, FragmentKind
from builders.kernel.options import ComposeOptions, DocumentStyle
from builders.kernel.trace import Trace, TraceEvent

__all__ = [
    "Builder",
    "Fragment",
    "FragmentKind",
    "FragmentError",
    # Options
    "ComposeOptions",
    "DocumentStyle",
    # Tracing
    "Trace",
    "TraceEvent",
]
