"""Composition options."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

DocumentStyle = Literal["plain", "paragraphs", "sections"]


class ComposeOptions(BaseModel):
    """Options shared by every builder.

    Attributes:
        label: Name used in log records and trace events. Defaults to the
            builder class name.
        document_style: Finalize transform used by the document builder.
        trace: Create a private Trace when the builder is not given one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str | None = None
    document_style: DocumentStyle = "plain"
    trace: bool = False
