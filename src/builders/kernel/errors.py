"""Error types for fragment composition."""

from __future__ import annotations


class FragmentError(TypeError):
    """A fragment outside the shapes a builder accepts.

    This is a contract violation of whoever produced the fragment, never a
    recoverable runtime condition.

    Attributes:
        raw_value: The offending value (a payload, a line, or the fragment itself)
        builder: Label of the builder that rejected it, once known
        kind: Kind of the fragment being lifted, once known
    """

    def __init__(
        self,
        message: str,
        raw_value: object,
        builder: str | None = None,
        kind: str | None = None,
    ) -> None:
        self.raw_value = raw_value
        self.builder = builder
        self.kind = kind
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"FragmentError({str(self)!r}, raw_value={self.raw_value!r}, "
            f"builder={self.builder!r}, kind={self.kind!r})"
        )
