"""
structdiff.errors — Exception hierarchy.

Two failure classes, kept strictly apart:

    ParseError              the caller handed us something that is not JSON
    InternalInvariantError  a pointer we enumerated from a document could
                            not be resolved in that same document

The first is ordinary input validation.  The second is a bug in the
enumerator/resolver pair and is never caught inside the library.
"""

from typing import Optional


class StructDiffError(Exception):
    """Base class for every error raised by structdiff."""


class ParseError(StructDiffError, ValueError):
    """
    Input is not well-formed JSON (malformed, truncated, or empty).

    `side` names the input that failed when the error comes out of a
    two-document operation: "a", "b", or None for a single document.
    """

    def __init__(self, message: str, side: Optional[str] = None):
        super().__init__(message)
        self.side = side

    def __str__(self) -> str:
        msg = super().__str__()
        if self.side is None:
            return msg
        return f"document {self.side}: {msg}"


class InternalInvariantError(StructDiffError, AssertionError):
    """An enumerated pointer could not be addressed in its own document."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        detail = f"pointer {path!r} enumerated but not resolvable"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)
