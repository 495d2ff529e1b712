"""Error kinds and exception hierarchy for dsviz.

Operations never raise these for user-level failures; they return an error
``Message`` tagged with an ``ErrorKind``. Callers that prefer exceptions can
turn such a message into one with ``Message.raise_for_error()``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed operation."""

    OUT_OF_RANGE = "out_of_range"
    EMPTY_STRUCTURE = "empty_structure"
    NOT_FOUND = "not_found"
    DUPLICATE_IDENTITY = "duplicate_identity"
    INVALID_OPERATION = "invalid_operation"


class DSVizError(Exception):
    """Base exception for all dsviz errors."""

    kind: ErrorKind | None = None


class OutOfRangeError(DSVizError):
    """Raised when an index lies outside the valid bound for the structure."""

    kind = ErrorKind.OUT_OF_RANGE


class EmptyStructureError(DSVizError):
    """Raised when an operation needs an element but the structure is empty."""

    kind = ErrorKind.EMPTY_STRUCTURE


class NotFoundError(DSVizError):
    """Raised when a value, parent or id does not exist."""

    kind = ErrorKind.NOT_FOUND


class DuplicateIdentityError(DSVizError):
    """Raised when adding something that already exists."""

    kind = ErrorKind.DUPLICATE_IDENTITY


class InvalidOperationError(DSVizError):
    """Raised when the operation is not legal in the current state."""

    kind = ErrorKind.INVALID_OPERATION


class ScenarioError(DSVizError):
    """Raised when a scenario file is missing, malformed or names unknown steps."""

    pass


_ERRORS_BY_KIND: dict[ErrorKind, type[DSVizError]] = {
    cls.kind: cls
    for cls in (
        OutOfRangeError,
        EmptyStructureError,
        NotFoundError,
        DuplicateIdentityError,
        InvalidOperationError,
    )
}


def error_for(kind: ErrorKind, text: str) -> DSVizError:
    """Build the exception matching ``kind``."""
    return _ERRORS_BY_KIND[kind](text)
