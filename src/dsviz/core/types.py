"""Common type definitions for dsviz.

Defines the leaf value types and the ``Message`` every operation returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ErrorKind, error_for

# Core primitive types
Number = int | float
Value = int | float | str


class MessageType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Message:
    """Human-readable outcome of an operation.

    Attributes:
        text: Description shown to the user
        type: One of info, success, error, warning
        kind: Error classification, set only for error messages
    """

    text: str
    type: MessageType
    kind: ErrorKind | None = None

    @property
    def is_error(self) -> bool:
        return self.type is MessageType.ERROR

    def raise_for_error(self) -> None:
        """Raise the matching ``DSVizError`` subclass if this is an error message."""
        if self.is_error:
            raise error_for(self.kind or ErrorKind.INVALID_OPERATION, self.text)

    @classmethod
    def info(cls, text: str) -> Message:
        return cls(text, MessageType.INFO)

    @classmethod
    def success(cls, text: str) -> Message:
        return cls(text, MessageType.SUCCESS)

    @classmethod
    def warning(cls, text: str) -> Message:
        return cls(text, MessageType.WARNING)

    @classmethod
    def error(cls, kind: ErrorKind, text: str) -> Message:
        return cls(text, MessageType.ERROR, kind)


def format_value(value: Value) -> str:
    """Render a value the way it is shown in messages.

    Integral floats drop their fractional part, so 5.0 reads as 5.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
