"""dsviz - pure operations over classic data structures, each returning a new state and a message."""

from .core.config import SessionConfig
from .core.errors import (
    DSVizError,
    DuplicateIdentityError,
    EmptyStructureError,
    ErrorKind,
    InvalidOperationError,
    NotFoundError,
    OutOfRangeError,
    ScenarioError,
)
from .core.session import Session, StructureKind
from .core.types import Message, MessageType, Number, Value
from .structures import bst, graph, heap, linkedlist, sequences, tree

__all__ = [
    "SessionConfig",
    "DSVizError",
    "DuplicateIdentityError",
    "EmptyStructureError",
    "ErrorKind",
    "InvalidOperationError",
    "NotFoundError",
    "OutOfRangeError",
    "ScenarioError",
    "Session",
    "StructureKind",
    "Message",
    "MessageType",
    "Number",
    "Value",
    "bst",
    "graph",
    "heap",
    "linkedlist",
    "sequences",
    "tree",
]
