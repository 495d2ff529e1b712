"""Shared types, errors, configuration and the session holder."""

from .config import SessionConfig, load_config
from .errors import ErrorKind
from .session import Session, StructureKind
from .types import Message, MessageType

__all__ = ["SessionConfig", "load_config", "ErrorKind", "Session", "StructureKind", "Message", "MessageType"]
