"""Configuration for dsviz sessions.

Defines the tunable parameters of the caller-side session holder and
loads them from TOML.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import tomllib  # Python 3.11+


@dataclass
class SessionConfig:
    """Configuration parameters for a ``Session``.

    Attributes:
        max_log_messages: Keep at most this many messages (oldest dropped), None for no limit
        default_heap_mode: Ordering of a fresh heap, "min" or "max"
        canvas_width: Width of the area graph nodes are placed in
        canvas_height: Height of the area graph nodes are placed in
        canvas_padding: Minimum distance between a placed node and the canvas edge
        layout_seed: Seed for graph node placement, None for a random seed
    """

    max_log_messages: int | None = None
    default_heap_mode: str = "min"
    canvas_width: float = 500.0
    canvas_height: float = 300.0
    canvas_padding: float = 50.0
    layout_seed: int | None = None

    def __post_init__(self) -> None:
        if self.default_heap_mode not in ("min", "max"):
            raise ValueError(f"default_heap_mode must be 'min' or 'max', got {self.default_heap_mode!r}")
        if self.max_log_messages is not None and self.max_log_messages < 1:
            raise ValueError("max_log_messages must be positive or None")
        if 2 * self.canvas_padding > min(self.canvas_width, self.canvas_height):
            raise ValueError("canvas_padding leaves no room to place nodes")

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "SessionConfig":
        known = {f.name for f in fields(SessionConfig)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return SessionConfig(**d)


def load_config(path: Path) -> SessionConfig:
    """Load a ``SessionConfig`` from the ``[session]`` table of a TOML file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    return SessionConfig.from_dict(data.get("session", {}))
