"""Scenario replay.

A scenario is a TOML file with an optional ``[session]`` table and a list
of ``[[steps]]``:

    [[steps]]
    structure = "stack"
    op = "push"
    args = ["1"]

Text arguments are parsed the way a form field would be before the
operation is called. Numbers and booleans in the TOML pass through as is,
except that indices must be integers and edge direction flags booleans.
"""

from __future__ import annotations

import logging
import tomllib  # Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .core.config import SessionConfig
from .core.errors import ErrorKind, ScenarioError
from .core.session import STRUCTURES, Session, StructureKind
from .core.types import Message, Value

logger = logging.getLogger(__name__)

NUMERIC_STRUCTURES = (StructureKind.BST, StructureKind.HEAP)

# (structure, op) -> positions of arguments that are indices
INDEX_ARGS: Dict[Tuple[StructureKind, str], Tuple[int, ...]] = {
    (StructureKind.ARRAY, "insert_at"): (1,),
    (StructureKind.ARRAY, "remove_at"): (0,),
    (StructureKind.ARRAY, "view_at"): (0,),
}

# (structure, op) -> positions of arguments that are true/false flags
FLAG_ARGS: Dict[Tuple[StructureKind, str], Tuple[int, ...]] = {
    (StructureKind.GRAPH, "add_edge"): (2,),
}

FLAG_TEXT = {"true": True, "false": False}


@dataclass
class Step:
    structure: StructureKind
    op: str
    args: List[Any] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Step":
        try:
            structure = StructureKind(d["structure"])
            op = d["op"]
        except KeyError as e:
            raise ScenarioError(f"Step is missing required field: {e.args[0]}") from e
        except ValueError as e:
            raise ScenarioError(f"Unknown structure: {d['structure']!r}") from e

        if op != "reset" and op not in STRUCTURES[structure].operations:
            raise ScenarioError(f"Unknown operation {op!r} for {structure.value}")
        args = d.get("args", []) or []
        if not isinstance(args, list):
            raise ScenarioError(f"args of {structure.value}.{op} must be an array")
        return Step(structure=structure, op=op, args=args)


@dataclass
class Scenario:
    config: SessionConfig = field(default_factory=SessionConfig)
    steps: List[Step] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Scenario":
        try:
            config = SessionConfig.from_dict(d.get("session", {}))
        except (TypeError, ValueError) as e:
            raise ScenarioError(f"Invalid session config: {e}") from e
        steps = [Step.from_dict(s) for s in d.get("steps", []) or []]
        return Scenario(config=config, steps=steps)


def load_scenario(path: Path) -> Scenario:
    if not path.exists():
        raise ScenarioError(f"Scenario file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ScenarioError(f"Invalid TOML in {path}: {e}") from e
    return Scenario.from_dict(data)


def parse_value(text: str) -> Value:
    """
    Turns form-field text into a value.
    Integer text becomes an int, other numeric text a float,
    anything else stays a stripped string.
    Digit separators such as "1_000" are not numbers.
    """
    text = text.strip()
    if "_" in text:
        return text
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    # nan and inf stay text
    if number != number or number in (float("inf"), float("-inf")):
        return text
    return int(number) if number.is_integer() else number


def prepare_args(step: Step) -> Tuple[Optional[List[Any]], Optional[Message]]:
    """
    Parses the text arguments of a step.
    Returns (args, None) on success, or (None, error message) when an
    argument is rejected before reaching the core.
    """
    index_positions = INDEX_ARGS.get((step.structure, step.op), ())
    flag_positions = FLAG_ARGS.get((step.structure, step.op), ())
    prepared: List[Any] = []
    for position, arg in enumerate(step.args):
        if position in flag_positions:
            flag = FLAG_TEXT.get(arg.strip().lower()) if isinstance(arg, str) else arg
            if not isinstance(flag, bool):
                return None, Message.error(ErrorKind.INVALID_OPERATION, "Please choose true or false.")
            prepared.append(flag)
            continue
        if not isinstance(arg, str):
            # bool is an int subclass but never an index
            if position in index_positions and (isinstance(arg, bool) or not isinstance(arg, int)):
                return None, Message.error(ErrorKind.INVALID_OPERATION, "Please enter a valid index.")
            prepared.append(arg)
            continue
        if not arg.strip():
            return None, Message.error(ErrorKind.INVALID_OPERATION, "Please enter a value.")
        if step.structure is StructureKind.GRAPH:
            prepared.append(arg.strip())
            continue

        value = parse_value(arg)
        if position in index_positions and not isinstance(value, int):
            return None, Message.error(ErrorKind.INVALID_OPERATION, "Please enter a valid index.")
        if step.structure in NUMERIC_STRUCTURES and isinstance(value, str):
            return None, Message.error(ErrorKind.INVALID_OPERATION, "Please enter a valid numeric value.")
        prepared.append(value)
    return prepared, None


def run_scenario(scenario: Scenario, session: Optional[Session] = None) -> Session:
    """Replays every step against a session and returns it."""
    session = session or Session(scenario.config)
    logger.info(f"Replaying {len(scenario.steps)} steps")
    for step in scenario.steps:
        if step.op == "reset":
            session.reset(step.structure)
            continue
        args, rejection = prepare_args(step)
        if rejection is not None:
            session.record(rejection)
            continue
        try:
            session.apply(step.structure, step.op, *args)
        except TypeError as e:
            raise ScenarioError(f"Bad arguments for {step.structure.value}.{step.op}: {e}") from e
    return session
