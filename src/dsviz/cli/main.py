# Minimal CLI using argparse that replays a TOML scenario and prints the transcript.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dsviz.core.errors import ScenarioError
from dsviz.core.session import StructureKind
from dsviz.render.html_renderer import render_html
from dsviz.render.text_renderer import describe_state
from dsviz.scenario import load_scenario, run_scenario


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dsviz", description="Replay data structure operations from a TOML scenario"
    )
    p.add_argument("scenario", type=Path, help="Input TOML scenario")
    p.add_argument("--html", type=Path, help="Write an HTML transcript to this file")
    p.add_argument(
        "--all",
        action="store_true",
        help="Print every structure, not only those the scenario touched",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        scenario = load_scenario(args.scenario)
        session = run_scenario(scenario)
    except ScenarioError as e:
        print(f"Error loading scenario: {e}")
        return 2

    for message in session.log:
        print(f"[{message.type.value}] {message.text}")

    touched = {step.structure for step in scenario.steps}
    for kind in StructureKind:
        if args.all or kind in touched:
            print(f"\n{kind.value}:")
            print(describe_state(kind, session.state(kind)))

    if args.html:
        args.html.write_text(render_html(session, title=args.scenario.stem), encoding="utf-8")
        print(f"\nWrote HTML to {args.html}")

    return 1 if any(m.is_error for m in session.log) else 0


if __name__ == "__main__":
    raise SystemExit(main())
