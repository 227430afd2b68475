"""Application-layer CLI adapter."""

from __future__ import annotations

import argparse
import asyncio
import logging

from ..config import load_deck, parse_flag_assignment
from ..errors import DeckError
from ..presets import make_default_launch_deck
from ..selfcheck import run_selfcheck
from ..services import build_default_launch_service
from .driver import drive_terminal
from .render import APP_TEXT

EXIT_FAILED = 1
EXIT_HALTED = 3

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(max(verbosity, 0), len(_LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser."""
    parser = argparse.ArgumentParser(
        prog="appinit", description="appinit launch-step sequencer"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log pipeline progress (-v info, -vv debug).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a YAML launch deck")
    run_p.add_argument(
        "deck",
        type=str,
        nargs="?",
        default=None,
        help="Path to deck YAML (built-in default deck when omitted)",
    )
    run_p.add_argument(
        "--flag",
        action="append",
        default=[],
        metavar="NAME=BOOL",
        help="Override a launch flag; may be repeated.",
    )
    run_p.add_argument(
        "--auto-continue",
        action="store_true",
        help="Resume call-to-action screens without waiting for Enter.",
    )

    selfcheck_p = sub.add_parser(
        "selfcheck", help="Run dependency and smoke self-check"
    )
    selfcheck_p.add_argument(
        "--no-smoke",
        action="store_true",
        help="Run import checks only (skip smoke launch).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(int(args.verbose))

    if args.command == "run":
        try:
            overrides = dict(parse_flag_assignment(text) for text in args.flag)
            payload = load_deck(args.deck) if args.deck else make_default_launch_deck()
            session = build_default_launch_service().prepare(payload, flag_overrides=overrides)
        except DeckError as exc:
            parser.exit(2, f"Error: {exc}\n")

        result = asyncio.run(drive_terminal(session, auto_continue=bool(args.auto_continue)))
        summary = f"ran={len(result.ran)}, skipped={len(result.skipped)}"
        if result.outcome == "failed":
            print(f"Launch failed: {result.error}")
            return EXIT_FAILED
        if result.outcome == "halted":
            print(f"Launch halted. {summary}")
            return EXIT_HALTED
        print(f"Done. {summary}")
        print(APP_TEXT)
        return 0

    if args.command == "selfcheck":
        report = run_selfcheck(smoke=not bool(args.no_smoke))
        print(report.to_text())
        return 0 if report.ok else 1

    parser.exit(2, "Unknown command\n")
    return 2
