# cli/main.py

"""
Entry point for the participation roster CLI.

Loads the roster from a tab-delimited seed file, builds a `RosterSession`, and runs the
render/read loop until the operator quits or input ends. Updated statistics live only for the
lifetime of the process.
"""

import argparse
import logging
import random

import cli.menu_helpers as helpers
from cli.key_parser import parse_line
from cli.menu_helpers import MenuSignal
from cli.roster_view import render
from core.logging_config import configure_logging
from core.roster_session import RosterSession
from models.roster import Roster

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="participation-roster",
        description="Call on students in a random order biased toward low participation.",
    )
    parser.add_argument(
        "roster_path",
        help="tab-delimited roster file with name, email, participation_score, deferrals and absent columns",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the shuffle, for reproducible call orders",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (overrides ROSTER_LOG_LEVEL)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="do not clear the screen between renders",
    )
    return parser


def run_loop(session: RosterSession, clear: bool = True) -> None:
    """
    Render/read loop.

    Raises:
        RuntimeError: If the input prompt returns an unexpected response.

    Notes:
        - Each event is applied to completion before the next line is read.
        - `RosterConsistencyError` is never caught here; it aborts the program.
    """
    while True:
        helpers.clear_screen(clear)
        print(render(session))

        line = helpers.prompt_user_input(f"[{session.mode.value}]")

        if line is MenuSignal.EXIT:
            return

        elif isinstance(line, str):
            for event in parse_line(line, session.mode):
                if not session.dispatch(event):
                    return

        else:
            raise RuntimeError(f"Unexpected input received: {line}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    roster_response = Roster.load(args.roster_path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return 1

    roster = roster_response.data["roster"]
    rng = random.Random(args.seed) if args.seed is not None else None

    session = RosterSession(roster, rng=rng)
    logger.info("Starting roster session with %d students", len(roster))

    run_loop(session, clear=not args.no_clear)

    helpers.exit_banner()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
