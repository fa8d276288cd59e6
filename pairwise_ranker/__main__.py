"""
CLI entry point for the pairwise ranker.

Parses arguments, wires the session controller and runs an interactive
comparison loop in the terminal.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Callable, Sequence
from typing import TextIO, TypedDict

from prettytable import PrettyTable

from .controller import RANDOM_SOURCES, SELECTORS, Key, SessionConfig, SessionController
from .exceptions import ConfigurationError
from .logging_config import get_logger, setup_logging

HELP_TEXT = """Commands:
  add NAME     add an item
  1 / Enter    the first item wins
  2            the second item wins
  win NAME     change the first item of the current matchup
  lose NAME    change the second item of the current matchup
  next         skip to a new random matchup
  k+ / k-      raise or lower the K-factor
  ratings      show the current ranking
  history      show all recorded comparisons, newest first
  help         show this help
  quit         leave"""


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    items: list[str]
    k_factor: float
    seed: int | None
    selector: str
    rng: str
    debug: bool
    log_level: str
    log_file: str | None


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pairwise Ranker - rank items by comparing them two at a time"
    )

    _ = parser.add_argument(
        "--item",
        dest="items",
        action="append",
        default=[],
        help="Item to start with (repeatable)"
    )
    _ = parser.add_argument(
        "--k-factor",
        type=float,
        default=40.0,
        help="Starting K-factor (default: 40)"
    )
    _ = parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible matchups"
    )
    _ = parser.add_argument(
        "--selector",
        choices=SELECTORS,
        default="random",
        help="How the next matchup is picked (default: random)"
    )
    _ = parser.add_argument(
        "--rng",
        choices=RANDOM_SOURCES,
        default="stdlib",
        help="Random number generator backing the selector (default: stdlib)"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )
    _ = parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        items=ns.items,
        k_factor=ns.k_factor,
        seed=ns.seed,
        selector=ns.selector,
        rng=ns.rng,
        debug=ns.debug,
        log_level=ns.log_level,
        log_file=ns.log_file,
    )


def build_controller(args: CLIArgs) -> SessionController:
    """Wire the session controller and seed it with the starting items."""
    config = SessionConfig(
        k_factor=args["k_factor"],
        seed=args["seed"],
        selector=args["selector"],
        rng=args["rng"],
    )
    controller = SessionController(config)
    for name in args["items"]:
        controller.add_item(name)
    return controller


def format_ratings(controller: SessionController) -> str:
    """Render the ranking as a table, ratings rounded for display."""
    view = controller.view()
    table = PrettyTable()
    table.field_names = ["Rank", "Item", "Rating", "Compared", "Wins", "Win%"]
    table.align["Rank"] = "r"
    table.align["Item"] = "l"
    table.align["Rating"] = "r"
    table.align["Compared"] = "r"
    table.align["Wins"] = "r"
    table.align["Win%"] = "r"

    for rank, (item, rating) in enumerate(view["ratings"], 1):
        stats = view["statistics"][item]
        table.add_row([
            rank,
            item,
            round(rating),
            stats["comparisons"],
            stats["wins"],
            f"{stats['win_percentage']:.1f}%",
        ])
    return table.get_string()


def format_history(controller: SessionController) -> str:
    """Render the comparison log, newest first."""
    history = controller.state.history
    if not history:
        return "No comparisons yet."
    total = len(history)
    return "\n".join(
        f"{total - i:>4}. {matchup.winning} beat {matchup.losing}"
        for i, matchup in enumerate(history)
    )


def format_prompt(controller: SessionController) -> str:
    """Describe the pending matchup, if any."""
    view = controller.view()
    candidate = view["candidate"]
    if candidate is None:
        return f"Add at least two items to start comparing (k={view['k_factor']:g})."
    expected = view["candidate_expected_score"] or 0.0
    return (
        f"[1] {candidate.winning}  vs  [2] {candidate.losing}"
        f"  (k={view['k_factor']:g}, p1={expected:.0%})"
    )


def run_command(controller: SessionController, line: str, out: TextIO) -> bool:
    """
    Execute one line of user input.

    Returns:
        False when the user asked to quit, True otherwise
    """
    command, _, argument = line.strip().partition(" ")
    argument = argument.strip()

    actions: dict[str, Callable[[], object]] = {
        "": lambda: controller.handle_key(Key.SUBMIT, text_focused=False),
        "1": lambda: controller.handle_key(Key.CONFIRM_FIRST, text_focused=False),
        "2": lambda: controller.handle_key(Key.CONFIRM_SECOND, text_focused=False),
        "add": lambda: controller.handle_key(Key.SUBMIT, text_focused=True, draft=argument),
        "win": lambda: controller.set_winning(argument),
        "lose": lambda: controller.set_losing(argument),
        "next": controller.request_random_matchup,
        "k+": controller.increase_k_factor,
        "k-": controller.decrease_k_factor,
    }

    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(HELP_TEXT, file=out)
    elif command == "ratings":
        print(format_ratings(controller), file=out)
    elif command == "history":
        print(format_history(controller), file=out)
    elif command in actions:
        _ = actions[command]()
    else:
        print(f"Unknown command: {command!r} (type 'help')", file=out)
    return True


def interactive_loop(controller: SessionController, stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Read commands until EOF or quit."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(format_prompt(controller), file=out)
    for line in stdin:
        if not run_command(controller, line, out):
            break
        print(format_prompt(controller), file=out)


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))
    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    try:
        controller = build_controller(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    print("Pairwise Ranker")
    print("=" * 60)
    print(HELP_TEXT)
    print("=" * 60)

    try:
        interactive_loop(controller)
    except KeyboardInterrupt:
        logger.warning("Session interrupted by user")
        print()

    print("\nFinal Rankings:")
    print(format_ratings(controller))


if __name__ == "__main__":
    main()
