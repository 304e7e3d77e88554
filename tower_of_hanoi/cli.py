"""
Command-line entry point.

    hanoi src spare dest disks [method]

method: 0 - recursive (default) / 1 - BFS iterative / 2 - interactive
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import ConfigurationError, Method, PuzzleConfig
from .interactive import InteractiveSession
from .logging_utils import LOG_LEVELS, get_level_from_string, setup_logger
from .moves import HanoiPuzzle
from .render import ConsoleRenderer
from .solvers import solve_bfs, solve_recursive

logger = logging.getLogger(__name__)

COPYRIGHT_NOTICE = """
Tower Of Hanoi Puzzle Solver.
(C) Marek Karcz 2023. All right reserved.
Free for personal and educational use."""

USAGE = """https://en.wikipedia.org/wiki/Tower_of_Hanoi
Usage:
   hanoi src spare dest disks [method]
Where:
   src, spare, dest - tower# (1..3), must be 3 different numbers,
   disks            - number of disks (must be greater than 0),
   method           - 0: recursive (default) / 1: BFS iterative /
                      2: interactive."""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises ConfigurationError instead of exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="hanoi",
        description="Tower of Hanoi puzzle solver.",
    )
    parser.add_argument("src", type=int, help="Source peg (1..3)")
    parser.add_argument("spare", type=int, help="Spare peg (1..3)")
    parser.add_argument("dest", type=int, help="Destination peg (1..3)")
    parser.add_argument("disks", type=int, help="Number of disks (must be greater than 0)")
    parser.add_argument(
        "method",
        type=int,
        nargs="?",
        default=int(Method.RECURSIVE),
        help="0: recursive (default) / 1: BFS iterative / 2: interactive",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=sorted(LOG_LEVELS),
        help="Diagnostics level (written to stderr)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the states-checked counter during BFS",
    )
    return parser


def print_usage(renderer: ConsoleRenderer) -> None:
    renderer.write(COPYRIGHT_NOTICE)
    renderer.write(USAGE)


def print_summary(puzzle: HanoiPuzzle, renderer: ConsoleRenderer) -> None:
    noun = "moves" if puzzle.moves > 1 else "move"
    renderer.write(f"Solved in {puzzle.moves} {noun}!")
    if puzzle.moves > puzzle.optimal_moves:
        renderer.write("NOTE:")
        renderer.write("Solution is suboptimal.")
        renderer.write(f"Optimal solution for this configuration - {puzzle.optimal_moves} moves.")


def run(
    config: PuzzleConfig,
    renderer: Optional[ConsoleRenderer] = None,
    read_command: Optional[Callable[[str], str]] = None,
) -> int:
    """Play one puzzle with the configured method. Returns the process exit status."""
    config.validate()
    renderer = renderer if renderer is not None else ConsoleRenderer()
    puzzle = HanoiPuzzle.from_config(config, renderer=renderer)

    renderer.write(COPYRIGHT_NOTICE)
    renderer.write(f"Goal - move the disks from peg {config.source} to peg {config.dest}.")
    renderer.write(f"Use peg {config.spare} as spare.")
    renderer.write("You cannot put larger disk on top of the smaller one.")
    puzzle.show()

    if config.method == Method.RECURSIVE:
        solve_recursive(puzzle)
    elif config.method == Method.BFS:
        solve_bfs(puzzle, show_progress=config.show_progress)
    else:
        InteractiveSession(puzzle, read_command=read_command or input).run()

    if not puzzle.is_solved():
        logger.error("Puzzle not solved after method %s, final state %s", config.method.name, puzzle.state)
        print("Not solved.", file=sys.stderr)
        return 1

    print_summary(puzzle, renderer)
    return 0


def main(argv: Optional[List[str]] = None, read_command: Optional[Callable[[str], str]] = None) -> int:
    renderer = ConsoleRenderer()
    try:
        args = build_parser().parse_args(argv)
    except ConfigurationError as e:
        logger.error("%s", e)
        print_usage(renderer)
        return 1
    setup_logger("tower_of_hanoi", get_level_from_string(args.log_level))

    config = PuzzleConfig(
        source=args.src,
        spare=args.spare,
        dest=args.dest,
        num_disks=args.disks,
        method=args.method,
        show_progress=not args.no_progress,
        log_level=args.log_level,
    )
    try:
        config.validate()
    except ConfigurationError as e:
        logger.error("%s", e)
        print_usage(renderer)
        return 1

    return run(config, renderer=renderer, read_command=read_command)

