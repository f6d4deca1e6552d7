#!/usr/bin/env python3
"""
Snake Cherry Puzzle Solver

Reads a puzzle grid and prints the shortest placement and slide sequence
that lets the snake eat every cherry.
"""

import argparse
import sys
from typing import List, Optional

from src.bfs_solver.config import SolverConfig
from src.bfs_solver.observer import (CompositeObserver, LoggingObserver,
                                     ProgressObserver, SearchObserver)
from src.bfs_solver.path import replay_states
from src.bfs_solver.solver import BFSSolver
from src.game.board import Board, PuzzleFormatError
from src.game.visualization import HeadlessVisualizer, format_solution
from src.util.logger import logger, set_component_level


def build_observer(verbose: bool, progress: bool) -> SearchObserver:
    """Build the search observer selected by the command line flags."""
    observers: List[SearchObserver] = []
    if verbose:
        set_component_level("bfs_solver", "DEBUG")
        set_component_level("cli", "DEBUG")
        observers.append(LoggingObserver())
    if progress:
        observers.append(ProgressObserver())

    if len(observers) == 1:
        return observers[0]
    return CompositeObserver(observers)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Snake Cherry Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Puzzle format:
  One grid row per line. 'r' is a rock, any other character is a cherry.

Examples:
  python main.py puzzle.txt               # Solve a puzzle file
  python main.py < puzzle.txt             # Read the puzzle from stdin
  python main.py puzzle.txt --show        # Print the board after every move
  python main.py puzzle.txt --exhaustive  # Shortest over all start positions
        """,
    )

    parser.add_argument(
        "puzzle",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="Puzzle file (defaults to stdin)",
    )
    parser.add_argument(
        "--max-nodes", type=int, default=None, help="Stop after exploring N boards"
    )
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Stop after MS milliseconds"
    )
    parser.add_argument(
        "--depth-cap", type=int, default=None, help="Ignore solutions longer than N"
    )
    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="Search every start position and keep the shortest solution",
    )
    parser.add_argument(
        "--show", action="store_true", help="Print the board after every move"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search progress to stderr"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar on stderr"
    )

    args = parser.parse_args(argv)

    with args.puzzle as puzzle_file:
        text = puzzle_file.read()

    cli_logger = logger.bind(component="cli")

    try:
        board = Board.parse(text)
    except PuzzleFormatError as e:
        cli_logger.error(f"Rejected puzzle: {e}")
        parser.error(str(e))

    cli_logger.debug(
        f"Parsed {board.width}x{board.height} board with "
        f"{board.cherry_count()} cherries"
    )

    config = SolverConfig(
        max_nodes=args.max_nodes,
        timeout_ms=args.timeout_ms,
        depth_cap=args.depth_cap,
        exhaustive=args.exhaustive,
    )
    solver = BFSSolver(config, observer=build_observer(args.verbose, args.progress))
    result = solver.solve(board)
    cli_logger.info(
        f"Explored {result.nodes_explored} boards from {result.runs_attempted} "
        f"start positions in {result.time_taken_ms:.1f}ms"
    )

    print(format_solution(result.start, result.moves, result.budget_exhausted))

    if not result.success:
        return 1

    if args.show:
        boards = replay_states(board, result.start, result.moves)
        print()
        HeadlessVisualizer(boards, result.moves).print_boards()

    return 0


if __name__ == "__main__":
    sys.exit(main())
