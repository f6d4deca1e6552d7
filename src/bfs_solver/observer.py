"""
Search observers: hooks for watching the BFS solver without changing it.
"""

from typing import List, Optional, Sequence

from tqdm import tqdm

from ..game.board import Board, Position
from ..util.logger import logger


class SearchObserver:
    """Receives search events. Every hook is a no-op by default."""

    def on_search_started(self, starts: Sequence[Position]) -> None:
        pass

    def on_run_started(self, start: Position) -> None:
        pass

    def on_node_expanded(self, board: Board, depth: int, states_recorded: int) -> None:
        pass

    def on_goal_found(self, board: Board, depth: int, states_recorded: int) -> None:
        pass

    def on_run_exhausted(self, start: Position, states_recorded: int) -> None:
        pass

    def on_budget_exhausted(self, reason: str) -> None:
        pass

    def on_search_finished(self) -> None:
        pass


class LoggingObserver(SearchObserver):
    """Narrates the search through loguru."""

    def __init__(self):
        self.logger = logger.bind(component="bfs_solver")

    def on_search_started(self, starts: Sequence[Position]) -> None:
        self.logger.info(f"Searching from {len(starts)} starting positions")

    def on_run_started(self, start: Position) -> None:
        self.logger = logger.bind(component="bfs_solver", run=str(start))
        self.logger.info(f"Starting from {start}")

    def on_node_expanded(self, board: Board, depth: int, states_recorded: int) -> None:
        self.logger.debug(
            f"Expanding depth {depth} with {board.cherry_count()} cherries left, "
            f"{states_recorded} states recorded"
        )

    def on_goal_found(self, board: Board, depth: int, states_recorded: int) -> None:
        self.logger.info(
            f"Goal found after {depth} moves, {states_recorded} states recorded"
        )

    def on_run_exhausted(self, start: Position, states_recorded: int) -> None:
        self.logger.info(
            f"No solution from {start} after {states_recorded} states"
        )

    def on_budget_exhausted(self, reason: str) -> None:
        self.logger.warning(f"Search budget exhausted: {reason}")

    def on_search_finished(self) -> None:
        self.logger = logger.bind(component="bfs_solver")


class ProgressObserver(SearchObserver):
    """Shows a tqdm bar that ticks once per starting position."""

    def __init__(self, **tqdm_kwargs):
        self.tqdm_kwargs = tqdm_kwargs
        self.pbar: Optional[tqdm] = None

    def on_search_started(self, starts: Sequence[Position]) -> None:
        self.pbar = tqdm(
            total=len(starts),
            desc="Start positions",
            unit="start",
            leave=False,
            ncols=100,
            **self.tqdm_kwargs,
        )

    def on_run_started(self, start: Position) -> None:
        if self.pbar is not None:
            self.pbar.set_postfix(start=str(start))

    def on_goal_found(self, board: Board, depth: int, states_recorded: int) -> None:
        if self.pbar is not None:
            self.pbar.update(1)

    def on_run_exhausted(self, start: Position, states_recorded: int) -> None:
        if self.pbar is not None:
            self.pbar.update(1)

    def on_search_finished(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None


class CompositeObserver(SearchObserver):
    """Forwards every event to each wrapped observer in order."""

    def __init__(self, observers: List[SearchObserver]):
        self.observers = list(observers)

    def on_search_started(self, starts: Sequence[Position]) -> None:
        for observer in self.observers:
            observer.on_search_started(starts)

    def on_run_started(self, start: Position) -> None:
        for observer in self.observers:
            observer.on_run_started(start)

    def on_node_expanded(self, board: Board, depth: int, states_recorded: int) -> None:
        for observer in self.observers:
            observer.on_node_expanded(board, depth, states_recorded)

    def on_goal_found(self, board: Board, depth: int, states_recorded: int) -> None:
        for observer in self.observers:
            observer.on_goal_found(board, depth, states_recorded)

    def on_run_exhausted(self, start: Position, states_recorded: int) -> None:
        for observer in self.observers:
            observer.on_run_exhausted(start, states_recorded)

    def on_budget_exhausted(self, reason: str) -> None:
        for observer in self.observers:
            observer.on_budget_exhausted(reason)

    def on_search_finished(self) -> None:
        for observer in self.observers:
            observer.on_search_finished()
