"""
BFS solver for the snake cherry puzzle.

Tries every starting cell in row-major order and runs an independent
breadth-first search from each one.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..game.board import Board, Direction, Position
from ..game.movement import MoveGenerator
from .config import SolverConfig
from .observer import SearchObserver
from .path import RootStart, SearchRecord, reconstruct_path


@dataclass
class BFSResult:
    """Result of BFS solving."""

    start: Optional[Position]
    moves: Optional[List[Direction]]
    move_count: int
    nodes_explored: int
    states_recorded: int
    time_taken_ms: float
    success: bool
    budget_exhausted: bool = False
    runs_attempted: int = 0


class _BudgetExhausted(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class BFSSolver:
    """BFS solver for the snake cherry puzzle."""

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        observer: Optional[SearchObserver] = None,
    ):
        """Initialize BFS solver.

        Args:
            config: Search limits and mode, defaults to unlimited first-found
            observer: Receives search events, defaults to a no-op observer
        """
        self.config = config or SolverConfig()
        self.observer = observer or SearchObserver()

    def solve(self, board: Board) -> BFSResult:
        """Find the shortest solution from the first solvable start position.

        With ``config.exhaustive`` every start position is searched and the
        shortest solution overall is kept, the earlier start winning ties.

        Args:
            board: Parsed puzzle with no snake placed

        Returns:
            BFSResult with the start position and moves if a solution was found
        """
        self._start_time = time.time()
        self._nodes_explored = 0
        self._depth_cut = False
        states_recorded = 0
        runs_attempted = 0
        budget_exhausted = False
        best: Optional[Tuple[Position, List[Direction]]] = None

        starts = board.starting_positions()
        self.observer.on_search_started(starts)

        try:
            for start in starts:
                runs_attempted += 1
                self.observer.on_run_started(start)
                record: SearchRecord = {}
                try:
                    found = self._search_from(board, start, record)
                finally:
                    states_recorded += len(record)

                if found is None:
                    self.observer.on_run_exhausted(start, len(record))
                    # A pruned run may still hold a solution, so a later
                    # start is not the first solvable one
                    if self._depth_cut and not self.config.exhaustive:
                        raise _BudgetExhausted(
                            f"depth cap of {self.config.depth_cap} moves "
                            f"reached from {start}"
                        )
                    continue

                solution = reconstruct_path(found, record)
                if best is None or len(solution[1]) < len(best[1]):
                    best = solution
                if not self.config.exhaustive:
                    break

            # Solutions no longer than depth_cap are never pruned, so a cut
            # only matters when nothing was found
            if best is None and self._depth_cut:
                raise _BudgetExhausted(
                    f"depth cap of {self.config.depth_cap} moves reached"
                )
        except _BudgetExhausted as e:
            budget_exhausted = True
            self.observer.on_budget_exhausted(e.reason)
        finally:
            self.observer.on_search_finished()

        elapsed_ms = (time.time() - self._start_time) * 1000

        # A budget cut in exhaustive mode leaves the best solution unproven
        if best is None or (budget_exhausted and self.config.exhaustive):
            return BFSResult(
                start=None,
                moves=None,
                move_count=0,
                nodes_explored=self._nodes_explored,
                states_recorded=states_recorded,
                time_taken_ms=elapsed_ms,
                success=False,
                budget_exhausted=budget_exhausted,
                runs_attempted=runs_attempted,
            )

        start, moves = best
        return BFSResult(
            start=start,
            moves=moves,
            move_count=len(moves),
            nodes_explored=self._nodes_explored,
            states_recorded=states_recorded,
            time_taken_ms=elapsed_ms,
            success=True,
            budget_exhausted=False,
            runs_attempted=runs_attempted,
        )

    def _search_from(
        self, board: Board, start: Position, record: SearchRecord
    ) -> Optional[Board]:
        """Breadth-first search from one starting placement.

        Fills ``record`` with every board visited by the run and returns the
        first complete board reached, or None if the run is exhausted.
        """
        root = board.place_snake(start)
        record[root] = RootStart(start)
        queue = deque([(root, 0)])

        while queue:
            self._check_budget()

            current, depth = queue.popleft()
            self._nodes_explored += 1
            self.observer.on_node_expanded(current, depth, len(record))

            if current.is_complete():
                self.observer.on_goal_found(current, depth, len(record))
                return current

            if self.config.depth_cap is not None and depth >= self.config.depth_cap:
                self._depth_cut = True
                continue

            for new_board in MoveGenerator.moves(current):
                if new_board not in record:
                    record[new_board] = current
                    queue.append((new_board, depth + 1))

        return None

    def _check_budget(self) -> None:
        max_nodes = self.config.max_nodes
        if max_nodes is not None and self._nodes_explored >= max_nodes:
            raise _BudgetExhausted(f"explored {self._nodes_explored} nodes")

        timeout_ms = self.config.timeout_ms
        if timeout_ms is not None:
            elapsed_ms = (time.time() - self._start_time) * 1000
            if elapsed_ms > timeout_ms:
                raise _BudgetExhausted(f"timed out after {elapsed_ms:.1f}ms")
