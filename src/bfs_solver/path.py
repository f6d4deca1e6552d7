"""
Path reconstruction from the solver's search record.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple, Union

from ..game.board import Board, Direction, Position
from ..game.movement import SlideRule


@dataclass(frozen=True)
class RootStart:
    """Parent marker for the first board of a run: the snake was placed here."""

    position: Position


SearchRecord = Dict[Board, Union[Board, RootStart]]


def direction_between(before: Position, after: Position) -> Direction:
    """Recover the slide direction that moved the head from ``before`` to ``after``.

    A slide may cover several cells but always stays on one axis.
    """
    (x1, y1), (x2, y2) = before, after
    if y1 == y2 and x1 != x2:
        return Direction.LEFT if x2 < x1 else Direction.RIGHT
    if x1 == x2 and y1 != y2:
        return Direction.UP if y2 < y1 else Direction.DOWN
    raise ValueError(f"Head moved from {before} to {after}, which is not a slide")


def reconstruct_path(
    goal: Board, record: SearchRecord
) -> Tuple[Position, List[Direction]]:
    """Walk parent links back from ``goal`` to the starting placement.

    Args:
        goal: Board the search stopped on
        record: Mapping from each visited board to its parent or RootStart

    Returns:
        (start position, directions in the order they were played)
    """
    boards = [goal]
    parent = record[goal]
    while not isinstance(parent, RootStart):
        if len(boards) > len(record):
            raise ValueError("Search record contains a cycle")
        boards.append(parent)
        parent = record[parent]

    start = parent.position
    boards.reverse()

    heads = [board.get_snake_head() for board in boards]
    if heads[0] != start:
        raise ValueError(
            f"First board has its head at {heads[0]}, expected start {start}"
        )

    moves = [direction_between(a, b) for a, b in zip(heads, heads[1:])]
    return start, moves


def replay_states(
    board: Board, start: Position, moves: Sequence[Direction]
) -> Iterator[Board]:
    """Yield the board after placing the snake and after each move."""
    current = board.place_snake(start)
    yield current
    for direction in moves:
        current = SlideRule.slide(current, direction)
        yield current


def replay(board: Board, start: Position, moves: Sequence[Direction]) -> Board:
    final = None
    for final in replay_states(board, start, moves):
        pass
    return final
