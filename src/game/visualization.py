from typing import List, Optional, Sequence

from .board import Board, Direction, Position


def format_solution(
    start: Optional[Position],
    moves: Optional[Sequence[Direction]],
    budget_exhausted: bool = False,
) -> str:
    if start is None or moves is None:
        if budget_exhausted:
            return "No solution found within budget."
        return "No solution found."

    x, y = start
    lines = [
        f"Solution found in {len(moves)} moves.",
        f"Place snake at {x}, {y}",
    ]
    for i, direction in enumerate(moves):
        lines.append(f"{i:2}. {direction.label}")
    return "\n".join(lines)


class HeadlessVisualizer:
    """Prints boards to the terminal as the solution is played back."""

    def __init__(self, boards: Sequence[Board], moves: Sequence[Direction]):
        self.boards = list(boards)
        self.moves = list(moves)

    def render(self) -> str:
        frames: List[str] = []
        for step, board in enumerate(self.boards):
            if step == 0:
                title = "Start"
            else:
                title = f"After move {step - 1}: {self.moves[step - 1].label}"
            frames.append(f"{title} ({board.cherry_count()} cherries left)")
            frames.append(str(board))
        return "\n".join(frames)

    def print_boards(self) -> None:
        print(self.render())
