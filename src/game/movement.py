from typing import Iterator, Tuple

from .board import Board, Direction, Tile

MOVE_ORDER = (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT)


class SlideRule:
    @staticmethod
    def slide(board: Board, direction: Direction) -> Board:
        """Slide the snake in one direction until it is blocked.

        The snake keeps moving through consecutive cherries, eating one per
        cell, and stops before a rock, its own body or the edge of the grid.
        A slide that is blocked straight away returns the input board.

        Raises:
            ValueError: if the snake has not been placed on the board
        """
        head = board.get_snake_head()
        if head is None:
            raise ValueError("Can't move the snake before it's placed")

        grid = board.grid.copy()
        x, y = head

        while True:
            nx, ny = x + direction.dx, y + direction.dy
            if not board.is_valid_position(nx, ny):
                break

            tile = Tile(int(grid[ny, nx]))
            if tile in (Tile.ROCK, Tile.SNAKE_BODY):
                break
            if tile == Tile.SNAKE_HEAD:
                raise RuntimeError(f"Found a second snake head at ({nx}, {ny})")

            grid[y, x] = Tile.SNAKE_BODY.value
            grid[ny, nx] = Tile.SNAKE_HEAD.value
            x, y = nx, ny

        if (x, y) == head:
            return board
        return Board(grid)


class MoveGenerator:
    """Enumerates the boards reachable from a board with one slide.

    Slides that leave the board unchanged are skipped, so every yielded board
    differs from its input.
    """

    @staticmethod
    def moves_with_directions(board: Board) -> Iterator[Tuple[Direction, Board]]:
        for direction in MOVE_ORDER:
            new_board = SlideRule.slide(board, direction)
            if new_board is not board:
                yield direction, new_board

    @staticmethod
    def moves(board: Board) -> Iterator[Board]:
        for _, new_board in MoveGenerator.moves_with_directions(board):
            yield new_board
