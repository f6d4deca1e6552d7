from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

Position = Tuple[int, int]

ROCK_CHAR = "r"


class PuzzleFormatError(ValueError):
    """Raised when puzzle text cannot be turned into a rectangular board."""


class Tile(Enum):
    ROCK = 0
    CHERRY = 1
    SNAKE_BODY = 2
    SNAKE_HEAD = 3


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name.title()


TILE_SYMBOLS = {
    Tile.ROCK: ROCK_CHAR,
    Tile.CHERRY: "c",
    Tile.SNAKE_BODY: "o",
    Tile.SNAKE_HEAD: "@",
}


class Board:
    """Immutable grid of tiles.

    Two boards are equal when their tiles are equal, regardless of the moves
    that produced them, which makes a Board usable as a search state key.
    """

    def __init__(self, grid: np.ndarray):
        self.grid = np.array(grid, dtype=np.int8)
        if self.grid.ndim != 2:
            self.grid = self.grid.reshape((0, 0))
        self.grid.setflags(write=False)
        self._hash = hash((self.grid.shape, self.grid.tobytes()))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> "Board":
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise PuzzleFormatError(
                f"All rows must have the same length, got lengths {sorted(widths)}"
            )
        return cls(np.array([[tile.value for tile in row] for row in rows]))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Parse puzzle text: one row per line, ``r`` is a rock, anything else a cherry."""
        rows = [
            [Tile.ROCK if char == ROCK_CHAR else Tile.CHERRY for char in line.strip()]
            for line in text.strip().splitlines()
        ]
        return cls.from_rows(rows)

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        return Tile(int(self.grid[y, x]))

    def cherry_count(self) -> int:
        return int(np.count_nonzero(self.grid == Tile.CHERRY.value))

    def is_complete(self) -> bool:
        return self.cherry_count() == 0

    def starting_positions(self) -> List[Position]:
        # argwhere walks the grid in row-major order
        return [
            (int(x), int(y))
            for y, x in np.argwhere(self.grid == Tile.CHERRY.value)
        ]

    def place_snake(self, pos: Position) -> "Board":
        x, y = pos
        grid = self.grid.copy()
        grid[y, x] = Tile.SNAKE_HEAD.value
        return Board(grid)

    def get_snake_head(self) -> Optional[Position]:
        heads = np.argwhere(self.grid == Tile.SNAKE_HEAD.value)
        if len(heads) == 0:
            return None
        y, x = heads[0]
        return (int(x), int(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._hash == other._hash and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, cherries={self.cherry_count()})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(TILE_SYMBOLS[Tile(int(value))] for value in row)
            for row in self.grid
        )
