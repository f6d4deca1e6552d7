import pytest

from src.game.board import Board, Direction, Tile
from src.game.movement import MOVE_ORDER, MoveGenerator, SlideRule


class TestSlideRule:
    def test_slide_chains_through_cherries(self):
        board = Board.parse("cccc").place_snake((0, 0))
        moved = SlideRule.slide(board, Direction.RIGHT)

        assert moved.get_snake_head() == (3, 0)
        assert str(moved) == "ooo@"
        assert moved.is_complete()

    def test_slide_stops_before_rock(self):
        board = Board.parse("ccrc").place_snake((0, 0))
        moved = SlideRule.slide(board, Direction.RIGHT)

        assert moved.get_snake_head() == (1, 0)
        assert moved.get_tile(2, 0) == Tile.ROCK
        assert moved.get_tile(3, 0) == Tile.CHERRY

    def test_slide_stops_before_body(self):
        board = Board.parse("ccc\nccc").place_snake((0, 0))
        board = SlideRule.slide(board, Direction.RIGHT)
        board = SlideRule.slide(board, Direction.DOWN)
        board = SlideRule.slide(board, Direction.LEFT)

        assert board.get_snake_head() == (0, 1)
        assert SlideRule.slide(board, Direction.UP) is board

    def test_blocked_by_wall_is_a_no_op(self):
        board = Board.parse("cc\ncc").place_snake((0, 0))

        assert SlideRule.slide(board, Direction.UP) == board
        assert SlideRule.slide(board, Direction.LEFT) == board

    def test_blocked_by_rock_is_a_no_op(self):
        board = Board.parse("cc\nrc").place_snake((0, 0))
        assert SlideRule.slide(board, Direction.DOWN) == board

    def test_slide_does_not_change_input(self):
        board = Board.parse("ccc").place_snake((0, 0))
        SlideRule.slide(board, Direction.RIGHT)
        assert str(board) == "@cc"

    def test_slide_is_deterministic(self):
        board = Board.parse("ccc\ncrc\nccc").place_snake((1, 0))
        first = SlideRule.slide(board, Direction.LEFT)
        second = SlideRule.slide(board, Direction.LEFT)
        assert first == second

    def test_slide_in_each_direction(self):
        board = Board.parse("ccc\nccc\nccc").place_snake((1, 1))

        assert SlideRule.slide(board, Direction.UP).get_snake_head() == (1, 0)
        assert SlideRule.slide(board, Direction.DOWN).get_snake_head() == (1, 2)
        assert SlideRule.slide(board, Direction.LEFT).get_snake_head() == (0, 1)
        assert SlideRule.slide(board, Direction.RIGHT).get_snake_head() == (2, 1)

    def test_slide_without_snake_raises(self):
        with pytest.raises(ValueError):
            SlideRule.slide(Board.parse("cc"), Direction.RIGHT)

    def test_second_head_is_an_invariant_violation(self):
        board = Board.from_rows([[Tile.SNAKE_HEAD, Tile.SNAKE_HEAD]])
        with pytest.raises(RuntimeError):
            SlideRule.slide(board, Direction.RIGHT)

    def test_long_slide_does_not_recurse(self):
        width = 5000
        board = Board.parse("c" * width).place_snake((0, 0))
        moved = SlideRule.slide(board, Direction.RIGHT)

        assert moved.get_snake_head() == (width - 1, 0)
        assert moved.is_complete()


class TestMoveGenerator:
    def test_move_order(self):
        assert MOVE_ORDER == (
            Direction.UP,
            Direction.DOWN,
            Direction.RIGHT,
            Direction.LEFT,
        )

    def test_moves_follow_fixed_order(self):
        board = Board.parse("ccc\nccc\nccc").place_snake((1, 1))
        directions = [d for d, _ in MoveGenerator.moves_with_directions(board)]
        assert directions == list(MOVE_ORDER)

    def test_no_op_moves_are_skipped(self):
        board = Board.parse("cc\nrc").place_snake((0, 0))
        moves = list(MoveGenerator.moves_with_directions(board))

        assert [d for d, _ in moves] == [Direction.RIGHT]
        assert moves[0][1].get_snake_head() == (1, 0)

    def test_moves_never_return_input(self):
        board = Board.parse("crc\nccc").place_snake((0, 0))
        for new_board in MoveGenerator.moves(board):
            assert new_board != board

    def test_stuck_snake_has_no_moves(self):
        board = Board.parse("rcr\nrrr").place_snake((1, 0))
        assert list(MoveGenerator.moves(board)) == []
