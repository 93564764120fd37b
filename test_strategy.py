import pytest

from logic.game_state import Board, Mark, Position
from logic.strategy import HeuristicStrategy


O = Mark.PLAYER_ONE
X = Mark.PLAYER_TWO


@pytest.fixture
def strategy():
    return HeuristicStrategy()


def test_win_beats_block(strategy):
    board = Board.from_rows(["O O _", "X X _", "_ _ _"])
    assert strategy.choose_move(board, O) == Position(1, 3)
    assert strategy.last_reason == "win"


def test_blocks_opponent(strategy):
    board = Board.from_rows(["O O _", "_ X _", "_ _ _"])
    assert strategy.choose_move(board, X) == Position(1, 3)
    assert strategy.last_reason == "block"


def test_first_winning_cell_in_row_major_order(strategy):
    # X can win at (1,3) or at (3,1); the scan reaches (1,3) first
    board = Board.from_rows(["X X _", "X O O", "_ O O"])
    assert strategy.choose_move(board, X) == Position(1, 3)


def test_takes_center_on_empty_board(strategy):
    assert strategy.choose_move(Board(), X) == Position(2, 2)
    assert strategy.last_reason == "center"


def test_takes_center_when_corners_are_taken(strategy):
    board = Board.from_rows(["O _ X", "_ _ _", "X _ O"])
    assert strategy.choose_move(board, X) == Position(2, 2)


@pytest.mark.parametrize("rows, expected", [
    (["_ _ _", "_ O _", "_ _ _"], Position(1, 1)),
    (["X _ _", "_ O _", "_ _ O"], Position(1, 3)),
])
def test_first_free_corner(strategy, rows, expected):
    board = Board.from_rows(rows)
    assert strategy.choose_move(board, X) == expected
    assert strategy.last_reason == "corner"


def test_corner_order_skips_taken_corners(strategy):
    # (1,1) and (1,3) taken, no threats on the board
    board = Board.from_rows(["O X O", "_ X _", "_ O _"])
    assert strategy.choose_move(board, X) == Position(3, 1)


def test_falls_back_to_first_empty_cell(strategy):
    board = Board.from_rows(["O X O", "_ X _", "X O X"])
    assert strategy.choose_move(board, O) == Position(2, 1)
    assert strategy.last_reason == "any"


def test_full_board_has_no_move(strategy):
    board = Board.from_rows(["O X O", "X O X", "X O X"])
    assert strategy.choose_move(board, X) is None
    assert strategy.last_reason is None


@pytest.mark.parametrize("rows", [
    ["_ _ _", "_ _ _", "_ _ _"],
    ["O O _", "X X _", "_ _ _"],
    ["O _ X", "_ X _", "_ _ O"],
    ["O X O", "_ X _", "X O X"],
    ["X O X", "X O O", "O X _"],
])
@pytest.mark.parametrize("mark", [O, X])
def test_choose_move_leaves_board_untouched(strategy, rows, mark):
    board = Board.from_rows(rows)
    before = board.copy()
    move = strategy.choose_move(board, mark)
    assert board == before
    if move is not None:
        assert board.cell_at(move) == Mark.EMPTY
