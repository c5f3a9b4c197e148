import pytest

from ttt_minimax.board import NO_MOVE, Board, Cell, Move


def test_empty_board():
    board = Board.empty()
    assert board.cells == [0] * 9
    assert board.occupied() == 0
    assert board.to_rows() == ["   ", "   ", "   "]


def test_from_rows_and_accessors():
    board = Board.from_rows(["XX_", "O.O", "  x"])
    assert board.get(0, 0) == Cell.MAX
    assert board.get(0, 2) == Cell.EMPTY
    assert board.get(1, 0) == Cell.MIN
    assert board.get(2, 2) == Cell.MAX
    assert board.to_rows() == ["XX ", "O O", "  X"]
    assert board.occupied() == 5


@pytest.mark.parametrize("rows", [
    ["XX ", "OO "],
    ["XX ", "OO", "   "],
    ["XZ ", "   ", "   "],
])
def test_from_rows_rejects_bad_input(rows):
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Board([0] * 8)


def test_place_mutates_in_place():
    board = Board.empty()
    board.place(Move(1, 1), Cell.MAX)
    assert board.get(1, 1) == Cell.MAX


@pytest.mark.parametrize("move", [Move(1, 1), Move(3, 0), Move(0, -1), NO_MOVE])
def test_place_rejects_illegal(move):
    board = Board.from_rows(["   ", " O ", "   "])
    with pytest.raises(ValueError):
        board.place(move, Cell.MAX)


def test_copy_is_independent():
    original = Board.from_rows(["X  ", " O ", "   "])
    snapshot = list(original.cells)

    dup = original.copy()
    dup.place(Move(2, 2), Cell.MAX)
    dup.cells[0] = int(Cell.MIN)

    assert original.cells == snapshot
    assert dup != original


def test_move_sentinel():
    assert not NO_MOVE.is_valid
    assert NO_MOVE.row == -1
    assert Move(0, 0).is_valid


def test_opponent():
    assert Cell.MAX.opponent() == Cell.MIN
    assert Cell.MIN.opponent() == Cell.MAX
