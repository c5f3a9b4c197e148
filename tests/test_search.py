import pytest

from ttt_minimax.board import NO_MOVE, Board, Cell, Move
from ttt_minimax.evaluator import HeuristicEvaluator, TerminalEvaluator
from ttt_minimax.search import Minimax, SearchResult, find_best_move

EVALUATORS = ["terminal", "heuristic"]
OPENING_MOVES = {Move(0, 0), Move(0, 2), Move(1, 1), Move(2, 0), Move(2, 2)}


@pytest.mark.parametrize("evaluator", EVALUATORS)
@pytest.mark.parametrize("depth", [1, 2, 5, 9])
def test_takes_immediate_win(evaluator, depth):
    board = Board.from_rows(["XX ", "OO ", "   "])
    result = Minimax(evaluator).search(board, depth, Cell.MAX)
    assert result.move == Move(0, 2)
    assert result.score == 10


def test_min_takes_immediate_win():
    board = Board.from_rows(["XX ", "OO ", "   "])
    result = Minimax("terminal").search(board, 1, Cell.MIN)
    assert result.move == Move(1, 2)
    assert result.score == -10


@pytest.mark.parametrize("evaluator", EVALUATORS)
def test_min_blocks_threat(evaluator):
    board = Board.from_rows(["   ", " O ", "XX "])
    assert Minimax(evaluator).find_best_move(board, 2, Cell.MIN) == Move(2, 2)


@pytest.mark.parametrize("evaluator", EVALUATORS)
def test_max_blocks_threat(evaluator):
    # O opened this game; X has no win of its own and must take (2, 2)
    board = Board.from_rows([" X ", "   ", "OO "])
    result = Minimax(evaluator).search(board, 2, Cell.MAX)
    assert result.move == Move(2, 2)
    assert result.score > -10


def test_empty_board_depth_one_picks_first_cell():
    # Every move scores 0 at depth 1, first in row-major order wins
    assert find_best_move(Board.empty(), 1) == Move(0, 0)


def test_empty_board_depth_one_heuristic_prefers_center():
    result = Minimax(HeuristicEvaluator()).search(Board.empty(), 1)
    assert result.move == Move(1, 1)
    assert result.score == 6


def test_no_legal_move_returns_sentinel():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    for evaluator in (TerminalEvaluator(), HeuristicEvaluator()):
        result = Minimax(evaluator).search(board, 3)
        assert result.move == NO_MOVE
        assert not result.move.is_valid
        assert result.score == evaluator.score(board)


def test_value_at_depth_zero_is_evaluation():
    board = Board.from_rows(["   ", " X ", "   "])
    searcher = Minimax("heuristic")
    assert searcher.value(board, 0, Cell.MIN) == 6
    assert Minimax("terminal").value(board, 0, Cell.MIN) == 0


def test_value_of_terminal_board_ignores_depth():
    board = Board.from_rows(["XXX", "OO ", "   "])
    assert Minimax("heuristic").value(board, 5, Cell.MIN) == 10


def test_max_and_min_value_wrappers():
    board = Board.from_rows(["XO ", " X ", "   "])
    searcher = Minimax("heuristic")
    assert searcher.max_value(board, 3) == searcher.value(board, 3, Cell.MAX)
    assert searcher.min_value(board, 3) == searcher.value(board, 3, Cell.MIN)


def test_search_does_not_touch_board():
    board = Board.from_rows(["XO ", "   ", "   "])
    before = list(board.cells)
    Minimax("heuristic").search(board, 9)
    assert board.cells == before


def test_node_count():
    board = Board.from_rows(["XOX", "OXO", "OX "])
    result = Minimax("terminal").search(board, 1)
    assert result == SearchResult(Move(2, 2), 10, 2)


def test_depth_zero_search_runs_to_the_end():
    board = Board.from_rows(["X  ", " O ", "   "])
    searcher = Minimax("terminal")
    assert searcher.search(board, 0) == searcher.search(board, 9)


@pytest.mark.parametrize("depth", [9, 12])
def test_deep_search_matches_full_depth(depth):
    board = Board.from_rows(["X  ", " O ", "  X"])
    searcher = Minimax("terminal")
    full = searcher.search(board, 7, Cell.MIN)
    deep = searcher.search(board, depth, Cell.MIN)
    assert (deep.move, deep.score) == (full.move, full.score)


def test_unknown_evaluator_name():
    with pytest.raises(ValueError):
        Minimax("random")


@pytest.mark.slow
def test_full_depth_opening_terminal():
    result = Minimax("terminal").search(Board.empty(), 9)
    assert result.move == Move(0, 0)
    assert result.score == 0


@pytest.mark.slow
def test_full_depth_opening_heuristic():
    move = Minimax("heuristic").find_best_move(Board.empty(), 9)
    assert move in OPENING_MOVES
