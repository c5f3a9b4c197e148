"""
Depth-bounded minimax search.

Scores are always from the maximizing player's (X) point of view. Each
branch works on its own forked board, so the caller's board is never
touched and nothing is shared between calls. No pruning, no caching.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .board import NO_MOVE, Board, Cell, Move
from .evaluator import Evaluator, get_evaluator
from .rules import apply_move, is_terminal, legal_moves


@dataclass(frozen=True)
class SearchResult:
    """Chosen move, its minimax score and the number of positions visited."""
    move: Move
    score: int
    nodes: int


class Minimax:
    """
    Minimax player with a fixed evaluation strategy.

    Args:
        evaluator: Evaluator instance or its registered name
    """

    def __init__(self, evaluator: Union[Evaluator, str] = "terminal"):
        if isinstance(evaluator, str):
            evaluator = get_evaluator(evaluator)
        self.evaluator = evaluator

    def __repr__(self) -> str:
        return f"Minimax(evaluator={self.evaluator.name!r})"

    def _value(self, board: Board, depth: int, player: Cell) -> Tuple[int, int]:
        """Return (score, nodes) for board with player to move."""
        if is_terminal(board) or depth == 0:
            return self.evaluator.score(board), 1

        nodes = 1
        best = None
        for move in legal_moves(board):
            child = apply_move(board, move, player)
            v, n = self._value(child, depth - 1, player.opponent())
            nodes += n
            if best is None:
                best = v
            elif player == Cell.MAX:
                best = max(best, v)
            else:
                best = min(best, v)
        return best, nodes

    def value(self, board: Board, depth: int, player: Cell) -> int:
        """
        Minimax value of board with player to move.

        Returns the evaluation directly when the board is terminal or
        depth is exhausted. A negative depth never reaches the cutoff.
        """
        return self._value(board, depth, player)[0]

    def max_value(self, board: Board, depth: int) -> int:
        return self.value(board, depth, Cell.MAX)

    def min_value(self, board: Board, depth: int) -> int:
        return self.value(board, depth, Cell.MIN)

    def search(self, board: Board, depth: int, player: Cell = Cell.MAX) -> SearchResult:
        """
        Pick the best move for player.

        Moves are tried in row-major order and only a strictly better score
        replaces the current choice, so the first optimal move wins ties.
        Without legal moves the result is NO_MOVE with the board's own score.
        """
        nodes = 1
        best_move = NO_MOVE
        best_score = None

        for move in legal_moves(board):
            child = apply_move(board, move, player)
            v, n = self._value(child, depth - 1, player.opponent())
            nodes += n

            if best_score is None:
                better = True
            elif player == Cell.MAX:
                better = v > best_score
            else:
                better = v < best_score
            if better:
                best_score = v
                best_move = move

        if best_score is None:
            best_score = self.evaluator.score(board)
        return SearchResult(best_move, best_score, nodes)

    def find_best_move(self, board: Board, depth: int, player: Cell = Cell.MAX) -> Move:
        """Best move for player, or NO_MOVE when the board has no empty cell."""
        return self.search(board, depth, player).move


def find_best_move(
    board: Board,
    depth: int,
    player: Cell = Cell.MAX,
    evaluator: Union[Evaluator, str] = "terminal",
) -> Move:
    """Convenience wrapper around Minimax.find_best_move."""
    return Minimax(evaluator).find_best_move(board, depth, player)
