"""
Position evaluation from the maximizing player's (X) point of view.

Two interchangeable strategies:
  - TerminalEvaluator: +10 / -10 for a won board, 0 otherwise
  - HeuristicEvaluator: same on won boards, otherwise a sum of per-line
    threat scores plus a center bonus

Heuristic scores of non-terminal boards are clamped to [-9, 9], so they
never look like a decided game.
"""

from typing import Dict, Type

from .board import Board, Cell
from .rules import CENTER, WIN_LINES, winner

WIN_SCORE = 10

# Heuristic weights
TWO_IN_ROW_SCORE = 3     # two marks, third cell empty
SINGLE_IN_ROW_SCORE = 1  # one mark, two cells empty
CENTER_BONUS = 2
HEURISTIC_LIMIT = WIN_SCORE - 1


class Evaluator:
    """Maps a board to an integer score. Subclasses implement score()."""

    name = "base"

    def score(self, board: Board) -> int:
        raise NotImplementedError

    def __call__(self, board: Board) -> int:
        return self.score(board)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TerminalEvaluator(Evaluator):
    """Win/loss only. Unresolved positions (including depth cutoffs) score 0."""

    name = "terminal"

    def score(self, board: Board) -> int:
        w = winner(board)
        if w == Cell.MAX:
            return WIN_SCORE
        if w == Cell.MIN:
            return -WIN_SCORE
        return 0


def line_score(a: int, b: int, c: int) -> int:
    """
    Threat value of one line.

    Lines holding marks of a single player score +3/+1 (two/one marks) for X
    and -3/-1 for O. Blocked, empty and full lines score 0.
    """
    max_cnt = (a == 1) + (b == 1) + (c == 1)
    min_cnt = (a == -1) + (b == -1) + (c == -1)
    empty = 3 - max_cnt - min_cnt

    if min_cnt == 0:
        if max_cnt == 2 and empty == 1:
            return TWO_IN_ROW_SCORE
        if max_cnt == 1 and empty == 2:
            return SINGLE_IN_ROW_SCORE
    if max_cnt == 0:
        if min_cnt == 2 and empty == 1:
            return -TWO_IN_ROW_SCORE
        if min_cnt == 1 and empty == 2:
            return -SINGLE_IN_ROW_SCORE
    return 0


class HeuristicEvaluator(TerminalEvaluator):
    """Terminal score if the game is won, else line threats plus center control."""

    name = "heuristic"

    def score(self, board: Board) -> int:
        terminal = super().score(board)
        if terminal != 0:
            return terminal

        cells = board.cells
        total = sum(line_score(cells[a], cells[b], cells[c]) for a, b, c in WIN_LINES)

        # A full drawn board keeps its center bonus
        total += CENTER_BONUS * cells[CENTER]

        # Double threats can add up to WIN_SCORE, e.g. XOX / _X_ / _O_
        return max(-HEURISTIC_LIMIT, min(HEURISTIC_LIMIT, total))


EVALUATORS: Dict[str, Type[Evaluator]] = {
    TerminalEvaluator.name: TerminalEvaluator,
    HeuristicEvaluator.name: HeuristicEvaluator,
}


def get_evaluator(name: str) -> Evaluator:
    """Instantiate an evaluator by name ("terminal" or "heuristic")."""
    try:
        return EVALUATORS[name]()
    except KeyError:
        valid = ", ".join(sorted(EVALUATORS))
        raise ValueError(f"Unknown evaluator {name!r} (choose from: {valid})") from None
