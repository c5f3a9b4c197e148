"""
Minimax TicTacToe - depth-bounded game-tree search over the 3x3 board.

The core (board, rules, evaluator, search) performs no I/O. The console
game and the analysis suite are thin layers on top of it.
"""

from .board import Board, Cell, Player, Move, NO_MOVE, MAX, MIN, EMPTY
from .rules import (
    WIN_LINES,
    legal_moves,
    is_legal,
    winner,
    winning_line,
    is_terminal,
    apply_move,
    side_to_move,
    is_legal_board,
)
from .evaluator import (
    Evaluator,
    TerminalEvaluator,
    HeuristicEvaluator,
    EVALUATORS,
    WIN_SCORE,
    get_evaluator,
)
from .search import Minimax, SearchResult, find_best_move
from .symmetries import apply_symmetry_board, apply_symmetry_move, canonical_board, SYM_MAPS
from .config import GameConfig
from .analysis import (
    iter_all_legal_nonterminal_states,
    heuristic_bounds,
    play_self_play,
    eval_vs_random,
    eval_depth_agreement,
)
from .play import play_console, render_board, parse_move

__version__ = "0.1.0"
__all__ = [
    "Board",
    "Cell",
    "Player",
    "Move",
    "NO_MOVE",
    "MAX",
    "MIN",
    "EMPTY",
    "WIN_LINES",
    "legal_moves",
    "is_legal",
    "winner",
    "winning_line",
    "is_terminal",
    "apply_move",
    "side_to_move",
    "is_legal_board",
    "Evaluator",
    "TerminalEvaluator",
    "HeuristicEvaluator",
    "EVALUATORS",
    "WIN_SCORE",
    "get_evaluator",
    "Minimax",
    "SearchResult",
    "find_best_move",
    "apply_symmetry_board",
    "apply_symmetry_move",
    "canonical_board",
    "SYM_MAPS",
    "GameConfig",
    "iter_all_legal_nonterminal_states",
    "heuristic_bounds",
    "play_self_play",
    "eval_vs_random",
    "eval_depth_agreement",
    "play_console",
    "render_board",
    "parse_move",
]
