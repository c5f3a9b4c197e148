"""
Evaluation functions.

Exhaustive checks of the evaluators over every legal position, and play
strength of the search against random and full-depth opponents.
"""

import random
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from tqdm.auto import tqdm

from .board import N_CELLS, Board, Cell, Move
from .evaluator import Evaluator, HeuristicEvaluator, TerminalEvaluator
from .rules import apply_move, is_legal_board, is_terminal, legal_moves, side_to_move, winner
from .search import Minimax
from .symmetries import canonical_board

FULL_DEPTH = N_CELLS


def iter_all_legal_nonterminal_states(first: Cell = Cell.MAX) -> Iterator[Tuple[Board, Cell]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, player) tuples, player being the side to move.
    """
    for n in range(3 ** N_CELLS):
        # Decode base-3 representation: 0 empty, 1 X, 2 O
        x = n
        cells = [0] * N_CELLS
        for i in range(N_CELLS):
            d = x % 3
            x //= 3
            if d == 1:
                cells[i] = int(Cell.MAX)
            elif d == 2:
                cells[i] = int(Cell.MIN)

        board = Board(cells)
        if not is_legal_board(board, first) or is_terminal(board):
            continue
        yield board, side_to_move(board, first)


def heuristic_bounds(
    evaluator: Optional[Evaluator] = None,
    progress: bool = False,
) -> Dict[str, object]:
    """
    Score range of evaluator over every legal non-terminal position.

    Both opening orders are covered. Returns min/max score, the number of
    positions and the number of distinct positions up to symmetry.
    """
    evaluator = evaluator or HeuristicEvaluator()
    # Balanced boards are legal under both opening orders; keep one copy
    states = {
        tuple(board.cells): board
        for first in (Cell.MAX, Cell.MIN)
        for board, _ in iter_all_legal_nonterminal_states(first)
    }

    lo = hi = None
    canonical = set()
    for board in tqdm(states.values(), desc="Scoring states", disable=not progress):
        s = evaluator.score(board)
        lo = s if lo is None else min(lo, s)
        hi = s if hi is None else max(hi, s)
        canonical.add(canonical_board(board))

    return {
        "evaluator": evaluator.name,
        "n_states": len(states),
        "n_distinct": len(canonical),
        "score_min": lo,
        "score_max": hi,
    }


def play_self_play(
    searcher: Minimax,
    depth: int,
    board: Optional[Board] = None,
    first: Cell = Cell.MAX,
) -> Tuple[Board, Optional[Cell], List[Move]]:
    """
    Play the search against itself from board (empty by default).

    Returns:
        (final_board, winner, moves)
    """
    board = board.copy() if board is not None else Board.empty()
    player = first
    moves: List[Move] = []

    while not is_terminal(board):
        move = searcher.find_best_move(board, depth, player)
        board.place(move, player)
        moves.append(move)
        player = player.opponent()

    return board, winner(board), moves


def eval_vs_random(
    searcher: Minimax,
    depth: int,
    games: int = 100,
    seed: int = 0,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Evaluate search vs uniformly random opponent. X always opens; the
    search plays X in even games and O in odd games.

    Returns:
        Dict with 'games', 'search_w', 'search_d', 'search_l'
    """
    rng = random.Random(seed)
    wins = draws = losses = 0

    for g in tqdm(range(games), desc="vs Random", disable=not progress):
        board = Board.empty()
        player = Cell.MAX
        search_side = Cell.MAX if (g % 2 == 0) else Cell.MIN

        while not is_terminal(board):
            if player == search_side:
                move = searcher.find_best_move(board, depth, player)
            else:
                move = rng.choice(legal_moves(board))
            board.place(move, player)
            player = player.opponent()

        w = winner(board)
        if w is None:
            draws += 1
        elif w == search_side:
            wins += 1
        else:
            losses += 1

    total = max(1, wins + draws + losses)
    return {
        "games": wins + draws + losses,
        "search_w": wins / total,
        "search_d": draws / total,
        "search_l": losses / total,
    }


def eval_depth_agreement(
    searcher: Minimax,
    depth: int,
    states: Optional[Sequence[Tuple[Board, Cell]]] = None,
    progress: bool = False,
) -> Dict[str, object]:
    """
    Share of positions where the depth-limited move keeps the game-theoretic
    value found by a full-depth terminal-only search.

    Args:
        states: (board, player) pairs; all legal non-terminal positions
            with X opening when omitted
    """
    if states is None:
        states = list(iter_all_legal_nonterminal_states())
    reference = Minimax(TerminalEvaluator())

    optimal = 0
    nodes = 0
    for board, player in tqdm(states, desc=f"Depth {depth} agreement", disable=not progress):
        best = reference.search(board, FULL_DEPTH, player)
        result = searcher.search(board, depth, player)
        nodes += result.nodes

        child = apply_move(board, result.move, player)
        if reference.value(child, FULL_DEPTH, player.opponent()) == best.score:
            optimal += 1

    n = len(states)
    return {
        "depth": depth,
        "evaluator": searcher.evaluator.name,
        "n_states": n,
        "optimal_rate": optimal / n if n else float("nan"),
        "nodes_mean": nodes / n if n else float("nan"),
    }
