"""
D4 symmetries of the TicTacToe board (8 transforms).

Rotations: 0°, 90°, 180°, 270°
Reflections: horizontal, vertical, main diagonal, anti-diagonal
"""

from typing import List

import numpy as np

from .board import SIZE, Board, Move


def _idx(r: int, c: int) -> int:
    """Convert (row, col) to flat index."""
    return r * SIZE + c


def _transform(k: int, r: int, c: int):
    """Where transform k sends cell (r, c)."""
    if k == 0:   return r, c                # identity
    elif k == 1: return c, 2 - r            # rotate 90
    elif k == 2: return 2 - r, 2 - c        # rotate 180
    elif k == 3: return 2 - c, r            # rotate 270
    elif k == 4: return r, 2 - c            # reflect horizontal
    elif k == 5: return 2 - r, c            # reflect vertical
    elif k == 6: return c, r                # reflect main diag
    else:        return 2 - c, 2 - r        # reflect anti-diag


def _build_symmetry_maps() -> np.ndarray:
    """Build [8, 9] gather maps: new_cells[i] = cells[maps[k, i]]."""
    maps = np.zeros((8, SIZE * SIZE), dtype=np.int64)
    for k in range(8):
        for r in range(SIZE):
            for c in range(SIZE):
                rt, ct = _transform(k, r, c)
                maps[k, _idx(rt, ct)] = _idx(r, c)
    return maps


# Pre-computed symmetry maps
SYM_MAPS = _build_symmetry_maps()


def apply_symmetry_board(board: Board, sym_id: int) -> Board:
    """Return a transformed copy of board."""
    cells = np.asarray(board.cells, dtype=np.int64)[SYM_MAPS[sym_id]]
    return Board(cells.tolist())


def apply_symmetry_move(move: Move, sym_id: int) -> Move:
    """Map a move on the original board to the transformed board."""
    return Move(*_transform(sym_id, move.row, move.col))


def get_all_symmetries(board: Board) -> List[Board]:
    """Return all 8 symmetric versions of a board."""
    return [apply_symmetry_board(board, k) for k in range(8)]


def canonical_board(board: Board) -> tuple:
    """Smallest cell tuple among the 8 symmetric versions; equal for equivalent boards."""
    stacked = np.asarray(board.cells, dtype=np.int64)[SYM_MAPS]
    return min(tuple(row.tolist()) for row in stacked)
