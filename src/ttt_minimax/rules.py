"""
TicTacToe rules: move legality, win lines and terminal detection.

All functions are pure reads of the board, except apply_move which
returns a new board.
"""

from typing import List, Optional, Tuple

from .board import SIZE, Board, Cell, Move

# Winning lines as flat indices, scanned row i then column i, then diagonals
WIN_LINES: List[Tuple[int, int, int]] = [
    (0, 1, 2), (0, 3, 6),   # row 0, col 0
    (3, 4, 5), (1, 4, 7),   # row 1, col 1
    (6, 7, 8), (2, 5, 8),   # row 2, col 2
    (0, 4, 8), (2, 4, 6),   # diagonals
]

CENTER = 4


def winners_set(board: Board) -> set:
    """Return set of winners (MAX, MIN, or both if illegal)."""
    cells = board.cells
    wins = set()
    for a, b, c in WIN_LINES:
        s = cells[a] + cells[b] + cells[c]
        if s == 3:
            wins.add(Cell.MAX)
        elif s == -3:
            wins.add(Cell.MIN)
    return wins


def winner(board: Board) -> Optional[Cell]:
    """Owner of the first completed line, or None."""
    cells = board.cells
    for a, b, c in WIN_LINES:
        s = cells[a] + cells[b] + cells[c]
        if s == 3:
            return Cell.MAX
        if s == -3:
            return Cell.MIN
    return None


def winning_line(board: Board) -> Optional[List[Move]]:
    """Cells of the first completed line, or None."""
    cells = board.cells
    for line in WIN_LINES:
        if abs(sum(cells[i] for i in line)) == 3:
            return [Move(*divmod(i, SIZE)) for i in line]
    return None


def legal_moves(board: Board) -> List[Move]:
    """Empty cells in row-major order."""
    return [Move(*divmod(i, SIZE)) for i, v in enumerate(board.cells) if v == 0]


def is_legal(board: Board, move) -> bool:
    """True iff move is on the board and targets an empty cell."""
    try:
        row, col = move
    except (TypeError, ValueError):
        return False
    if not (isinstance(row, int) and isinstance(col, int)):
        return False
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        return False
    return board.cells[row * SIZE + col] == Cell.EMPTY


def is_full(board: Board) -> bool:
    return all(v != 0 for v in board.cells)


def is_terminal(board: Board) -> bool:
    """Game over: somebody won or the board is full."""
    return winner(board) is not None or is_full(board)


def apply_move(board: Board, move: Move, player: Cell) -> Board:
    """Apply move and return new board."""
    new_board = board.copy()
    new_board.place(move, player)
    return new_board


def count(board: Board, cell: Cell) -> int:
    return sum(1 for v in board.cells if v == cell)


def side_to_move(board: Board, first: Cell = Cell.MAX) -> Cell:
    """Infer side to move from mark counts, given who opened the game."""
    if count(board, first) == count(board, first.opponent()):
        return first
    return first.opponent()


def is_legal_board(board: Board, first: Cell = Cell.MAX) -> bool:
    """Check if board respects the turn order and has at most one winner."""
    first_cnt = count(board, first)
    second_cnt = count(board, first.opponent())

    # first player is never behind and at most one mark ahead
    if not (first_cnt == second_cnt or first_cnt == second_cnt + 1):
        return False

    # Can't have both winners
    if len(winners_set(board)) >= 2:
        return False

    return True
