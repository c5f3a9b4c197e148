"""
Board representation.

Board: 3x3 grid stored row-major as list[int] of length 9
  - 0: empty
  - +1: X (maximizing player)
  - -1: O (minimizing player)

Moves are (row, col) pairs; NO_MOVE = (-1, -1) means "no move available".
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, NamedTuple, Sequence

SIZE = 3
N_CELLS = SIZE * SIZE


class Cell(IntEnum):
    """Cell state. MAX and MIN double as the two players."""
    EMPTY = 0
    MAX = +1
    MIN = -1

    def opponent(self) -> "Cell":
        return Cell(-self.value)

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]


# Players are the two non-empty cell values
Player = Cell
MAX = Cell.MAX
MIN = Cell.MIN
EMPTY = Cell.EMPTY

SYMBOLS = {Cell.EMPTY: " ", Cell.MAX: "X", Cell.MIN: "O"}
_FROM_SYMBOL = {" ": Cell.EMPTY, "_": Cell.EMPTY, ".": Cell.EMPTY, "X": Cell.MAX, "O": Cell.MIN}


class Move(NamedTuple):
    """A (row, col) target cell."""
    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        """False only for the NO_MOVE sentinel (or other negative coordinates)."""
        return self.row >= 0 and self.col >= 0


NO_MOVE = Move(-1, -1)


def _idx(row: int, col: int) -> int:
    """Convert (row, col) to flat index."""
    return row * SIZE + col


@dataclass
class Board:
    """3x3 board. Mutated only through place(); search works on copies."""
    cells: List[int] = field(default_factory=lambda: [0] * N_CELLS)

    def __post_init__(self):
        if len(self.cells) != N_CELLS:
            raise ValueError(f"Board needs {N_CELLS} cells, got {len(self.cells)}")
        self.cells = [int(Cell(v)) for v in self.cells]

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from 3 strings of 3 symbols each.

        "X" and "O" are marks; " ", "_" and "." are empty. Example:
            Board.from_rows(["XX ", "OO ", "   "])
        """
        if len(rows) != SIZE:
            raise ValueError(f"Board must have exactly {SIZE} rows.")
        cells = []
        for row in rows:
            if len(row) != SIZE:
                raise ValueError(f"Rows must be {SIZE} symbols long, got {row!r}")
            for ch in row:
                try:
                    cells.append(int(_FROM_SYMBOL[ch.upper()]))
                except KeyError:
                    raise ValueError(f"Unknown board symbol {ch!r}") from None
        return cls(cells)

    def to_rows(self) -> List[str]:
        return [
            "".join(SYMBOLS[Cell(self.get(r, c))] for c in range(SIZE))
            for r in range(SIZE)
        ]

    def get(self, row: int, col: int) -> Cell:
        return Cell(self.cells[_idx(row, col)])

    def place(self, move: Move, player: Cell):
        """Put player's mark on an empty in-range cell."""
        row, col = move
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Move {tuple(move)} is off the board")
        if player == Cell.EMPTY:
            raise ValueError("Cannot place an empty mark")
        i = _idx(row, col)
        if self.cells[i] != Cell.EMPTY:
            raise ValueError(f"Cell {tuple(move)} is already occupied")
        self.cells[i] = int(player)

    def copy(self) -> "Board":
        """Independent duplicate; changes to the copy never reach self."""
        # Skips __post_init__: cells are already normalized
        new = Board.__new__(Board)
        new.cells = self.cells[:]
        return new

    def occupied(self) -> int:
        return sum(1 for v in self.cells if v != Cell.EMPTY)

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
