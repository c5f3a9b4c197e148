"""
Console game: human (O) against the minimax computer (X).
"""

import re
from typing import Callable, Optional

from .board import SIZE, Board, Cell, Move
from .config import GameConfig
from .rules import is_legal, is_terminal, winner
from .search import Minimax

COMPUTER = Cell.MAX
HUMAN = Cell.MIN

_MOVE_RE = re.compile(r"^\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*$")


def render_board(board: Board) -> str:
    """Pretty print board."""
    sep = "-" * (4 * SIZE + 1)
    lines = [sep]
    for r in range(SIZE):
        lines.append("| " + " | ".join(board.get(r, c).symbol for c in range(SIZE)) + " |")
        lines.append(sep)
    return "\n".join(lines)


def parse_move(text: str) -> Move:
    """Parse "row col" or "row,col" into a Move. Range is not checked here."""
    m = _MOVE_RE.match(text)
    if m is None:
        raise ValueError(f"Expected two numbers like '0 0', got {text!r}")
    return Move(int(m.group(1)), int(m.group(2)))


def result_message(board: Board) -> str:
    w = winner(board)
    if w == COMPUTER:
        return "Computer (X) wins!"
    if w == HUMAN:
        return "You (O) win!"
    return "It's a draw!"


def _read_human_move(board: Board, input_fn: Callable[[str], str], print_fn) -> Move:
    prompt = "Your turn (O). Enter row and column (e.g. 0 0): "
    while True:
        try:
            move = parse_move(input_fn(prompt))
        except ValueError:
            print_fn("Invalid input format. Enter row and column as numbers (e.g. 0 0).")
            continue
        if is_legal(board, move):
            return move
        print_fn("Invalid move. Cell is not empty or out of bounds. Try again.")


def play_console(
    config: GameConfig,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> Optional[Cell]:
    """
    Run one game on the console.

    Returns:
        The winner, or None for a draw or an aborted game.
    """
    config, warnings = config.validated()
    for w in warnings:
        print_fn(w)

    searcher = Minimax(config.evaluator)
    board = Board.empty()
    player = COMPUTER if config.computer_first else HUMAN

    print_fn(f"Difficulty (search depth): {config.depth}, evaluator: {config.evaluator}")
    print_fn("Computer (X) moves first." if config.computer_first else "You (O) move first.")

    while not is_terminal(board):
        print_fn(render_board(board))
        if player == COMPUTER:
            print_fn("Computer (X) is thinking...")
            result = searcher.search(board, config.depth, COMPUTER)
            move = result.move
            print_fn(f"Computer plays {move.row} {move.col} (score {result.score}, {result.nodes} positions)")
        else:
            try:
                move = _read_human_move(board, input_fn, print_fn)
            except (EOFError, KeyboardInterrupt):
                print_fn("\nGame aborted")
                return None

        board.place(move, player)
        player = player.opponent()

    print_fn(render_board(board))
    print_fn(result_message(board))
    return winner(board)
