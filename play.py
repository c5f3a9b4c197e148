#!/usr/bin/env python3
"""
Play TicTacToe against the minimax computer.

Usage:
    python play.py                          # depth 3, heuristic evaluator
    python play.py --depth 9                # perfect play
    python play.py --evaluator terminal --human-first
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from ttt_minimax import EVALUATORS, GameConfig, play_console


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe vs minimax")
    parser.add_argument("--depth", type=int, default=3, help="Search depth (higher is harder)")
    parser.add_argument("--evaluator", type=str, default="heuristic",
                        choices=sorted(EVALUATORS), help="Position evaluator")
    parser.add_argument("--human-first", action="store_true", help="You (O) make the first move")

    args = parser.parse_args()

    config = GameConfig(
        depth=args.depth,
        evaluator=args.evaluator,
        computer_first=not args.human_first,
    )

    print("Welcome to Tic-Tac-Toe vs Computer (Minimax)!")
    play_console(config)


if __name__ == "__main__":
    main()
