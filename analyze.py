#!/usr/bin/env python3
"""
Analyze the minimax player: evaluator bounds, self-play, strength vs random
and agreement with full-depth search at each depth.

Usage:
    python analyze.py                         # heuristic evaluator, depths 1-4
    python analyze.py --evaluator terminal --depths 1 2 3
    python analyze.py --games 500 --skip-agreement
"""

import sys
import json
import time
import argparse
from dataclasses import replace
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from ttt_minimax import (
    EVALUATORS,
    GameConfig,
    Minimax,
    heuristic_bounds,
    play_self_play,
    eval_vs_random,
    eval_depth_agreement,
    iter_all_legal_nonterminal_states,
    render_board,
)


def main():
    parser = argparse.ArgumentParser(description="Analyze TicTacToe minimax")
    parser.add_argument("--evaluator", type=str, default="heuristic",
                        choices=sorted(EVALUATORS), help="Position evaluator")
    parser.add_argument("--depths", type=int, nargs="+", default=[1, 2, 3, 4], help="Depths to test")
    parser.add_argument("--games", type=int, default=100, help="Games vs random per depth")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--skip-agreement", action="store_true",
                        help="Skip the exhaustive depth agreement check (slow)")
    parser.add_argument("--run-name", type=str, default="analysis", help="Run name for saving")
    parser.add_argument("--save-dir", type=str, default="runs", help="Save directory")

    args = parser.parse_args()

    config = GameConfig(
        evaluator=args.evaluator,
        seed=args.seed,
        games=args.games,
        save_dir=args.save_dir,
    )
    run_dir = Path(config.save_dir) / args.run_name
    run_dir.mkdir(parents=True, exist_ok=True)

    report = {"config": None, "bounds": None, "self_play": None, "depths": []}

    # Evaluator bounds
    print("\n=== Evaluator Bounds ===")
    searcher = Minimax(config.evaluator)
    bounds = heuristic_bounds(searcher.evaluator, progress=True)
    report["bounds"] = bounds
    print(f"  States:    {bounds['n_states']} ({bounds['n_distinct']} up to symmetry)")
    print(f"  Score min: {bounds['score_min']}")
    print(f"  Score max: {bounds['score_max']}")

    # Full-depth self-play
    print("\n=== Full-Depth Self-Play ===")
    t0 = time.perf_counter()
    board, winner, moves = play_self_play(searcher, depth=9)
    elapsed = time.perf_counter() - t0
    print(render_board(board))
    print(f"  Moves:  {[tuple(m) for m in moves]}")
    print(f"  Result: {'draw' if winner is None else winner.symbol + ' wins'} ({elapsed:.1f}s)")
    report["self_play"] = {
        "moves": [list(m) for m in moves],
        "winner": None if winner is None else winner.symbol,
        "seconds": elapsed,
    }

    states = None if args.skip_agreement else list(iter_all_legal_nonterminal_states())

    print("\n=== Depth Sweep ===")
    for depth in tqdm(args.depths, desc="Depths"):
        depth_config, warnings = replace(config, depth=depth).validated()
        for w in warnings:
            tqdm.write(f"  {w}")

        row = {"depth": depth_config.depth}
        rnd = eval_vs_random(searcher, depth_config.depth, games=config.games, seed=config.seed)
        row.update(rnd)
        tqdm.write(f"Depth {depth_config.depth} vs Random: {rnd['search_w']:.2%} W / "
                   f"{rnd['search_d']:.2%} D / {rnd['search_l']:.2%} L")

        if states is not None:
            agree = eval_depth_agreement(searcher, depth_config.depth, states=states)
            row["optimal_rate"] = agree["optimal_rate"]
            row["nodes_mean"] = agree["nodes_mean"]
            tqdm.write(f"Depth {depth_config.depth} optimal moves: {agree['optimal_rate']:.2%} "
                       f"({agree['nodes_mean']:.0f} positions/search)")

        report["depths"].append(row)

    # Save
    print("\n=== Saving ===")
    config.save(run_dir / "config.json")
    report["config"] = str(run_dir / "config.json")
    with open(run_dir / "report.json", "w") as f:
        json.dump(report, f, indent=2)
    print(f"✓ Report saved to {run_dir / 'report.json'}")


if __name__ == "__main__":
    main()
