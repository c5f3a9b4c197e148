"""
Game and analysis configuration.
"""

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import List, Tuple

from .evaluator import EVALUATORS

DEFAULT_DEPTH = 3


@dataclass
class GameConfig:
    """Search and session configuration."""

    # Search depth in plies (9 or more searches the whole game)
    depth: int = DEFAULT_DEPTH

    # Evaluation strategy: "terminal" or "heuristic"
    evaluator: str = "heuristic"

    # Console play: computer (X) opens when True
    computer_first: bool = True

    # Analysis
    seed: int = 0
    games: int = 100

    # Paths
    save_dir: str = "runs"

    def validated(self) -> Tuple["GameConfig", List[str]]:
        """
        Return a corrected copy plus warnings.

        Depth below 1 falls back to the default; an unknown evaluator
        raises ValueError.
        """
        if self.evaluator not in EVALUATORS:
            valid = ", ".join(sorted(EVALUATORS))
            raise ValueError(f"Unknown evaluator {self.evaluator!r} (choose from: {valid})")

        warnings = []
        config = self
        if self.depth < 1:
            warnings.append(
                f"Depth should be at least 1. Using default depth {DEFAULT_DEPTH}."
            )
            config = replace(config, depth=DEFAULT_DEPTH)
        return config, warnings

    def save(self, path: Path):
        """Write config as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "GameConfig":
        with open(path) as f:
            return cls(**json.load(f))
