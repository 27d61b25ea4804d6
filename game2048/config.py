# -*- coding: utf-8 -*-
"""
Configuration for a 2048 game session.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

BEST_SCORE_KEY = "topScore2048"
SWIPE_THRESHOLD = 30.0


def _default_scores_path() -> Path:
    return Path.home() / ".game2048" / "scores.json"


@dataclass
class GameConfig:
    """
    Game configuration.

    Attributes
    ----------
    initial_tiles : int
        Number of tiles placed on a fresh grid.
    tile_probs : dict[int, float]
        Probability of each value for a spawned tile.
    best_score_key : str
        Key of the best score in the score store.
    swipe_threshold : float
        Minimum displacement for a drag to count as a swipe.
    scores_path : Path
        JSON file holding the best score.
    seed : int, optional
        Seed of the session random generator.
    """

    initial_tiles: int = 2
    tile_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})
    best_score_key: str = BEST_SCORE_KEY
    swipe_threshold: float = SWIPE_THRESHOLD
    scores_path: Path = field(default_factory=_default_scores_path)
    seed: Optional[int] = None

    def __post_init__(self):
        if self.initial_tiles < 0:
            raise ValueError(f"initial_tiles must be >= 0, got {self.initial_tiles}")
        if abs(sum(self.tile_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f"tile_probs must sum to 1, got {self.tile_probs}")
        if self.swipe_threshold < 0:
            raise ValueError(f"swipe_threshold must be >= 0, got {self.swipe_threshold}")
        self.scores_path = Path(self.scores_path)
