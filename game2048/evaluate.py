# -*- coding: utf-8 -*-
"""
Play random games and count the largest tile reached in each.
"""
import logging
from collections import Counter
from typing import Dict, Optional, Sequence

import numpy as np
from numpy.random import default_rng
from tqdm import trange

from game2048.config import GameConfig
from game2048.core.gamemove import Direction, legal_directions
from game2048.envs import GameSession

_logger = logging.getLogger(__name__)


def play_random(session: GameSession, rng: np.random.Generator) -> int:
    """
    Play one game with uniformly random legal moves.

    Parameters
    ----------
    session : GameSession
        A session with a fresh game.
    rng : Generator
        Random generator used to pick moves.

    Returns
    -------
    int
        Number of moves played.
    """
    moves = 0
    while not session.is_finished:
        directions = legal_directions(session.grid)
        session.move(Direction(rng.choice(directions)))
        moves += 1
    return moves


def evaluate(length: int = 10, seed: Optional[int] = None) -> Dict[int, int]:
    """
    Play random games.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed for both the moves and the spawned tiles.

    Returns
    -------
    Dict[int, int]
        How many games ended with each maximum tile.
    """
    session = GameSession(config=GameConfig(seed=seed))
    rng = default_rng(seed)
    score = []

    with trange(length) as period:
        for num in period:
            if num:
                session.restart()
            moves = play_random(session, rng)

            # ##: Log.
            period.set_description(f"Game: {num + 1}")
            period.set_postfix(score=session.score, max=int(np.max(session.grid)))
            _logger.debug("Game %d: %d moves, score %d", num + 1, moves, session.score)

            # ##: Save max cells.
            score.append(int(np.max(session.grid)))

    return dict(Counter(score))


def main(argv: Optional[Sequence[str]] = None):
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play random 2048 games.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    result = evaluate(length=args.games, seed=args.seed)
    print(f"Max tile frequency over {args.games} games: {result}")


if __name__ == "__main__":
    main()
