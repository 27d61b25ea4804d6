"""2048 game session: the grid, the score and the best score of one player."""

import logging
from dataclasses import dataclass
from enum import Enum

from numpy import ndarray
from numpy.random import default_rng

from game2048.config import GameConfig
from game2048.core.gameboard import MoveOutcome, is_terminal, move, new_grid
from game2048.core.gamemove import Direction
from game2048.storage.scores import MemoryScoreStore, ScoreStore, load_best_score

_logger = logging.getLogger(__name__)


class GameState(Enum):
    """States of a game session."""

    ACTIVE = 'active'
    TERMINAL = 'terminal'


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a session, for rendering.

    Attributes
    ----------
    grid : ndarray
        Copy of the current grid.
    score : int
        Current score.
    best_score : int
        Best score ever reached.
    terminal : bool
        Whether the game is over.
    """

    grid: ndarray
    score: int
    best_score: int
    terminal: bool


class GameSession:
    """
    A game of 2048.

    The session owns the grid and moves between two states: it starts ``ACTIVE`` and becomes
    ``TERMINAL`` after a move that leaves no possible move. A terminal session ignores moves until
    it is restarted.
    """

    def __init__(self, config: GameConfig | None = None, store: ScoreStore | None = None):
        """
        Initialize the session and start a game.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is ``GameConfig()``).
        store : ScoreStore, optional
            Where the best score is kept (default is an in-memory store).
        """
        self.config = config or GameConfig()
        self._store = store if store is not None else MemoryScoreStore()
        self._rng = default_rng(self.config.seed)

        self._best_score = load_best_score(self._store, self.config.best_score_key)
        self.restart()

    @property
    def grid(self) -> ndarray:
        """Copy of the current grid."""
        return self._grid.copy()

    @property
    def score(self) -> int:
        """Score of the current game."""
        return self._score

    @property
    def best_score(self) -> int:
        """Best score ever reached."""
        return self._best_score

    @property
    def state(self) -> GameState:
        """Current state of the session."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """True once no move can change the grid."""
        return self._state is GameState.TERMINAL

    def restart(self, seed: int | None = None) -> ndarray:
        """
        Start a new game with a fresh grid.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before creating the grid.

        Returns
        -------
        ndarray
            The new grid.

        Notes
        -----
        - The best score is kept across restarts.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._grid = new_grid(rng=self._rng, initial_tiles=self.config.initial_tiles, tile_probs=self.config.tile_probs)
        self._score = 0
        self._state = GameState.ACTIVE
        _logger.info('New game started (best score %d)', self._best_score)
        return self.grid

    def move(self, direction: Direction) -> MoveOutcome:
        """
        Play a move.

        Parameters
        ----------
        direction : Direction
            Direction of the move.

        Returns
        -------
        MoveOutcome
            The outcome of the move. It is a no-op outcome when the game is over or nothing moved.

        Notes
        -----
        - No-op moves change nothing: no tile, no score and no game-over check.
        - The best score is written to the store whenever the current score exceeds it.
        """
        if self._state is GameState.TERMINAL:
            return MoveOutcome(grid=self.grid, score=0, changed=False)

        outcome = move(self._grid, direction, rng=self._rng, tile_probs=self.config.tile_probs)
        if not outcome.changed:
            return outcome

        # ##: Commit the move.
        self._grid = outcome.grid.copy()
        self._score += outcome.score
        self._update_best_score()

        if is_terminal(self._grid):
            self._state = GameState.TERMINAL
            _logger.info('Game over with score %d', self._score)
        return outcome

    def _update_best_score(self) -> None:
        if self._score > self._best_score:
            self._best_score = self._score
            self._store.set(self.config.best_score_key, self._best_score)
            _logger.info('New best score %d', self._best_score)

    def snapshot(self) -> GameSnapshot:
        """Get a read-only view of the session."""
        return GameSnapshot(grid=self.grid, score=self._score, best_score=self._best_score, terminal=self.is_finished)

    def render(self) -> None:
        """
        Render the game. This method prints the score and the grid to the console.
        """
        print(f'score={self._score} best={self._best_score}')
        for row in self._grid.tolist():
            print(' \t'.join(map(str, row)))
        if self.is_finished:
            print('Game Over!')
