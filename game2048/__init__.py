# -*- coding: utf-8 -*-
"""
Single-player 2048: board engine, game session and best-score persistence.
"""

from .config import GameConfig
from .core import Direction, MoveOutcome
from .envs import GameSession, GameSnapshot, GameState

__all__ = ["Direction", "GameConfig", "GameSession", "GameSnapshot", "GameState", "MoveOutcome"]
