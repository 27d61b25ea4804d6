# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `GameSession` class, which holds the grid, the score and the best score of a game.
"""

from .session import GameSession, GameSnapshot, GameState

__all__ = ["GameSession", "GameSnapshot", "GameState"]
