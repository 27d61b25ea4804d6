# -*- coding: utf-8 -*-
"""
Board engine for the 2048 game.

It includes functions for sliding and merging lines, rotating the grid, applying moves, spawning tiles,
and checking whether the game is over.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    MoveOutcome,
    fill_cells,
    is_terminal,
    latent_move,
    move,
    new_grid,
    rotate90,
    slide_and_merge,
    slide_and_merge_line,
    spawn_tile,
    validate_grid,
)
from .gamemove import Direction, can_move, legal_directions

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveOutcome",
    "can_move",
    "fill_cells",
    "is_terminal",
    "latent_move",
    "legal_directions",
    "move",
    "new_grid",
    "rotate90",
    "slide_and_merge",
    "slide_and_merge_line",
    "spawn_tile",
    "validate_grid",
]
