"""
Board engine for the 2048 game: sliding and merging tiles, spawning new ones and detecting the end of a game.

Every move is reduced to a left slide. The grid is rotated counter-clockwise so that the requested
direction points left, each row is slid and merged, then the grid is rotated back.
"""

import logging
from dataclasses import dataclass

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array_equal, int64, ndarray, rot90, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.core.gamemove import Direction

_logger = logging.getLogger(__name__)

# ##: Fixed board dimension.
BOARD_SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when the caller does not own one.
_GENERATOR = default_rng(PCG64DXSM())


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of applying a move to a grid.

    Attributes
    ----------
    grid : ndarray
        The grid after the move, including the spawned tile when the move changed something.
    score : int
        Sum of the values of the tiles created by merges during the move.
    changed : bool
        Whether the move changed the grid.
    """

    grid: ndarray
    score: int
    changed: bool


def validate_grid(grid: ndarray) -> None:
    """
    Check that a grid has the board dimensions.

    Raises
    ------
    ValueError
        If the grid is not a ``BOARD_SIZE`` x ``BOARD_SIZE`` matrix.
    """
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'Grid must have shape {(BOARD_SIZE, BOARD_SIZE)}, got {grid.shape}')


def slide_and_merge_line(line: ndarray) -> tuple[ndarray, int]:
    """
    Slide a single line to the left and merge equal neighbours.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row of the grid.

    Returns
    -------
    new_line : ndarray
        The line after sliding and merging, padded with zeros to its original length.
    score : int
        The sum of the merged tile values.

    Notes
    -----
    - Zeros are removed before merging, keeping the order of the other tiles.
    - A tile produced by a merge does not merge again in the same pass: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    tiles = line[line != 0]
    result = zeros(len(line), dtype=line.dtype)
    score = 0

    # ##: Walk the compacted tiles, consuming two when they merge.
    position, i = 0, 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged = int(tiles[i]) * 2
            result[position] = merged
            score += merged
            i += 2
        else:
            result[position] = tiles[i]
            i += 1
        position += 1

    return result, score


def slide_and_merge(grid: ndarray) -> tuple[ndarray, int]:
    """
    Slide every row of the grid to the left.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    new_grid : ndarray
        The grid after sliding and merging every row.
    score : int
        The total score of all merges.
    """
    result = zeros(grid.shape, dtype=grid.dtype)
    score = 0

    for i, row in enumerate(grid):
        result[i], row_score = slide_and_merge_line(row)
        score += row_score

    return result, score


def rotate90(grid: ndarray, k: int = 1) -> ndarray:
    """
    Rotate the grid counter-clockwise by ``k`` quarter turns.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    k : int, optional
        Number of quarter turns (default is 1).

    Returns
    -------
    ndarray
        A new rotated grid; the input is left untouched.
    """
    return rot90(grid, k=k % 4).copy()


def latent_move(grid: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Apply a move without spawning a new tile.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    direction : Direction
        Direction of the move.

    Returns
    -------
    new_grid : ndarray
        The grid after sliding and merging.
    score : int
        The score gained by the move.
    """
    direction = Direction(direction)
    normalized = rotate90(grid, k=direction.rotations)
    slid, score = slide_and_merge(normalized)
    return rotate90(slid, k=direction.inverse_rotations), score


def fill_cells(
    grid: ndarray, number_tile: int, rng: Generator | None = None, tile_probs: dict[int, float] | None = None
) -> ndarray:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    grid : ndarray
        The game grid. **Modified in-place.**
    number_tile : int
        Number of tiles to add.
    rng : Generator, optional
        Random generator; the module generator is used when omitted.
    tile_probs : dict[int, float], optional
        Probability of each spawned value (default is ``TILE_SPAWN_PROBS``).

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - Cells are chosen uniformly among the empty ones.
    - If there are fewer empty cells than requested, all of them are filled.
    """
    rng = rng if rng is not None else _GENERATOR
    tile_probs = tile_probs or TILE_SPAWN_PROBS

    available_cells = argwhere(grid == 0)
    count = min(number_tile, len(available_cells))
    if count == 0:
        return grid

    values = rng.choice(list(tile_probs), size=count, p=list(tile_probs.values()))
    chosen = rng.choice(len(available_cells), size=count, replace=False)
    grid[tuple(available_cells[chosen].T)] = values

    _logger.debug('Spawned %s at %s', values.tolist(), available_cells[chosen].tolist())
    return grid


def spawn_tile(grid: ndarray, rng: Generator | None = None, tile_probs: dict[int, float] | None = None) -> ndarray:
    """Return a copy of the grid with one new tile in a random empty cell."""
    return fill_cells(grid.copy(), number_tile=1, rng=rng, tile_probs=tile_probs)


def new_grid(
    rng: Generator | None = None, initial_tiles: int = 2, tile_probs: dict[int, float] | None = None
) -> ndarray:
    """
    Create a fresh grid seeded with starting tiles.

    Parameters
    ----------
    rng : Generator, optional
        Random generator; the module generator is used when omitted.
    initial_tiles : int, optional
        Number of starting tiles (default is 2).
    tile_probs : dict[int, float], optional
        Probability of each spawned value.

    Returns
    -------
    ndarray
        A ``BOARD_SIZE`` x ``BOARD_SIZE`` grid.
    """
    grid = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
    return fill_cells(grid, number_tile=initial_tiles, rng=rng, tile_probs=tile_probs)


def move(
    grid: ndarray, direction: Direction, rng: Generator | None = None, tile_probs: dict[int, float] | None = None
) -> MoveOutcome:
    """
    Apply a move and spawn a tile if the grid changed.

    Parameters
    ----------
    grid : ndarray
        The current game grid. Not modified.
    direction : Direction
        Direction of the move.
    rng : Generator, optional
        Random generator used for the spawned tile.
    tile_probs : dict[int, float], optional
        Probability of each spawned value.

    Returns
    -------
    MoveOutcome
        The new grid, the score gained and whether anything changed.

    Notes
    -----
    - A move that leaves the grid unchanged is a no-op: no tile is spawned and the score is 0.
    """
    validate_grid(grid)
    slid, score = latent_move(grid, direction)

    if array_equal(slid, grid):
        return MoveOutcome(grid=grid.copy(), score=0, changed=False)

    # ##: Spawn one tile into the moved grid.
    spawned = fill_cells(slid, number_tile=1, rng=rng, tile_probs=tile_probs)
    _logger.debug('Moved %s, gained %d', Direction(direction).name.lower(), score)
    return MoveOutcome(grid=spawned, score=score, changed=True)


def is_terminal(grid: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    bool
        True when there is no empty cell and no two adjacent cells hold the same value.
    """
    return bool(
        np_all(grid != 0) and not np_any(grid[:-1] == grid[1:]) and not np_any(grid[:, :-1] == grid[:, 1:])
    )
