"""
Move directions for the 2048 game, with helpers to parse them and to find which ones change a board.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four directions a move can take.

    The value of each member is the number of counter-clockwise quarter turns that brings the
    direction onto a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def rotations(self) -> int:
        """Quarter turns applied before sliding left."""
        return int(self)

    @property
    def inverse_rotations(self) -> int:
        """Quarter turns that restore the original orientation."""
        return (4 - int(self)) % 4

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        """
        Get a direction from its name.

        Parameters
        ----------
        name : str
            Direction name, case-insensitive (``left``, ``up``, ``right``, ``down``).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name is not a known direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None


def legal_directions_mask(grid: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the grid.
    """
    # ##>: Horizontal and vertical merges are shared by opposite directions.
    left_cols, right_cols = grid[:, :-1], grid[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = grid[:-1, :], grid[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile can slide when the neighbour in the move direction is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(grid: ndarray) -> list[Direction]:
    """
    Directions that change the grid when applied.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    list[Direction]
        Legal directions, in (left, up, right, down) order.
    """
    mask = legal_directions_mask(grid)
    return [direction for direction in Direction if mask[direction]]


def can_move(grid: ndarray, direction: Direction) -> bool:
    """Check if moving in ``direction`` changes the grid."""
    return legal_directions_mask(grid)[Direction(direction)]
