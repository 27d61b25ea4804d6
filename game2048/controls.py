# -*- coding: utf-8 -*-
"""
Translate raw input into game commands.

Keys use Matplotlib key names. Swipes are read in screen coordinates, where y grows downward.
"""
from typing import Optional, Tuple

from game2048.config import SWIPE_THRESHOLD
from game2048.core.gamemove import Direction

Point = Tuple[float, float]

# ##: Keyboard bindings.
KEY_BINDINGS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
RESTART_KEYS = frozenset({"backspace", "n"})
QUIT_KEYS = frozenset({"escape", "q"})


def direction_for_key(key: Optional[str]) -> Optional[Direction]:
    """
    Get the direction bound to a key.

    Parameters
    ----------
    key : str, optional
        Matplotlib key name.

    Returns
    -------
    Direction, optional
        The bound direction, or None for any other key.
    """
    if key is None:
        return None
    return KEY_BINDINGS.get(key.lower())


def interpret_swipe(start: Point, end: Point, threshold: float = SWIPE_THRESHOLD) -> Optional[Direction]:
    """
    Turn a drag from ``start`` to ``end`` into a direction.

    Parameters
    ----------
    start : Point
        Position where the drag began.
    end : Point
        Position where the drag ended.
    threshold : float, optional
        Minimum displacement on the dominant axis (default is 30).

    Returns
    -------
    Direction, optional
        The swipe direction, or None when the drag is too short.

    Notes
    -----
    - The axis with the larger absolute displacement wins; ties go to the vertical axis.
    - Tiles follow the drag: a downward drag moves them down.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if max(abs(dx), abs(dy)) <= threshold:
        return None

    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeTracker:
    """
    Follow one drag at a time and resolve it into a direction.

    Parameters
    ----------
    threshold : float, optional
        Minimum displacement for a swipe.
    """

    def __init__(self, threshold: float = SWIPE_THRESHOLD):
        self.threshold = threshold
        self._start: Optional[Point] = None

    @property
    def active(self) -> bool:
        """True while a drag is in progress."""
        return self._start is not None

    def press(self, position: Point) -> None:
        """Record where a drag begins."""
        self._start = position

    def release(self, position: Point) -> Optional[Direction]:
        """
        End the drag.

        Returns
        -------
        Direction, optional
            The swipe direction, or None if no drag was started or it was too short.
        """
        start, self._start = self._start, None
        if start is None:
            return None
        return interpret_swipe(start, position, threshold=self.threshold)
