# -*- coding: utf-8 -*-
"""
Play 2048 in a window, with the arrow keys or by dragging the mouse across the board.
"""
import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Optional, Sequence

from game2048.config import GameConfig
from game2048.controls import QUIT_KEYS, RESTART_KEYS, Point, SwipeTracker, direction_for_key
from game2048.core.gameboard import BOARD_SIZE
from game2048.core.gamemove import Direction
from game2048.envs import GameSession
from game2048.storage import JsonScoreStore
from game2048.utils import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(session: GameSession, window: WindowBoard):
    """
    Redraw the game.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    """
    window.show_snapshot(session.snapshot())


def reset(session: GameSession, window: WindowBoard):
    """
    Restart and redraw the game.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    """
    session.restart()
    redraw(session, window)


def step(session: GameSession, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    direction: Direction
        Move to apply
    """
    outcome = session.move(direction)
    if not outcome.changed:
        return

    _logger.debug("score=%d (+%d)", session.score, outcome.score)
    redraw(session, window)


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    event: Any
        Key event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key in QUIT_KEYS:
        window.close()
        return

    if event.key in RESTART_KEYS:
        reset(session, window)
        return

    direction = direction_for_key(event.key)
    if direction is not None:
        step(session, window, direction)


def swipe_handler(session: GameSession, window: WindowBoard, tracker: SwipeTracker, position: Point):
    """
    Handle the end of a mouse drag.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    tracker: SwipeTracker
        Tracker holding the position where the drag began
    position: Point
        Screen position where the drag ended
    """
    direction = tracker.release(position)
    if direction is not None:
        step(session, window, direction)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Play 2048.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile generator.")
    parser.add_argument("--scores", type=Path, default=None, help="JSON file holding the best score.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = GameConfig(seed=args.seed)
    if args.scores is not None:
        config.scores_path = args.scores

    session = GameSession(config=config, store=JsonScoreStore(config.scores_path))
    window = WindowBoard(title="2048 Game", size=BOARD_SIZE)
    swipes = SwipeTracker(threshold=config.swipe_threshold)

    window.register_key_handler(lambda event: key_handler(session, window, event))
    window.register_drag_handlers(swipes.press, lambda position: swipe_handler(session, window, swipes, position))

    redraw(session, window)

    # ##: Blocking event loop.
    window.show(block=True)


if __name__ == "__main__":
    main()
