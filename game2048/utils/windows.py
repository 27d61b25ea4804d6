# -*- coding: utf-8 -*-
"""
Graphical window for the 2048 game.

The board is drawn with Matplotlib, one subplot per cell. The window also shows the score, the best
score and a banner once the game is over, and forwards keyboard and mouse-drag events to handlers.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, MouseEvent

from game2048.controls import Point
from game2048.envs.session import GameSnapshot


class WindowBoard:
    """
    Render a game session and capture user input.

    Methods
    -------
    show_snapshot(snapshot: GameSnapshot)
        Redraw the board, the scores and the game-over banner.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    register_drag_handlers(on_press: Callable, on_release: Callable)
        Register functions called when a mouse drag starts and ends.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Background colors per tile value.
    COLORS = {
        0: "#374151",
        2: "#E5E7EB",
        4: "#D1D5DB",
        8: "#EAB308",
        16: "#CA8A04",
        32: "#F97316",
        64: "#EA580C",
        128: "#EF4444",
        256: "#DC2626",
        512: "#6366F1",
        1024: "#4F46E5",
        2048: "#9333EA",
    }
    DARK_TEXT = frozenset({2, 4})

    def __init__(self, title: str, size: int):
        """
        Initialize the game window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (4 for a 4x4 board).
        """
        self.size = size
        self.fig = plt.figure(facecolor="#1F2937")
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.88, wspace=0.05, hspace=0.05)
        self.header = self.fig.suptitle("", color="white", fontsize="x-large", fontweight="bold")
        self.banner = self.fig.text(
            0.5, 0.45, "", ha="center", va="center", color="#EF4444", fontsize=32, fontweight="bold", zorder=10
        )

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            self.texts.append(ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="bold"))
            ax.set_xticks([])
            ax.set_yticks([])

    @staticmethod
    def font_size(value: int) -> str:
        """Smaller font for tiles with more digits."""
        if value >= 10000:
            return "medium"
        if value >= 1000:
            return "large"
        if value >= 100:
            return "x-large"
        return "xx-large"

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_snapshot(self, snapshot: GameSnapshot):
        """
        Show or update the game.

        Parameters
        ----------
        snapshot : GameSnapshot
            The session state to display.
        """
        for ax, text, value in zip(self.axes, self.texts, snapshot.grid.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_fontsize(self.font_size(value))
            text.set_color("#1F2937" if value in self.DARK_TEXT else "white")
            ax.set_facecolor(self.COLORS.get(value, "#000000"))

        self.header.set_text(f"SCORE {snapshot.score}    BEST {snapshot.best_score}")
        self.banner.set_text("Game Over!" if snapshot.terminal else "")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib key event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_drag_handlers(self, on_press: Callable[[Point], None], on_release: Callable[[Point], None]):
        """
        Register mouse-drag handlers.

        Parameters
        ----------
        on_press : Callable
            Called with the screen position where the mouse button went down.
        on_release : Callable
            Called with the screen position where the mouse button went up.

        Notes
        -----
        - Positions are converted to screen coordinates (y grows downward) from Matplotlib's pixel
          coordinates, where y grows upward.
        """

        def _position(event: MouseEvent) -> Point:
            return float(event.x), -float(event.y)

        self.fig.canvas.mpl_connect("button_press_event", lambda event: on_press(_position(event)))
        self.fig.canvas.mpl_connect("button_release_event", lambda event: on_release(_position(event)))

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
