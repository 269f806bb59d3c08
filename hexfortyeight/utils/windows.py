# -*- coding: utf-8 -*-
"""
Graphical User Interface for the hexagonal 2048 game

This module provides a Matplotlib window displaying a hexagonal board. Each tile is drawn as a flat-top
hexagon colored by its value, and keyboard events can be subscribed to for the time a game is played.
"""
from contextlib import contextmanager
from math import radians
from typing import Callable, Iterator, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from matplotlib.patches import RegularPolygon

from hexfortyeight.core import Board, Direction
from hexfortyeight.utils.layout import hex_height, hex_size, hex_to_pixel, hex_width


def release_keys(keys: list[str]):
    """Remove keys from every Matplotlib keyboard shortcut."""
    for name in [name for name in plt.rcParams if name.startswith("keymap.")]:
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in keys]


class WindowBoard:
    """
    A class for rendering a hexagonal 2048 board using Matplotlib.

    Methods
    -------
    show_image(board: Board)
        Update the display with the current board.
    key_subscription(key_handler: Callable)
        Context manager connecting a keyboard handler for the duration of a block.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "none",
        2: "#efe5db",
        4: "#ece0c8",
        8: "#fdb375",
        16: "#fe975c",
        32: "#fe7b5c",
        64: "#fe5a34",
        128: "#ffcc4e",
        256: "#facc59",
        512: "#fdc932",
        1024: "#eeb601",
        2048: "#fe921a",
        4096: "#fe8601",
    }

    def __init__(self, title: str, radius: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        radius : int
            The radius of the hexagonal board.
        """
        # ##: Default Matplotlib shortcuts (q quits, s saves, ...) would steal the move keys.
        release_keys([direction.value for direction in Direction])

        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self.radius = radius
        self.closed = False
        self.patches: list[RegularPolygon] = []
        self.texts = []
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_tiles(self, board: Board):
        """
        Create one hexagon and one label per tile.

        Parameters
        ----------
        board : Board
            Board whose coordinates give the position of the tiles.
        """
        size = hex_size(self.radius)
        centers = hex_to_pixel(board.coordinates, self.radius)

        # ##: Square view around the outermost hexagons.
        limit = max(
            abs(centers[:, 0]).max() + hex_width(self.radius) / 2,
            abs(centers[:, 1]).max() + hex_height(self.radius) / 2,
        )
        self.axe.set_aspect("equal")
        self.axe.set_xlim(-limit, limit)
        self.axe.set_ylim(-limit, limit)
        self.axe.set_axis_off()

        for x, y in centers:
            patch = RegularPolygon(
                (x, -y), numVertices=6, radius=size, orientation=radians(30), edgecolor="#707070", linewidth=2
            )
            self.axe.add_patch(patch)
            self.patches.append(patch)
            self.texts.append(self.axe.text(x, -y, "", ha="center", va="center", fontsize="x-large"))

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        self.closed = True

    def show_image(self, board: Board):
        """
        Show or update the game board.

        Parameters
        ----------
        board : Board
            The current board to be displayed.
        """
        if not self.patches:
            self._setup_tiles(board)

        for patch, text, value in zip(self.patches, self.texts, board.values):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            patch.set_facecolor(self.COLORS.get(value, "#fe8601"))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    @contextmanager
    def key_subscription(self, key_handler: Callable) -> Iterator[int]:
        """
        Subscribe a keyboard handler for the duration of a ``with`` block.

        Parameters
        ----------
        key_handler : Callable
            A function called with every key press event of the window.

        Yields
        ------
        int
            The Matplotlib connection id of the handler.

        Notes
        -----
        The handler is disconnected when the block exits, whether it ends normally or with an exception.
        """
        connection = self.fig.canvas.mpl_connect("key_press_event", key_handler)
        try:
            yield connection
        finally:
            self.fig.canvas.mpl_disconnect(connection)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
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
