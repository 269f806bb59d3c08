"""
Tests for the board geometry and the Matplotlib window.
"""

from math import sqrt
from unittest import TestCase, main

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
from matplotlib import pyplot as plt  # noqa: E402
from matplotlib.backend_bases import KeyEvent  # noqa: E402

from hexfortyeight.core import Board, apply_move, create_grid  # noqa: E402
from hexfortyeight.utils import hex_height, hex_size, hex_to_pixel, hex_width  # noqa: E402
from hexfortyeight.utils.windows import WindowBoard  # noqa: E402


class TestLayout(TestCase):
    """Flat-top hexagon geometry."""

    def test_sizes(self):
        self.assertAlmostEqual(hex_size(2), 100.0)
        self.assertAlmostEqual(hex_width(2), 200.0)
        self.assertAlmostEqual(hex_height(2), 100.0 * sqrt(3))

    def test_center_tile(self):
        centers = hex_to_pixel(np.array([[0, 0, 0]]), radius=3)
        np.testing.assert_allclose(centers, [[0.0, 0.0]])

    def test_neighbours_are_equidistant(self):
        """The six neighbours of the center sit one hex height away."""
        board = create_grid(2)
        centers = hex_to_pixel(board.coordinates, radius=2)
        distances = np.linalg.norm(np.delete(centers, board.index_of((0, 0, 0)), axis=0), axis=1)
        np.testing.assert_allclose(distances, hex_height(2))

    def test_keys_follow_the_screen(self):
        """q, w and e slide up on screen, a, s and d slide down."""
        board = Board.from_cells(2, [((0, 0, 0), 2)])
        expected = {"q": (-1, -1), "w": (0, -1), "e": (1, -1), "a": (-1, 1), "s": (0, 1), "d": (1, 1)}

        for key, (horizontal, vertical) in expected.items():
            moved, _ = apply_move(board, key)
            (x, y), = hex_to_pixel(np.array([moved.non_empty()[0].coordinate]), radius=2)
            self.assertEqual(int(np.sign(np.round(x, 6))), horizontal, key)
            self.assertEqual(int(np.sign(np.round(y, 6))), vertical, key)


class TestWindowBoard(TestCase):
    """Window drawing and keyboard subscription."""

    def setUp(self):
        self.rc = plt.rc_context()
        self.rc.__enter__()
        self.window = WindowBoard(title="test", radius=2)

    def tearDown(self):
        self.window.close()
        self.rc.__exit__(None, None, None)

    def test_move_keys_are_released(self):
        """Matplotlib shortcuts no longer use the move keys."""
        for name in plt.rcParams:
            if name.startswith("keymap."):
                self.assertFalse(set(plt.rcParams[name]) & {"q", "w", "e", "a", "s", "d"})

    def test_show_image(self):
        board = Board.from_cells(2, [((0, 0, 0), 128)])
        self.window.show_image(board)

        self.assertEqual(len(self.window.patches), 7)
        self.assertEqual([text.get_text() for text in self.window.texts], ["", "", "", "128", "", "", ""])

    def test_view_holds_the_board(self):
        """The square view encloses the outermost hexagons."""
        self.window.show_image(create_grid(2))

        limit = 1.5 * hex_height(2)
        np.testing.assert_allclose(self.window.axe.get_xlim(), (-limit, limit))
        np.testing.assert_allclose(self.window.axe.get_ylim(), (-limit, limit))
        self.assertGreaterEqual(limit, 150.0 + hex_width(2) / 2)

    def press(self, key: str) -> KeyEvent:
        event = KeyEvent("key_press_event", self.window.fig.canvas, key)
        self.window.fig.canvas.callbacks.process(event.name, event)
        return event

    def test_key_subscription(self):
        """The handler only receives events while subscribed."""
        received = []

        with self.window.key_subscription(received.append):
            self.press("w")
        self.press("s")

        self.assertEqual([event.key for event in received], ["w"])

    def test_key_subscription_released_on_error(self):
        received = []

        with self.assertRaises(RuntimeError):
            with self.window.key_subscription(received.append):
                raise RuntimeError("stop")
        self.press("q")

        self.assertEqual(received, [])


if __name__ == "__main__":
    main()
