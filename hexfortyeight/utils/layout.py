"""
Geometry of a flat-top hexagonal board drawn inside a square canvas.
"""

from math import sqrt

from numpy import ndarray, stack

# ##>: Side of the square canvas the board fits into.
CANVAS_SIZE = 500.0


def hex_size(radius: int) -> float:
    """Distance from the center of a hex to one of its corners."""
    return CANVAS_SIZE / (3 * radius - 1)


def hex_width(radius: int) -> float:
    return hex_size(radius) * 2


def hex_height(radius: int) -> float:
    return hex_size(radius) * sqrt(3)


def hex_to_pixel(coordinates: ndarray, radius: int) -> ndarray:
    """
    Compute the center of flat-top hexes relative to the center of the board.

    Parameters
    ----------
    coordinates : ndarray
        ``(n, 3)`` array of cube coordinates.
    radius : int
        Board radius.

    Returns
    -------
    ndarray
        ``(n, 2)`` array of ``(x, y)`` centers, with ``y`` growing downward.
    """
    size = hex_size(radius)
    x = size * 1.5 * coordinates[:, 0]
    y = size * (sqrt(3) / 2 * coordinates[:, 0] + sqrt(3) * coordinates[:, 2])
    return stack([x, y], axis=1)
