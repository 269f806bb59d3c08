"""
Move directions for the hex 2048 game: which lines a key slides and toward which end.
"""

from enum import Enum
from typing import Iterator, NamedTuple

from hexfortyeight.core.hexgrid import Axis, Board, Tile, group_by_axis


class Direction(str, Enum):
    """The six move keys."""

    Q = 'q'
    W = 'w'
    E = 'e'
    A = 'a'
    S = 's'
    D = 'd'


class Slide(NamedTuple):
    """
    How a direction cuts and orders the board.

    Attributes
    ----------
    axis : Axis
        Axis held constant within a line.
    secondary : Axis
        Axis used to order the tiles of a line.
    sign : int
        Multiplier of the secondary coordinate; lines are sorted by ``coordinate[secondary] * sign``
        ascending and tiles slide toward the first element.
    """

    axis: Axis
    secondary: Axis
    sign: int


DIRECTIONS: dict[Direction, Slide] = {
    Direction.Q: Slide(Axis.Z, Axis.Y, -1),
    Direction.D: Slide(Axis.Z, Axis.Y, 1),
    Direction.W: Slide(Axis.X, Axis.Y, -1),
    Direction.S: Slide(Axis.X, Axis.Y, 1),
    Direction.A: Slide(Axis.Y, Axis.Z, -1),
    Direction.E: Slide(Axis.Y, Axis.Z, 1),
}

# ##>: Order in which the termination check probes directions.
PROBE_ORDER = (Direction.Q, Direction.W, Direction.E, Direction.A, Direction.S, Direction.D)


def parse_key(key: object) -> Direction | None:
    """
    Map an input token to a direction.

    Parameters
    ----------
    key : object
        Key pressed by the player.

    Returns
    -------
    Direction | None
        The matching direction, or None when the token is not a move key.
    """
    if isinstance(key, Direction):
        return key
    try:
        return Direction(key)
    except ValueError:
        return None


def sort_line(tiles: list[Tile], direction: Direction) -> list[Tile]:
    """Order a line so that tiles slide toward its first element."""
    slide = DIRECTIONS[direction]
    return sorted(tiles, key=lambda tile: tile.coordinate[slide.secondary] * slide.sign)


def iter_lines(board: Board, direction: Direction) -> Iterator[list[Tile]]:
    """
    Yield every line of the board for a direction, each sorted toward its slide end.

    Parameters
    ----------
    board : Board
        The board to cut.
    direction : Direction
        Move direction.

    Yields
    ------
    list[Tile]
        One sorted line per distinct value of the direction's axis.
    """
    for line in group_by_axis(board, DIRECTIONS[direction].axis).values():
        yield sort_line(line, direction)
