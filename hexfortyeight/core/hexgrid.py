"""
Hexagonal grid model for the hex 2048 game: cube coordinates, tiles and boards.

A board of radius ``r`` holds one tile for every cube coordinate ``(x, y, z)`` with ``x + y + z = 0`` and
``max(|x|, |y|, |z|) <= r - 1``.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Iterable, Iterator, NamedTuple

from numpy import array, array_equal, int64, ndarray, zeros

logger = logging.getLogger(__name__)


class Axis(IntEnum):
    """Cube coordinate component, usable as an index into a ``Coordinate``."""

    X = 0
    Y = 1
    Z = 2


class Coordinate(NamedTuple):
    """Cube coordinate of a hex cell."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Tile:
    """
    A hex cell and its value.

    Attributes
    ----------
    id : int
        Stable identifier, assigned at grid creation in enumeration order (starting at 1).
    x, y, z : int
        Cube coordinate of the cell.
    value : int
        0 for an empty cell, otherwise a power of two.
    """

    id: int
    x: int
    y: int
    z: int
    value: int = 0

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y, self.z)


def board_size(radius: int) -> int:
    """Number of cells on a board of the given radius."""
    return 3 * radius * radius - 3 * radius + 1


def iter_coordinates(radius: int) -> Iterator[Coordinate]:
    """
    Enumerate the coordinates of a board.

    Parameters
    ----------
    radius : int
        Board radius.

    Yields
    ------
    Coordinate
        Every valid coordinate, ``x`` ascending then ``y`` ascending. This order fixes tile ids.
    """
    limit = radius - 1
    for x in range(-limit, limit + 1):
        for y in range(max(-limit, -x - limit), min(limit, -x + limit) + 1):
            yield Coordinate(x, y, -x - y)


@lru_cache(maxsize=None)
def _coordinates(radius: int) -> ndarray:
    coordinates = array(list(iter_coordinates(radius)), dtype=int64).reshape(-1, 3)
    coordinates.setflags(write=False)
    return coordinates


@lru_cache(maxsize=None)
def _index(radius: int) -> dict[Coordinate, int]:
    return {coordinate: i for i, coordinate in enumerate(iter_coordinates(radius))}


class Board:
    """
    Immutable hexagonal board.

    Values are stored in a read-only int64 vector aligned with the board's coordinate array, so the
    position of a tile in the board is ``id - 1``. Transformations never modify a board in place; they
    build a new one with ``with_values``.

    Parameters
    ----------
    radius : int
        Board radius, at least 2.
    values : Iterable[int], optional
        One value per cell in enumeration order (default is an empty board).
    """

    def __init__(self, radius: int, values: Iterable[int] | None = None):
        if isinstance(radius, bool) or not isinstance(radius, int) or radius < 2:
            raise ValueError(f'radius must be an integer >= 2, got {radius!r}')

        self.radius = radius
        size = board_size(radius)
        if values is None:
            state = zeros(size, dtype=int64)
        else:
            state = array(list(values), dtype=int64)
            if state.shape != (size,):
                raise ValueError(f'expected {size} values for radius {radius}, got {state.size}')

        state.setflags(write=False)
        self._values = state

    @property
    def coordinates(self) -> ndarray:
        """Read-only ``(n, 3)`` array of cube coordinates."""
        return _coordinates(self.radius)

    @property
    def values(self) -> ndarray:
        """Read-only vector of tile values."""
        return self._values

    @property
    def tiles(self) -> list[Tile]:
        return [
            Tile(id=i + 1, x=int(x), y=int(y), z=int(z), value=int(value))
            for i, ((x, y, z), value) in enumerate(zip(self.coordinates, self._values))
        ]

    def index_of(self, coordinate: Iterable[int]) -> int:
        """
        Position of a coordinate in the board.

        Raises
        ------
        KeyError
            If the coordinate is not on the board.
        """
        return _index(self.radius)[Coordinate(*coordinate)]

    def __contains__(self, coordinate: object) -> bool:
        try:
            return Coordinate(*coordinate) in _index(self.radius)
        except TypeError:
            return False

    def __getitem__(self, coordinate: Iterable[int]) -> int:
        return int(self._values[self.index_of(coordinate)])

    @classmethod
    def from_cells(cls, radius: int, cells: Iterable[tuple[Iterable[int], int]]) -> 'Board':
        """Build a board of the given radius holding ``cells``; every other tile is empty."""
        return cls(radius).updated(cells)

    def with_values(self, values: Iterable[int]) -> 'Board':
        """Build a board of the same radius with the given values."""
        return Board(self.radius, values)

    def updated(self, cells: Iterable[tuple[Iterable[int], int]]) -> 'Board':
        """
        Overwrite values by exact coordinate match.

        Parameters
        ----------
        cells : Iterable[tuple[Iterable[int], int]]
            ``(coordinate, value)`` pairs.

        Returns
        -------
        Board
            A new board. Coordinates absent from ``cells`` keep their value.

        Notes
        -----
        Coordinates that are not on the board are skipped with a warning.
        """
        index = _index(self.radius)
        state = self._values.copy()
        for coordinate, value in cells:
            position = index.get(Coordinate(*coordinate))
            if position is None:
                logger.warning('Ignoring cell %s outside of a radius %d board', tuple(coordinate), self.radius)
                continue
            state[position] = value
        return Board(self.radius, state)

    def non_empty(self) -> list[Tile]:
        return [tile for tile in self.tiles if tile.value != 0]

    def total(self) -> int:
        return int(self._values.sum())

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.radius == other.radius and array_equal(self._values, other._values)

    def __hash__(self) -> int:
        return hash((self.radius, self._values.tobytes()))

    def __repr__(self) -> str:
        return f'Board(radius={self.radius}, values={self._values.tolist()})'


def create_grid(radius: int) -> Board:
    """
    Create an empty board.

    Parameters
    ----------
    radius : int
        Board radius, at least 2.

    Returns
    -------
    Board
        A board with every value set to 0.

    Raises
    ------
    ValueError
        If the radius is smaller than 2.
    """
    return Board(radius)


def group_by_axis(board: Board, axis: Axis) -> dict[int, list[Tile]]:
    """
    Split a board into lines holding one axis constant.

    Parameters
    ----------
    board : Board
        The board to split.
    axis : Axis
        Axis held constant within a line.

    Returns
    -------
    dict[int, list[Tile]]
        Tiles keyed by their value on ``axis``. Each list keeps board order; it is not sorted.
    """
    groups: dict[int, list[Tile]] = {}
    for tile in board.tiles:
        groups.setdefault(tile.coordinate[axis], []).append(tile)
    return groups
