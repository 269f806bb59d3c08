"""
HTTP client of the move resolution service.

The service receives the non-empty tiles of a board and answers with the authoritative cells of the board,
typically the moved tiles plus the ones it spawned.
"""

import logging
from typing import Any

import httpx

from hexfortyeight.core import Board, Coordinate

logger = logging.getLogger(__name__)

Cell = tuple[Coordinate, int]

# ##>: Largest power of two an int64 board holds.
MAX_VALUE = 2**62


class RemoteMoveError(RuntimeError):
    """The move service could not be reached or sent back an unusable answer."""


def encode_board(board: Board) -> list[dict[str, int]]:
    """
    Build the request payload of a board.

    Parameters
    ----------
    board : Board
        The board to send.

    Returns
    -------
    list[dict[str, int]]
        One ``{"x", "y", "z", "value"}`` object per non-empty tile; empty tiles are left out.
    """
    return [{'x': tile.x, 'y': tile.y, 'z': tile.z, 'value': tile.value} for tile in board.non_empty()]


def decode_cells(payload: Any) -> list[Cell]:
    """
    Read the cells of a service answer.

    Parameters
    ----------
    payload : Any
        Decoded JSON body.

    Returns
    -------
    list[Cell]
        ``(coordinate, value)`` pairs.

    Raises
    ------
    RemoteMoveError
        If the body is not a list of objects with integer ``x``, ``y``, ``z`` and ``value``, or if a value
        is neither 0 nor a power of two that fits the board.
    """
    if not isinstance(payload, list):
        raise RemoteMoveError(f'expected a list of cells, got {type(payload).__name__}')

    cells = []
    for item in payload:
        try:
            x, y, z, value = (item[key] for key in ('x', 'y', 'z', 'value'))
        except (KeyError, TypeError) as exc:
            raise RemoteMoveError(f'malformed cell {item!r}') from exc

        if not all(isinstance(field, int) and not isinstance(field, bool) for field in (x, y, z, value)):
            raise RemoteMoveError(f'malformed cell {item!r}')
        if value != 0 and not (2 <= value <= MAX_VALUE and value & (value - 1) == 0):
            raise RemoteMoveError(f'cell value {value} is not an empty tile or a power of two')
        cells.append((Coordinate(x, y, z), value))
    return cells


class MoveClient:
    """
    Client of the move resolution service.

    Parameters
    ----------
    url : str
        Endpoint of the service for the session's radius.
    timeout : float, optional
        Request timeout in seconds (default is 5).
    transport : httpx.BaseTransport, optional
        Custom transport, mostly for tests.
    """

    def __init__(self, url: str, timeout: float = 5.0, transport: httpx.BaseTransport | None = None):
        self.url = url
        self._client = httpx.Client(
            timeout=timeout, transport=transport, follow_redirects=True, headers={'Cache-Control': 'no-cache'}
        )

    def resolve(self, board: Board | None = None) -> list[Cell]:
        """
        Submit a board and fetch the authoritative cells.

        Parameters
        ----------
        board : Board, optional
            The moved board. None sends an empty list, which opens a new game.

        Returns
        -------
        list[Cell]
            Cells returned by the service.

        Raises
        ------
        RemoteMoveError
            On transport errors, non-success statuses and malformed bodies.
        """
        payload = encode_board(board) if board is not None else []
        logger.debug('POST %s with %d tiles', self.url, len(payload))

        try:
            response = self._client.post(self.url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            raise RemoteMoveError(f'move service request failed: {exc}') from exc
        except ValueError as exc:
            raise RemoteMoveError('move service sent back invalid JSON') from exc

        return decode_cells(body)

    def close(self):
        self._client.close()

    def __enter__(self) -> 'MoveClient':
        return self

    def __exit__(self, *exc_info):
        self.close()
