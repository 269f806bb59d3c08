"""Hexagonal 2048 game session backed by a remote move service."""

import logging
from enum import Enum

from hexfortyeight.config import SessionConfig
from hexfortyeight.core import (
    Axis,
    Board,
    Direction,
    create_grid,
    group_by_axis,
    is_move_possible,
    parse_key,
    slide_board,
)
from hexfortyeight.remote import MoveClient

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Status shown next to the board."""

    NOT_STARTED = ''
    PLAYING = 'playing'
    GAME_OVER = 'game-over'


class HexTwentyFortyEight:
    """
    Hexagonal 2048 game session.

    The session keeps the current board, slides it locally on every key press and lets the move service
    decide the authoritative board (new tiles included). It handles one move at a time.

    Parameters
    ----------
    config : SessionConfig
        Session parameters, fixed for the lifetime of the session.
    client : MoveClient, optional
        Client of the move service (default is built from ``config``).
    """

    # ##: All Actions.
    KEYS = tuple(direction.value for direction in Direction)

    def __init__(self, config: SessionConfig, client: MoveClient | None = None):
        self.config = config
        self._client = client if client is not None else MoveClient(config.url, timeout=config.timeout)

        self._board = create_grid(config.radius)
        self._status = GameStatus.NOT_STARTED
        self._score = 0
        self._pending = False

    @property
    def board(self) -> Board:
        """Current board."""
        return self._board

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def score(self) -> int:
        """Sum of the values created by merges since the last reset."""
        return self._score

    @property
    def is_finished(self) -> bool:
        return self._status is GameStatus.GAME_OVER

    def reset(self) -> Board:
        """
        Start a new game.

        The move service is asked for the opening tiles of an empty board.

        Returns
        -------
        Board
            The opening board.

        Raises
        ------
        RemoteMoveError
            If the move service fails. The session keeps its previous board and status.
        """
        cells = self._client.resolve()

        self._board = create_grid(self.config.radius).updated(cells)
        self._score = 0
        self._set_status(GameStatus.PLAYING if is_move_possible(self._board) else GameStatus.GAME_OVER)
        return self._board

    def step(self, key: str) -> tuple[Board, bool]:
        """
        Apply a key press.

        Parameters
        ----------
        key : str
            Key pressed by the player. Anything other than q, w, e, a, s or d is ignored.

        Returns
        -------
        tuple[Board, bool]
            A tuple containing:
            - The current board after the key (Board)
            - Whether the key produced a move that was accepted by the move service (bool)

        Raises
        ------
        RemoteMoveError
            If the move service fails. The board, score and status stay as they were before the key.

        Notes
        -----
        - Moves that do not change the board are never sent to the move service.
        - Keys arriving while a move is being resolved are ignored.
        """
        direction = parse_key(key)
        if direction is None or self._pending:
            return self._board, False

        moved, shifted, reward = slide_board(self._board, direction)
        if not shifted:
            logger.debug('Move %s does not change the board', direction.value)
            return self._board, False

        self._pending = True
        try:
            cells = self._client.resolve(moved)
        finally:
            self._pending = False

        self._board = moved.updated(cells)
        self._score += reward
        logger.debug('Move %s accepted, score %d', direction.value, self._score)

        if not is_move_possible(self._board):
            self._set_status(GameStatus.GAME_OVER)
        return self._board, True

    def _set_status(self, status: GameStatus):
        if status is not self._status:
            logger.info('Game status: %s -> %s', self._status.value or 'not started', status.value)
        self._status = status

    def render(self) -> None:
        """
        Render the game board. This method prints one row per value of z, from top to bottom.
        """
        rows = group_by_axis(self._board, Axis.Z)
        width = max(len(rows[z]) for z in rows)
        for z in sorted(rows):
            row = sorted(rows[z], key=lambda tile: tile.x)
            print(' ' * 4 * (width - len(row)) + '\t'.join(str(tile.value or '.') for tile in row))

    def close(self):
        self._client.close()

    def __enter__(self) -> 'HexTwentyFortyEight':
        return self

    def __exit__(self, *exc_info):
        self.close()
