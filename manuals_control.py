# -*- coding: utf-8 -*-
"""
Play hexagonal 2048 Game
"""
import argparse
import logging
from typing import Any

from hexfortyeight.config import DEFAULT_HOSTNAME, DEFAULT_PORT, SessionConfig
from hexfortyeight.envs import GameStatus, HexTwentyFortyEight
from hexfortyeight.remote import RemoteMoveError
from hexfortyeight.utils.windows import WindowBoard

logger = logging.getLogger("manuals_control")


def redraw(window: WindowBoard, envs: HexTwentyFortyEight):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    envs: HexTwentyFortyEight
        The game session
    """
    window.show_image(envs.board)


def reset(envs: HexTwentyFortyEight, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: HexTwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    # ##: Reset the game.
    try:
        envs.reset()
    except RemoteMoveError as exc:
        logger.error("Cannot start a game: %s", exc)

    # ##: Redraw the game board.
    redraw(window, envs)


def step(envs: HexTwentyFortyEight, window: WindowBoard, key: str):
    """
    Applied a move into the game.

    Parameters
    ----------
    envs: HexTwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board

    key: str
        Move key
    """
    try:
        _, moved = envs.step(key)
    except RemoteMoveError as exc:
        logger.error("Move %s failed: %s", key, exc)
        return

    if moved:
        print(f"score={envs.score}")
        redraw(window, envs)
    if envs.status is GameStatus.GAME_OVER:
        print("game over!")


def key_handler(envs: HexTwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: HexTwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window)
        return None

    if event.key in envs.KEYS:
        step(envs, window, event.key)
        return None


def parse_args() -> SessionConfig:
    """
    Read the session parameters from the command line.

    Returns
    -------
    SessionConfig
        Parameters of the session.
    """
    parser = argparse.ArgumentParser(description="Play hexagonal 2048 against a move service.")
    parser.add_argument("--radius", type=int, default=2, help="board radius (2 to 6)")
    parser.add_argument("--hostname", default=DEFAULT_HOSTNAME, help="host of the move service")
    parser.add_argument("--port", default=DEFAULT_PORT, help="port of the move service (localhost only)")
    parser.add_argument("--timeout", type=float, default=5.0, help="request timeout in seconds")
    args = parser.parse_args()

    try:
        return SessionConfig(radius=args.radius, hostname=args.hostname, port=args.port, timeout=args.timeout)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = parse_args()

    with HexTwentyFortyEight(config) as env:
        window_board = WindowBoard(title="Hexagonal 2048 Game", radius=config.radius)
        reset(env, window_board)

        with window_board.key_subscription(lambda event: key_handler(env, window_board, event)):
            # Blocking event loop
            window_board.show(block=True)
