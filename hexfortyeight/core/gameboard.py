"""
Core game logic for the hex 2048 game: sliding and merging lines, applying moves, detecting the end of a game.
"""

from dataclasses import replace
from typing import Sequence

from numpy import array, int64, ndarray

from hexfortyeight.core.gamemove import PROBE_ORDER, Direction, iter_lines, parse_key
from hexfortyeight.core.hexgrid import Board, Tile


def _merge(values: Sequence[int]) -> tuple[ndarray, bool, int]:
    """
    Slide and merge a line toward index 0, keeping track of the merge score.

    Parameters
    ----------
    values : Sequence[int]
        Tile values of the line, in slide order.

    Returns
    -------
    line : ndarray
        A new array holding the line after the move.
    shifted : bool
        Whether any value changed.
    score : int
        Sum of the values created by merges.
    """
    line = array(values, dtype=int64)
    shifted = False
    score = 0

    # ##: j is the settle position, i scans ahead of it.
    j = 0
    for i in range(1, len(line)):
        if line[i] == 0:
            continue

        if line[j] == 0:
            line[j] = line[i]
            line[i] = 0
            shifted = True
        elif line[j] == line[i]:
            # ##>: Closing slot j after a merge stops it from merging twice.
            line[j] += line[i]
            line[i] = 0
            score += int(line[j])
            j += 1
            shifted = True
        else:
            if j + 1 < len(line) and line[j + 1] == 0:
                line[j + 1] = line[i]
                line[i] = 0
                shifted = True
            j += 1

    return line, shifted, score


def merge_line(values: Sequence[int]) -> tuple[ndarray, bool]:
    """
    Slide the non-zero values of a line toward index 0 and merge equal neighbours.

    Parameters
    ----------
    values : Sequence[int]
        Tile values of the line, in slide order. Never modified.

    Returns
    -------
    line : ndarray
        The line after the move.
    shifted : bool
        Whether any value changed.

    Notes
    -----
    - A single left-to-right pass; each tile merges at most once.
    - ``[0, 2, 0, 2, 4]`` becomes ``[4, 4, 0, 0, 0]``, ``[2, 2, 0, 4, 4]`` becomes ``[4, 8, 0, 0, 0]``.
    """
    line, shifted, _ = _merge(values)
    return line, shifted


def shift_and_merge(tiles: Sequence[Tile]) -> tuple[list[Tile], bool]:
    """
    Apply ``merge_line`` to a line of tiles.

    Parameters
    ----------
    tiles : Sequence[Tile]
        A sorted line.

    Returns
    -------
    tiles : list[Tile]
        New tiles with the same ids and coordinates, carrying the moved values.
    shifted : bool
        Whether any value changed.
    """
    line, shifted = merge_line([tile.value for tile in tiles])
    return [replace(tile, value=int(value)) for tile, value in zip(tiles, line)], shifted


def slide_board(board: Board, direction: Direction) -> tuple[Board, bool, int]:
    """
    Slide every line of the board in one direction.

    Returns
    -------
    board : Board
        The board after the move; the same board when nothing moved.
    shifted : bool
        Whether any line changed.
    score : int
        Sum of the values created by merges.
    """
    state = board.values.copy()
    shifted = False
    score = 0

    for line in iter_lines(board, direction):
        moved, line_shifted, line_score = _merge([tile.value for tile in line])
        if not line_shifted:
            continue

        shifted = True
        score += line_score

        # ##: Lines are sorted, so values go back by coordinate rather than by position.
        for tile, value in zip(line, moved):
            state[board.index_of(tile.coordinate)] = value

    if not shifted:
        return board, False, 0
    return board.with_values(state), True, score


def apply_move(board: Board, direction: Direction | str) -> tuple[Board, bool]:
    """
    Apply a move to the board.

    Parameters
    ----------
    board : Board
        The current board. Never modified.
    direction : Direction | str
        Move direction, or its key.

    Returns
    -------
    board : Board
        The board after the move; the same board when nothing moved.
    shifted : bool
        Whether the move changed the board.

    Notes
    -----
    - An unknown key is a no-op.
    - A move that does not shift anything must not be sent to the move service.
    """
    key = parse_key(direction)
    if key is None:
        return board, False

    new_board, shifted, _ = slide_board(board, key)
    return new_board, shifted


def latent_state(board: Board, direction: Direction | str) -> tuple[Board, int]:
    """
    Compute the board after a move, without spawning any tile.

    Parameters
    ----------
    board : Board
        The current board.
    direction : Direction | str
        Move direction, or its key.

    Returns
    -------
    board : Board
        The board after the move.
    reward : int
        Sum of the values created by merges.
    """
    key = parse_key(direction)
    if key is None:
        return board, 0

    new_board, _, reward = slide_board(board, key)
    return new_board, reward


def can_move(board: Board, direction: Direction) -> bool:
    """Check whether a move in one direction would change the board."""
    return any(_merge([tile.value for tile in line])[1] for line in iter_lines(board, direction))


def is_move_possible(board: Board) -> bool:
    """
    Check whether any of the six moves would change the board.

    Parameters
    ----------
    board : Board
        The board to probe. Its values are read-only, so the probe cannot leak into it.

    Returns
    -------
    bool
        True at the first direction that shifts a line, False when none does.
    """
    return any(can_move(board, direction) for direction in PROBE_ORDER)


def is_done(board: Board) -> bool:
    """Check if the game has ended, i.e. no move can change the board."""
    return not is_move_possible(board)


def legal_directions(board: Board) -> list[Direction]:
    """
    Determine the moves that change the board.

    Returns
    -------
    list[Direction]
        Legal directions in table order (q, w, e, a, s, d).
    """
    return [direction for direction in PROBE_ORDER if can_move(board, direction)]


def illegal_directions(board: Board) -> list[Direction]:
    """Determine the moves that leave the board unchanged."""
    return [direction for direction in PROBE_ORDER if not can_move(board, direction)]

