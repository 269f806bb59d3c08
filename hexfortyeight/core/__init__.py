# -*- coding: utf-8 -*-
"""
This module provides the game logic of the hexagonal 2048 game.

It includes the cube coordinate model, board creation, splitting a board into lines, sliding and merging
lines, applying moves and checking whether the game is over.
"""

from .gameboard import (
    apply_move,
    can_move,
    illegal_directions,
    is_done,
    is_move_possible,
    latent_state,
    legal_directions,
    merge_line,
    shift_and_merge,
    slide_board,
)
from .gamemove import DIRECTIONS, Direction, Slide, iter_lines, parse_key, sort_line
from .hexgrid import Axis, Board, Coordinate, Tile, board_size, create_grid, group_by_axis, iter_coordinates

__all__ = [
    "Axis",
    "Board",
    "Coordinate",
    "Tile",
    "board_size",
    "iter_coordinates",
    "create_grid",
    "group_by_axis",
    "Direction",
    "Slide",
    "DIRECTIONS",
    "parse_key",
    "sort_line",
    "iter_lines",
    "merge_line",
    "shift_and_merge",
    "slide_board",
    "apply_move",
    "latent_state",
    "can_move",
    "is_move_possible",
    "is_done",
    "legal_directions",
    "illegal_directions",
]
