# -*- coding: utf-8 -*-
"""
Python implementation of the hexagonal 2048 game.

This module provides the `HexTwentyFortyEight` class, which keeps the session state of a game played against a
remote move service.
"""

from .hexgame import GameStatus, HexTwentyFortyEight

__all__ = ["GameStatus", "HexTwentyFortyEight"]
