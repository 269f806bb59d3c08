# -*- coding: utf-8 -*-
"""
This module provides the board geometry and the Matplotlib window used to play the hexagonal 2048 game by hand.

The window is not imported here so that the geometry stays usable without a display backend.
"""

from .layout import hex_height, hex_size, hex_to_pixel, hex_width

__all__ = ["hex_size", "hex_width", "hex_height", "hex_to_pixel"]
