# -*- coding: utf-8 -*-
"""
This module provides the game board and the helpers that drive it.

It includes the directions of movement with their traversal orders, the `Board` class that slides, merges and
spawns tiles, and functions for checking which directions would change a board.
"""

from .direction import Direction, Position, traversal_order
from .gameboard import Board
from .gamemove import can_collapse, legal_directions

__all__ = [
    "Board",
    "Direction",
    "Position",
    "traversal_order",
    "can_collapse",
    "legal_directions",
]
