# -*- coding: utf-8 -*-
"""
Configuration shared by the game components.
"""

from .config import BOARD_SIZE, SPAWN_VALUE, GameConfiguration

__all__ = ["BOARD_SIZE", "SPAWN_VALUE", "GameConfiguration"]
