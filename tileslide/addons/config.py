# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass
from typing import Optional

BOARD_SIZE = 4
SPAWN_VALUE = 2


@dataclass
class GameConfiguration:
    """
    Data needed to start a game.
    """

    size: int = BOARD_SIZE
    spawn_value: int = SPAWN_VALUE
    seed: Optional[int] = None
