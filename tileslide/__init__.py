"""
Core mechanics of the 2048 sliding-tile puzzle.
"""

from .addons import GameConfiguration
from .core import Board, Direction
from .envs import Controller

__all__ = ["Board", "Controller", "Direction", "GameConfiguration"]
