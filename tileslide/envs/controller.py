"""Translate input events into moves on a 2048 game board."""

import logging
from typing import Any, Optional

from tileslide.addons.config import GameConfiguration
from tileslide.core.direction import Direction
from tileslide.core.gameboard import Board

logger = logging.getLogger(__name__)


class Controller:
    """
    Game controller.

    Owns one board, maps directional input to collapses, and spawns a new tile only after a move that changed the
    board.
    """

    # ##: All key names.
    KEYS = {"left": Direction.LEFT, "right": Direction.RIGHT, "up": Direction.UP, "down": Direction.DOWN}

    def __init__(self, board: Board):
        """
        Start a game on the given board.

        Parameters
        ----------
        board : Board
            The board to drive. One tile is spawned on it immediately.
        """
        self.board = board
        self.board.spawn_tile()
        logger.info("New game on a %dx%d board", board.size, board.size)

    @classmethod
    def from_configuration(cls, config: GameConfiguration) -> "Controller":
        """
        Build a fresh board from a configuration and start a game on it.

        Parameters
        ----------
        config : GameConfiguration
            Board size, spawn value and seed.

        Returns
        -------
        Controller
            The controller of the new game.
        """
        return cls(Board(size=config.size, spawn_value=config.spawn_value, seed=config.seed))

    def _direction(self, signal: Any) -> Optional[Direction]:
        if signal is None or isinstance(signal, Direction):
            return signal
        if isinstance(signal, str):
            return self.KEYS.get(signal.lower())

        # ##: Keyboard events from GUI toolkits carry the key name.
        key = getattr(signal, "key", None)
        if isinstance(key, str):
            return self.KEYS.get(key.lower())
        return None

    def handle_input(self, signal: Any) -> bool:
        """
        Handle one input signal.

        Parameters
        ----------
        signal : Any
            ``None``, a ``Direction``, a key name such as ``"left"``, or an event object with a ``key`` attribute.

        Returns
        -------
        bool
            True if the board changed (and a new tile was spawned), False otherwise.

        Notes
        -----
        - Non-directional input is ignored.
        - A move that doesn't change the board spawns nothing, so pressing a blocked direction never adds tiles.
        """
        direction = self._direction(signal)
        if direction is None:
            logger.debug("Ignored input %r", signal)
            return False

        if not self.board.collapse(direction):
            return False

        self.board.spawn_tile()
        return True
