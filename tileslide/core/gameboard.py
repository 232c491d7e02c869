"""
Core functionality for the 2048 game board: sliding and merging tiles, and spawning new ones.
"""

import logging
from typing import Optional

from numpy import argwhere, asarray, iinfo, integer, issubdtype, ndarray, uint32, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from tileslide.addons.config import BOARD_SIZE, SPAWN_VALUE
from tileslide.core.direction import Direction, Position, traversal_order
from tileslide.core.gamemove import can_collapse

logger = logging.getLogger(__name__)

# ##>: Wide enough for every tile a 4x4 board can reach (2**17).
CELL_DTYPE = uint32


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class Board:
    """
    Square grid of tiles.

    A cell holding ``0`` is empty; any other cell holds a tile whose number is a positive power of two. The grid is
    created once and mutated in place by ``collapse`` and ``spawn_tile``.
    """

    def __init__(
        self,
        size: int = BOARD_SIZE,
        spawn_value: int = SPAWN_VALUE,
        seed: Optional[int] = None,
        generator: Optional[Generator] = None,
    ):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int, optional
            The side length of the square grid (default is 4).
        spawn_value : int, optional
            Value of the tile placed by ``spawn_tile`` (default is 2).
        seed : int, optional
            Random number generator seed for reproducibility. Ignored when ``generator`` is given.
        generator : Generator, optional
            Random source used to choose where new tiles appear.

        Raises
        ------
        ValueError
            If ``size`` is below 2 or ``spawn_value`` isn't a positive power of two.
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}")
        if not _is_power_of_two(spawn_value):
            raise ValueError(f"Spawn value must be a positive power of two, got {spawn_value}")

        self.size = size
        self.spawn_value = spawn_value
        self._cells: ndarray = zeros((size, size), dtype=CELL_DTYPE)

        # ##: An explicit generator wins over a seed.
        if generator is not None:
            self._generator = generator
        elif seed is not None:
            self._generator = default_rng(seed)
        else:
            self._generator = default_rng(PCG64DXSM())

    @classmethod
    def from_cells(
        cls,
        cells,
        spawn_value: int = SPAWN_VALUE,
        seed: Optional[int] = None,
        generator: Optional[Generator] = None,
    ) -> "Board":
        """
        Build a board holding a copy of an existing grid.

        Parameters
        ----------
        cells : array_like
            Square 2D grid, row-major, of zeros and positive powers of two.
        spawn_value, seed, generator
            Same as for the constructor.

        Returns
        -------
        Board
            A new board with the given tiles.

        Raises
        ------
        ValueError
            If ``cells`` isn't a square 2D integer grid or holds values other than zero and powers of two.
        """
        grid = asarray(cells)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Cells must form a square grid, got shape {grid.shape}")
        if not issubdtype(grid.dtype, integer):
            raise ValueError(f"Cells must hold integers, got {grid.dtype}")
        if (grid < 0).any():
            raise ValueError("Cells can't hold negative values")
        if (grid > iinfo(CELL_DTYPE).max).any():
            raise ValueError(f"Cells can't hold values above {iinfo(CELL_DTYPE).max}")

        values = grid.astype(CELL_DTYPE)
        if (values & (values - 1) != 0).any():
            raise ValueError("Cells must hold zero or a power of two")

        board = cls(size=grid.shape[0], spawn_value=spawn_value, seed=seed, generator=generator)
        board._cells[:] = values
        return board

    @property
    def cells(self) -> ndarray:
        """
        Get the current grid, row-major, as a read-only view.

        Returns
        -------
        ndarray
            The grid; the cell at position ``(x, y)`` is ``cells[y, x]``.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def _get(self, position: Position) -> int:
        x, y = position
        return int(self._cells[y, x])

    def _set(self, position: Position, value: int):
        x, y = position
        self._cells[y, x] = value

    def _on_board(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def copy(self) -> "Board":
        """Independent copy of this board, sharing its random source."""
        board = Board(size=self.size, spawn_value=self.spawn_value, generator=self._generator)
        board._cells[:] = self._cells
        return board

    def empty_cells(self) -> list[Position]:
        """
        List the empty cells.

        Returns
        -------
        list[Position]
            Positions ``(x, y)`` of every cell holding ``0``, in row-major order.
        """
        return [(int(x), int(y)) for y, x in argwhere(self._cells == 0)]

    def can_collapse(self, direction: Direction) -> bool:
        """Check, without mutating the board, whether ``collapse(direction)`` would change it."""
        return can_collapse(self._cells, direction)

    def collapse(self, direction: Direction) -> bool:
        """
        Slide and merge every tile toward one edge of the board.

        Parameters
        ----------
        direction : Direction
            Edge the tiles are pushed toward.

        Returns
        -------
        bool
            True if at least one tile moved or merged, False otherwise.

        Notes
        -----
        - Cells are visited from the destination edge backward, so a tile settles before the tiles behind it move.
        - A tile slides one cell at a time until it reaches the edge, an unequal tile, or the blocker.
        - When it meets an equal tile the two merge into the target cell, which becomes the blocker: it can't take
          part in another merge during this call (``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``, not ``[8, 0, 0, 0]``).
        """
        dx, dy = direction.vector
        blocker: Optional[Position] = None
        moved = False

        for position in traversal_order(direction, self.size):
            value = self._get(position)
            if value == 0:
                continue

            while True:
                target = (position[0] + dx, position[1] + dy)
                if not self._on_board(target) or target == blocker:
                    break

                target_value = self._get(target)
                if target_value == 0:
                    # ##: Slide into the empty cell and keep going.
                    self._set(target, value)
                    self._set(position, 0)
                    position = target
                    moved = True
                    continue

                if target_value == value:
                    # ##: Merge; the merged tile stops here for this turn.
                    self._set(target, value * 2)
                    self._set(position, 0)
                    blocker = target
                    moved = True
                break

        logger.debug("Collapse %s: %s", direction.name, "moved" if moved else "no change")
        return moved

    def spawn_tile(self) -> bool:
        """
        Place a new tile on a uniformly random empty cell.

        Returns
        -------
        bool
            True if a tile was placed, False if the board is full (the board is left untouched).
        """
        free = self.empty_cells()
        if not free:
            logger.debug("Spawn skipped: board is full")
            return False

        position = free[int(self._generator.integers(len(free)))]
        self._set(position, self.spawn_value)
        logger.debug("Spawned %d at %s", self.spawn_value, position)
        return True
