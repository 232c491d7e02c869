"""
Directions of movement on the game board and the order in which cells are visited for each of them.
"""

from enum import Enum
from functools import lru_cache

Position = tuple[int, int]


class Direction(Enum):
    """
    Direction in which tiles are pushed.

    The value of each member is its unit step vector ``(dx, dy)``, where ``x`` is the column and ``y`` the row.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Position:
        """Unit step toward the edge tiles move to."""
        return self.value


@lru_cache(maxsize=None)
def traversal_order(direction: Direction, size: int) -> tuple[Position, ...]:
    """
    Compute the order in which cells are processed during a collapse.

    Parameters
    ----------
    direction : Direction
        Direction of movement.
    size : int
        Side length of the square board.

    Returns
    -------
    tuple[Position, ...]
        All ``size * size`` positions, one line of movement after the other. Within a line, cells start at the
        destination edge and move backward along the line of movement.

    Notes
    -----
    - Visiting the destination edge first guarantees a tile has settled before any tile behind it is processed.
    - A line is finished before the next one starts, so a single blocker covers the line being processed.
    - DOWN starts each column at the bottom, UP at the top, LEFT starts each row at the left, RIGHT at the right.
    """
    dx, dy = direction.vector
    steps = range(size - 1, -1, -1) if dx + dy > 0 else range(size)

    # ##: Vertical moves walk column by column, horizontal moves row by row.
    if dx == 0:
        return tuple((x, y) for x in range(size) for y in steps)
    return tuple((x, y) for y in range(size) for x in steps)
