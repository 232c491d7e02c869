"""
Game move utilities, providing functions for determining which directions would change the board.
"""

from numpy import ndarray

from tileslide.core.direction import Direction


def can_collapse(cells: ndarray, direction: Direction) -> bool:
    """
    Check if a collapse in a specific direction would change the board.

    Parameters
    ----------
    cells : ndarray
        The game board to check.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if some tile has an empty cell next to it in the direction of travel, or if two adjacent
    tiles along the line of movement hold the same non-zero value.
    """
    if direction is Direction.LEFT:
        ahead, behind = cells[:, :-1], cells[:, 1:]
    elif direction is Direction.RIGHT:
        ahead, behind = cells[:, 1:], cells[:, :-1]
    elif direction is Direction.UP:
        ahead, behind = cells[:-1, :], cells[1:, :]
    else:
        ahead, behind = cells[1:, :], cells[:-1, :]

    # ##>: Condition 1: empty cell in front of a tile (can slide).
    can_slide = (ahead == 0) & (behind != 0)
    if can_slide.any():
        return True

    # ##>: Condition 2: two adjacent equal tiles (can merge).
    can_merge = (ahead != 0) & (ahead == behind)
    return bool(can_merge.any())


def legal_directions(cells: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    cells : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions for which a collapse moves or merges at least one tile.
    """
    return [direction for direction in Direction if can_collapse(cells, direction)]
