"""
Game move utilities for the 2048 engine: the direction enumeration and functions for determining
legal and illegal moves.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four move directions.

    The value of each member is the number of counter-clockwise quarter turns that bring the move
    direction onto "toward index 0" of every row, so a board can be oriented with
    ``rot90(board, k=direction)`` and slid left.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Look up a direction by case-insensitive name.

        Parameters
        ----------
        name : str
            One of ``left``, ``up``, ``right``, ``down``.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        ValueError
            If the name does not denote a direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'unknown direction: {name!r}') from None


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    Horizontal and vertical adjacencies are computed once, then all four directions are derived
    from them.
    """
    # ##>: Horizontal adjacency for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical adjacency for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile slides when the cell ahead of it is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Effective directions, in enumeration order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Ineffective directions, in enumeration order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]
