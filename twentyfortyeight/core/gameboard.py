"""
Core functionality of the 2048 engine: sliding and merging lines, spawning tiles and detecting the
end of a game.

Every function works on a square ``int64`` board where ``0`` marks an empty cell. Moves are
implemented once, as a slide to the left, and the other directions rotate the board onto that case.
"""

from collections.abc import Sequence

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, int64, ndarray, rot90, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from twentyfortyeight.core.gamemove import Direction

# ##>: Default spawn distribution (90% for 2, 10% for 4).
_TILE_VALUES = (2, 4)
_TILE_PROBS = (0.9, 0.1)

# ##>: Fallback generator when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compress a line toward index 0 and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row of the board, already oriented toward index 0.

    Returns
    -------
    score : int
        Sum of the values of the newly merged tiles.
    merged_line : ndarray
        The non-empty values after merging, without trailing zeros.

    Notes
    -----
    - Zeros are removed before merging, which is the first compression.
    - Merging scans from index 0; a merged tile never merges a second time, so ``[2, 2, 2, 2]``
      gives ``[4, 4]`` and not ``[8]``.
    - Appending merged values one after another closes the gaps, which is the second compression.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the board to the left, merging adjacent equal tiles.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    score : int
        The total score of all merges, summed over rows 0 to N-1.
    updated_board : ndarray
        A new board; the input is left untouched.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without spawning a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    direction : Direction
        The move to apply.

    Returns
    -------
    new_state : ndarray
        The board after sliding and merging.
    score : int
        The score obtained from this move.
    """
    rotated_board = rot90(state, k=direction)
    score, updated_board = slide_and_merge(rotated_board)
    return rot90(updated_board, k=-direction), score


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """Positions ``(row, col)`` of the empty cells, in row-major order."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(state == 0)]


def spawn_tile(
    state: ndarray,
    rng: Generator | None = None,
    values: Sequence[int] = _TILE_VALUES,
    probs: Sequence[float] = _TILE_PROBS,
) -> tuple[tuple[int, int], int]:
    """
    Place one new tile in an empty cell chosen uniformly at random.

    Parameters
    ----------
    state : ndarray
        The board. **Modified in-place.**
    rng : Generator, optional
        Random source. The module-level generator is used when omitted.
    values : Sequence[int]
        Candidate tile values.
    probs : Sequence[float]
        Probability of each candidate value.

    Returns
    -------
    cell : tuple[int, int]
        Position of the new tile.
    value : int
        Value of the new tile.

    Raises
    ------
    ValueError
        If the board has no empty cell.
    """
    rng = rng if rng is not None else _GENERATOR

    available = argwhere(state == 0)
    if len(available) == 0:
        raise ValueError('cannot spawn a tile on a full board')

    row, col = available[rng.integers(len(available))]
    value = int(rng.choice(values, p=probs))

    cell = (int(row), int(col))
    state[cell] = value
    return cell, value


def fill_cells(
    state: ndarray,
    number_tile: int,
    rng: Generator | None = None,
    values: Sequence[int] = _TILE_VALUES,
    probs: Sequence[float] = _TILE_PROBS,
) -> ndarray:
    """
    Fill several distinct empty cells with new tiles.

    Parameters
    ----------
    state : ndarray
        The board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator, optional
        Random source. The module-level generator is used when omitted.
    values : Sequence[int]
        Candidate tile values.
    probs : Sequence[float]
        Probability of each candidate value.

    Returns
    -------
    ndarray
        The same array reference with the new tiles added.

    Raises
    ------
    ValueError
        If the board has fewer empty cells than ``number_tile``.
    """
    for _ in range(number_tile):
        spawn_tile(state, rng=rng, values=values, probs=probs)
    return state


def next_state(
    state: ndarray,
    direction: Direction,
    rng: Generator | None = None,
    values: Sequence[int] = _TILE_VALUES,
    probs: Sequence[float] = _TILE_PROBS,
) -> tuple[ndarray, int, bool]:
    """
    Compute the next board after a move, spawning one tile if the move changed the board.

    Parameters
    ----------
    state : ndarray
        The current board. Not modified.
    direction : Direction
        The move to apply.
    rng : Generator, optional
        Random source for the spawned tile.
    values : Sequence[int]
        Candidate tile values.
    probs : Sequence[float]
        Probability of each candidate value.

    Returns
    -------
    new_state : ndarray
        The new board. The input array itself when the move was ineffective.
    score : int
        The score of the move, 0 when ineffective.
    moved : bool
        Whether any line changed.
    """
    moved_state, score = latent_state(state, direction)
    if array_equal(moved_state, state):
        return state, 0, False

    # ##: rot90 returns a view; spawn into an owned copy.
    moved_state = moved_state.astype(int64, copy=True)
    spawn_tile(moved_state, rng=rng, values=values, probs=probs)
    return moved_state, score, True


def is_done(state: ndarray) -> bool:
    """
    Check whether the game has ended.

    Parameters
    ----------
    state : ndarray
        The current board.

    Returns
    -------
    bool
        True when there is no empty cell and no two horizontally or vertically adjacent cells are
        equal.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
