"""
Move utilities for the 2048 grid, providing functions for determining legal and illegal moves.
"""

from numpy import ndarray

from tilemerge.core.types import Direction


def _can_shift(lead: ndarray, trail: ndarray) -> bool:
    """
    Check if tiles can move from ``trail`` into their neighbours ``lead``.

    Parameters
    ----------
    lead : ndarray
        Cells on the leading side of each neighbour pair.
    trail : ndarray
        Cells on the trailing side, aligned with ``lead``.

    Returns
    -------
    bool
        True if a tile can slide into an empty neighbour or merge with an equal one.
    """
    can_slide = (lead == 0) & (trail != 0)
    can_merge = (lead != 0) & (lead == trail)
    return bool(can_slide.any() or can_merge.any())


def legal_moves_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions.

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
    - A move is legal if a tile has an empty cell on its leading side, or if two adjacent
      tiles along the move axis hold the same value.
    - Opposite directions compare the same neighbour pairs with their roles swapped.
    """
    first_cols, last_cols = state[:, :-1], state[:, 1:]
    first_rows, last_rows = state[:-1, :], state[1:, :]

    return (
        _can_shift(first_cols, last_cols),
        _can_shift(first_rows, last_rows),
        _can_shift(last_cols, first_cols),
        _can_shift(last_rows, first_rows),
    )


def can_move(state: ndarray, direction: Direction) -> bool:
    """Check if a move along ``direction`` would change the board."""
    return legal_moves_mask(state)[direction.code]


def legal_moves(state: ndarray) -> list[Direction]:
    """
    Determine legal moves for the current game board state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that result in a change to the game board, in action code order.
    """
    mask = legal_moves_mask(state)
    return [direction for direction in Direction if mask[direction.code]]


def illegal_moves(state: ndarray) -> list[Direction]:
    """
    Determine illegal moves for the current game board state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that leave the board unchanged, in action code order.
    """
    mask = legal_moves_mask(state)
    return [direction for direction in Direction if not mask[direction.code]]
