"""
Core functionality of the 2048 grid: sliding and merging tiles along a direction.
"""

from numpy import ndarray

from tilemerge.core.gamemove import legal_moves_mask
from tilemerge.core.types import Coordinate, Direction, Transition


def line_cells(size: int, direction: Direction) -> list[list[Coordinate]]:
    """
    Enumerate the lines of a board for a move.

    Parameters
    ----------
    size : int
        Dimension of the square board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    list[list[Coordinate]]
        One list of coordinates per line, ordered from the leading edge (where tiles go) to the
        trailing edge.

    Notes
    -----
    - Left and right moves work on rows, up and down moves work on columns.
    """
    forward = range(size)
    backward = range(size - 1, -1, -1)

    if direction is Direction.LEFT:
        return [[(row, col) for col in forward] for row in forward]
    if direction is Direction.RIGHT:
        return [[(row, col) for col in backward] for row in forward]
    if direction is Direction.UP:
        return [[(row, col) for row in forward] for col in forward]
    return [[(row, col) for row in backward] for col in forward]


def compact_line(board: ndarray, cells: list[Coordinate]) -> tuple[int, list[Transition]]:
    """
    Slide and merge the tiles of one line towards its leading edge.

    Parameters
    ----------
    board : ndarray
        The game board, zeros being empty cells. **Modified in-place.**
    cells : list[Coordinate]
        Coordinates of the line, from the leading edge to the trailing edge.

    Returns
    -------
    score : int
        Sum of the merged values.
    transitions : list[Transition]
        Slides and merges in the order they were applied.

    Notes
    -----
    - A cursor walks the line from the leading edge. For each cursor, the following tiles are
      scanned: into an empty cursor a tile slides and the scan goes on, into an equal tile it
      merges and the scan stops, against a different tile the scan stops.
    - A cell that has just received a sliding tile can still receive a merge in the same pass.
    - Once merged, a cell is left behind by the cursor, so it merges at most once per move.
    - Merges are pairwise: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.

    Examples
    --------
    >>> board = array([[2, 0, 2, 4]])
    >>> compact_line(board, [(0, 0), (0, 1), (0, 2), (0, 3)])
    (4, [Transition(kind=<TransitionKind.MERGE: 'merge'>, sources=((0, 0), (0, 2)), destination=(0, 0), value=4),
         Transition(kind=<TransitionKind.SLIDE: 'slide'>, sources=((0, 3),), destination=(0, 1), value=4)])
    """
    score = 0
    transitions = []

    for index, cursor in enumerate(cells):
        for cell in cells[index + 1 :]:
            value = int(board[cell])
            if value == 0:
                continue

            target = int(board[cursor])

            # ##: Slide into the empty cursor, then keep looking for a merge partner.
            if target == 0:
                board[cursor] = value
                board[cell] = 0
                transitions.append(Transition.slide(cell, cursor, value))
                continue

            # ##: Merge into an equal tile, the cursor cell is then done.
            if target == value:
                merged = value * 2
                board[cursor] = merged
                board[cell] = 0
                score += merged
                transitions.append(Transition.merge(cursor, cell, merged))
            break

    return score, transitions


def slide_and_merge(board: ndarray, direction: Direction) -> tuple[int, list[Transition]]:
    """
    Slide the whole board along a direction and merge adjacent equal tiles.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array. **Modified in-place.**
    direction : Direction
        Direction of the move.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    transitions : list[Transition]
        Every slide and merge, line after line.

    Notes
    -----
    - No tile is spawned, see ``RandomTileGenerator.spawn`` for that.
    """
    score = 0
    transitions = []

    for cells in line_cells(board.shape[0], direction):
        score_line, transitions_line = compact_line(board, cells)
        score += score_line
        transitions.extend(transitions_line)

    return score, transitions


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, int, list[Transition]]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Left untouched.
    direction : Direction
        Direction of the move.

    Returns
    -------
    new_state : ndarray
        The board after the move.
    score : int
        Sum of the merged values.
    transitions : list[Transition]
        Slides and merges of the move.
    """
    new_state = state.copy()
    score, transitions = slide_and_merge(new_state, direction)
    return new_state, score, transitions


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the board is full and no direction would change it, False otherwise.
    """
    return bool(state.all()) and not any(legal_moves_mask(state))
