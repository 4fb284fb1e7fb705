"""
Random tile generation for the 2048 grid.
"""

import logging

from numpy import argwhere, ndarray
from numpy.random import Generator, default_rng

from tilemerge.config import TILE_SPAWN_WEIGHTS, validate_spawn_weights
from tilemerge.core.types import Coordinate, Spawn

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class RandomTileGenerator:
    """
    Pick empty cells and tile values for newly spawned tiles.

    Parameters
    ----------
    weights : dict[int, float], optional
        Relative weight of each tile value (default is 90% for 2, 10% for 4).
    seed : int, optional
        Seed of the underlying numpy generator. Ignored when ``rng`` is given.
    rng : Generator, optional
        Numpy generator to draw from.
    """

    def __init__(self, weights: dict[int, float] | None = None, seed: int | None = None, rng: Generator | None = None):
        weights = dict(TILE_SPAWN_WEIGHTS if weights is None else weights)
        validate_spawn_weights(weights)

        self._weights = weights
        self._total_weight = float(sum(weights.values()))
        self._rng = rng if rng is not None else default_rng(seed)

    @property
    def weights(self) -> dict[int, float]:
        """Get a copy of the spawn distribution."""
        return dict(self._weights)

    def reseed(self, seed: int | None) -> None:
        """Replace the random stream with a freshly seeded one."""
        self._rng = default_rng(seed)

    def pick_value(self) -> int:
        """
        Sample a tile value from the spawn distribution.

        Returns
        -------
        int
            The sampled tile value.

        Notes
        -----
        - A uniform draw in ``[0, total_weight)`` is reduced by each weight in enumeration order,
          and the first value bringing it to zero or below wins.
        - Should rounding leave the draw positive after the last weight, the first value is returned.
        """
        pick = self._rng.random() * self._total_weight

        for value, weight in self._weights.items():
            pick -= weight
            if pick <= 0:
                return value

        first = next(iter(self._weights))
        _logger.warning('Spawn sampling matched no weight bucket, falling back to %d', first)
        return first

    def pick_empty_cell(self, board: ndarray) -> Coordinate | None:
        """
        Choose an empty cell uniformly at random.

        Parameters
        ----------
        board : ndarray
            The game board, zeros being empty cells.

        Returns
        -------
        Coordinate, optional
            The ``(row, col)`` of the chosen cell, None if the board is full.
        """
        # ##: Empty cells in row-major order.
        empty_cells = argwhere(board == 0)
        if len(empty_cells) == 0:
            return None

        row, col = empty_cells[self._rng.integers(len(empty_cells))]
        return int(row), int(col)

    def spawn(self, board: ndarray) -> Spawn | None:
        """
        Place one new tile on the board.

        Parameters
        ----------
        board : ndarray
            The game board. **Modified in-place.**

        Returns
        -------
        Spawn, optional
            Cell and value of the new tile, None if the board is full.
        """
        cell = self.pick_empty_cell(board)
        if cell is None:
            return None

        value = self.pick_value()
        board[cell] = value
        _logger.debug('Spawned %d at %s', value, cell)
        return Spawn(cell, value)
