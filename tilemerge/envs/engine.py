"""Grid engine owning the state of a 2048 game session."""

import logging
from dataclasses import replace
from numbers import Integral

from numpy import array, count_nonzero, int64, ndarray, zeros

from tilemerge.config import MAX_TILE_VALUE, EngineConfig, is_power_of_two
from tilemerge.core.gameboard import is_done, slide_and_merge
from tilemerge.core.gamemove import legal_moves, legal_moves_mask
from tilemerge.core.spawn import RandomTileGenerator
from tilemerge.core.types import Direction, MoveResult
from tilemerge.errors import ConfigurationError

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GridEngine:
    """
    2048 grid engine.

    This class owns the grid and the score of a game session. Moves slide and merge tiles, then a new
    tile is spawned if anything changed. Each move reports the slides and merges it performed so that
    a presentation layer can animate them.

    Calls must be serialized: the engine isn't meant to be shared between threads.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction.code for direction in Direction}

    def __init__(
        self,
        size: int = 4,
        config: EngineConfig | None = None,
        generator: RandomTileGenerator | None = None,
    ):
        """
        Initialize the grid engine and start a session.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4). Ignored when ``config`` is given.
        config : EngineConfig, optional
            Full engine configuration.
        generator : RandomTileGenerator, optional
            Source of new tiles. Built from the configuration when omitted.

        Raises
        ------
        ConfigurationError
            If the size or the spawn weights are invalid.
        """
        # ##: Own a validated copy, the grid size is fixed for the engine lifetime.
        if config is None:
            config = EngineConfig(size=size)
        self._config = replace(config, spawn_weights=dict(config.spawn_weights))
        self._size = self._config.size
        self._generator = (
            generator
            if generator is not None
            else RandomTileGenerator(weights=self._config.spawn_weights, seed=self._config.seed)
        )
        self._board: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0

        self.reset()

    @property
    def size(self) -> int:
        """Get the size of the grid."""
        return self._size

    @property
    def score(self) -> int:
        """Get the score of the session."""
        return self._score

    @property
    def board(self) -> ndarray:
        """Get a copy of the grid, zeros being empty cells."""
        return self._board.copy()

    @property
    def grid(self) -> list[list[int | None]]:
        """
        Get a snapshot of the grid.

        Returns
        -------
        list[list[int | None]]
            One list per row, None for empty cells.
        """
        return [[int(value) if value else None for value in row] for row in self._board]

    @property
    def max_tile(self) -> int:
        """Get the highest tile value, 0 on an empty grid."""
        return int(self._board.max())

    @property
    def empty_cells(self) -> int:
        """Get the number of empty cells."""
        return self._board.size - int(count_nonzero(self._board))

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the grid is full and no move would change it, False otherwise.
        """
        return is_done(self._board)

    def has_any_valid_move(self) -> bool:
        """Check if at least one direction would change the grid."""
        return any(legal_moves_mask(self._board))

    def legal_moves(self) -> list[Direction]:
        """Get the directions that would change the grid."""
        return legal_moves(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new session: empty grid, zero score and initial tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility. Keeps the current random stream when omitted.

        Returns
        -------
        ndarray
            The new grid.

        Notes
        -----
        - Only as many initial tiles as there are cells are spawned.
        """
        if seed is not None:
            self._generator.reseed(seed)

        self._board = zeros((self.size, self.size), dtype=int64)
        self._score = 0

        spawned = 0
        for _ in range(self._config.initial_tiles):
            if self._generator.spawn(self._board) is None:
                break
            spawned += 1

        _logger.debug('Reset %dx%d grid with %d tiles', self.size, self.size, spawned)
        return self.board

    def load(self, grid, score: int | None = None) -> None:
        """
        Replace the grid, e.g. to restore a session.

        Parameters
        ----------
        grid : array-like
            Square matrix of the engine size, holding None or 0 for empty cells and powers of two otherwise.
        score : int, optional
            Score to restore. Keeps the current score when omitted.

        Raises
        ------
        ConfigurationError
            If the grid doesn't match the engine size, holds a value which isn't a power of two, or
            if the score is negative.
        """
        rows = [[0 if value is None else value for value in row] for row in grid]
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise ConfigurationError(f'Grid must be {self.size}x{self.size}.')

        for row in rows:
            for value in row:
                try:
                    tile = int(value)
                except (TypeError, ValueError, OverflowError):
                    raise ConfigurationError(f'Tile value `{value!r}` is not an integer.') from None
                if tile != value or (tile != 0 and not is_power_of_two(tile)):
                    raise ConfigurationError(f'Tile value `{value!r}` is not a power of two.')
                if tile > MAX_TILE_VALUE:
                    raise ConfigurationError(f'Tile value `{value!r}` exceeds {MAX_TILE_VALUE}.')

        if score is not None:
            if isinstance(score, bool) or not isinstance(score, Integral) or score < 0:
                raise ConfigurationError(f'Score must be a non-negative integer, got {score!r}.')
            self._score = int(score)

        self._board = array(rows, dtype=int64).reshape((self.size, self.size))

    def apply_move(self, direction: Direction | str | int) -> MoveResult:
        """
        Apply a move to the grid.

        Parameters
        ----------
        direction : Direction | str | int
            Direction of the move, its name or its action code (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        MoveResult
            Transitions, score delta, whether the grid changed and the spawned tile.

        Raises
        ------
        InvalidDirection
            If the direction is unknown. The grid is left untouched.

        Notes
        -----
        - A move that changes nothing is not an error: it reports ``changed=False``, no tile is
          spawned and the score is kept.
        - After a change, one tile is spawned unless the grid is full.
        """
        direction = Direction.parse(direction)

        # ##: Applied move.
        score_delta, transitions = slide_and_merge(self._board, direction)
        if not transitions:
            _logger.debug('Move %s left the grid unchanged', direction.value)
            return MoveResult(transitions=[], score_delta=0, changed=False, spawned=None)

        self._score += score_delta
        _logger.debug('Move %s: %d transitions, +%d score', direction.value, len(transitions), score_delta)

        # ##: Fill randomly one cell.
        spawned = self._generator.spawn(self._board)
        return MoveResult(transitions=transitions, score_delta=score_delta, changed=True, spawned=spawned)
