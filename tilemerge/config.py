"""
Configuration for the grid engine.

Defaults follow the classic 2048 rules: a 4x4 grid, two starting tiles and new tiles drawn
90% of the time as a 2 and 10% of the time as a 4.
"""

from dataclasses import dataclass, field
from math import isfinite

from tilemerge.errors import ConfigurationError

# ##>: Tile spawn weights (90% for 2, 10% for 4). Enumeration order matters for sampling.
TILE_SPAWN_WEIGHTS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Largest tile whose merge still fits in an int64 board.
MAX_TILE_VALUE = 2**61


def is_power_of_two(value: int) -> bool:
    """Check if a value is a tile value, i.e. a power of two greater than one."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 2 and value & (value - 1) == 0


def validate_spawn_weights(weights: dict[int, float]) -> None:
    """
    Check that a spawn distribution can be sampled.

    Parameters
    ----------
    weights : dict[int, float]
        Mapping from tile value to relative weight.

    Raises
    ------
    ConfigurationError
        If the mapping is empty, holds a value that isn't a power of two, or a weight that
        isn't a positive finite number.
    """
    if not weights:
        raise ConfigurationError('Spawn weights must hold at least one tile value.')

    for value, weight in weights.items():
        if not is_power_of_two(value):
            raise ConfigurationError(f'Spawn value `{value}` is not a power of two.')
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not isfinite(weight) or weight <= 0:
            raise ConfigurationError(f'Spawn weight for `{value}` must be positive, got {weight!r}.')


@dataclass
class EngineConfig:
    """
    Configuration for a grid engine.

    Attributes
    ----------
    size : int
        Dimension of the square grid.
    spawn_weights : dict[int, float]
        Relative weights of spawned tile values.
    initial_tiles : int
        Number of tiles spawned by a reset.
    seed : int, optional
        Seed of the random generator, for reproducible games.
    """

    size: int = 4
    spawn_weights: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_WEIGHTS))
    initial_tiles: int = 2
    seed: int | None = None

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ConfigurationError(f'Grid size must be an integer, got {self.size!r}.')
        if self.size <= 0:
            raise ConfigurationError(f'Grid size must be positive, got {self.size}.')
        if isinstance(self.initial_tiles, bool) or not isinstance(self.initial_tiles, int) or self.initial_tiles < 0:
            raise ConfigurationError(f'Initial tiles must be a non-negative integer, got {self.initial_tiles!r}.')
        validate_spawn_weights(self.spawn_weights)


def default_config() -> EngineConfig:
    """
    Create default configuration for 2048.

    Returns
    -------
    EngineConfig
        A 4x4 grid with the classic spawn weights.
    """
    return EngineConfig()


def small_config(size: int = 2) -> EngineConfig:
    """
    Create a configuration for a reduced grid.

    Small grids fill up in a few moves, which makes them handy to reach full-grid states.

    Parameters
    ----------
    size : int, optional
        Dimension of the grid (default is 2).

    Returns
    -------
    EngineConfig
        Configuration with the given size and the default spawn weights.
    """
    return EngineConfig(size=size)
