"""
Sliding-tile merge mechanics of a 2048-style puzzle.
"""

from tilemerge.config import EngineConfig, default_config, small_config
from tilemerge.core import Direction, MoveResult, RandomTileGenerator, Spawn, Transition, TransitionKind
from tilemerge.envs import GridEngine
from tilemerge.errors import ConfigurationError, InvalidDirection, TileMergeError

__all__ = [
    'GridEngine',
    'RandomTileGenerator',
    'EngineConfig',
    'default_config',
    'small_config',
    'Direction',
    'MoveResult',
    'Spawn',
    'Transition',
    'TransitionKind',
    'TileMergeError',
    'InvalidDirection',
    'ConfigurationError',
]
