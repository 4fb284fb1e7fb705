"""
Tests for configuration, directions and errors.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.config import EngineConfig, default_config, is_power_of_two, small_config
from tilemerge.core.types import Direction
from tilemerge.envs.engine import GridEngine
from tilemerge.errors import ConfigurationError, InvalidDirection, TileMergeError


class TestEngineConfig(TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Default configuration matches the classic game."""
        config = default_config()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.spawn_weights, {2: 0.9, 4: 0.1})
        self.assertEqual(config.initial_tiles, 2)
        self.assertIsNone(config.seed)

    def test_small_config(self):
        """Small configuration only shrinks the grid."""
        self.assertEqual(small_config().size, 2)
        self.assertEqual(small_config(size=3).size, 3)

    def test_spawn_weights_not_shared(self):
        """Each configuration owns its spawn weights."""
        first, second = EngineConfig(), EngineConfig()
        first.spawn_weights[8] = 0.5
        self.assertNotIn(8, second.spawn_weights)

    def test_invalid_size(self):
        """Zero, negative and non integer sizes are refused."""
        for size in (0, -1, 2.5, '4', True):
            with self.assertRaises(ConfigurationError, msg=f'{size!r}'):
                EngineConfig(size=size)

    def test_invalid_initial_tiles(self):
        """Negative initial tiles are refused."""
        with self.assertRaises(ConfigurationError):
            EngineConfig(initial_tiles=-1)

    def test_invalid_spawn_weights(self):
        """Spawn weights are validated."""
        with self.assertRaises(ConfigurationError):
            EngineConfig(spawn_weights={6: 1.0})

    def test_engine_refuses_degenerate_grid(self):
        """An engine can't be built on an empty grid."""
        with self.assertRaises(ConfigurationError):
            GridEngine(size=0)

    def test_power_of_two(self):
        """Only powers of two from 2 upwards are tile values."""
        self.assertTrue(all(is_power_of_two(2**k) for k in range(1, 20)))
        self.assertFalse(any(is_power_of_two(value) for value in (-2, 0, 1, 3, 6, 12)))


class TestDirection(TestCase):
    """Test direction parsing."""

    def test_parse_names(self):
        """Names are parsed whatever their case."""
        self.assertIs(Direction.parse('left'), Direction.LEFT)
        self.assertIs(Direction.parse('UP'), Direction.UP)
        self.assertIs(Direction.parse(' Right '), Direction.RIGHT)
        self.assertIs(Direction.parse(Direction.DOWN), Direction.DOWN)

    def test_parse_codes(self):
        """Action codes follow the left, up, right, down order."""
        self.assertEqual([Direction.parse(code) for code in range(4)], list(Direction))
        self.assertIs(Direction.parse(np.int64(3)), Direction.DOWN)
        self.assertEqual([direction.code for direction in Direction], [0, 1, 2, 3])

    def test_invalid_direction(self):
        """Unknown directions raise InvalidDirection."""
        for value in ('diagonal', '', 4, -1, None, 1.0, True):
            with self.assertRaises(InvalidDirection, msg=f'{value!r}'):
                Direction.parse(value)

    def test_error_hierarchy(self):
        """Engine errors are value errors sharing a common base."""
        self.assertTrue(issubclass(InvalidDirection, TileMergeError))
        self.assertTrue(issubclass(ConfigurationError, TileMergeError))
        self.assertTrue(issubclass(InvalidDirection, ValueError))
        self.assertTrue(issubclass(ConfigurationError, ValueError))


if __name__ == '__main__':
    main()
