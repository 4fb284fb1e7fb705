"""
Types shared between the move algorithm, the tile generator and the engine.
"""

from enum import Enum
from numbers import Integral
from typing import NamedTuple

from tilemerge.errors import InvalidDirection

# ##>: Type aliases.
Coordinate = tuple[int, int]


class Direction(str, Enum):
    """
    Direction of a move.

    The position of a member in the enumeration matches the integer action code (0: left, 1: up,
    2: right, 3: down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def code(self) -> int:
        """Integer action code of the direction."""
        return list(Direction).index(self)

    @classmethod
    def parse(cls, value: 'Direction | str | int') -> 'Direction':
        """
        Coerce a direction, a direction name or an action code into a direction.

        Parameters
        ----------
        value : Direction | str | int
            Value to coerce. Names are case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirection
            If the value doesn't name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise InvalidDirection(f'Unknown direction `{value}`.') from None
        if isinstance(value, Integral) and not isinstance(value, bool) and 0 <= value < len(cls):
            return list(cls)[int(value)]
        raise InvalidDirection(f'Unknown direction `{value!r}`.')


class TransitionKind(str, Enum):
    """Fate of a tile during a move."""

    SLIDE = 'slide'
    MERGE = 'merge'


class Transition(NamedTuple):
    """
    One tile movement reported to the presentation layer.

    Attributes
    ----------
    kind : TransitionKind
        Slide or merge.
    sources : tuple[Coordinate, ...]
        One coordinate for a slide. For a merge, the tile already at the destination first,
        then the incoming tile.
    destination : Coordinate
        Cell the tile ends up in.
    value : int
        Tile value at the destination after the transition.
    """

    kind: TransitionKind
    sources: tuple[Coordinate, ...]
    destination: Coordinate
    value: int

    @classmethod
    def slide(cls, source: Coordinate, destination: Coordinate, value: int) -> 'Transition':
        """Build a slide transition."""
        return cls(TransitionKind.SLIDE, (source,), destination, value)

    @classmethod
    def merge(cls, target: Coordinate, source: Coordinate, value: int) -> 'Transition':
        """Build a merge transition of the tile at ``source`` into the tile at ``target``."""
        return cls(TransitionKind.MERGE, (target, source), target, value)


class Spawn(NamedTuple):
    """A tile placed by the random tile generator."""

    cell: Coordinate
    value: int


class MoveResult(NamedTuple):
    """
    Outcome of a move.

    Attributes
    ----------
    transitions : list[Transition]
        Slides and merges, in the order they were applied.
    score_delta : int
        Sum of merged values.
    changed : bool
        Whether any tile moved.
    spawned : Spawn, optional
        Tile added after the move, None when nothing changed or the grid was full.
    """

    transitions: list[Transition]
    score_delta: int
    changed: bool
    spawned: Spawn | None = None
