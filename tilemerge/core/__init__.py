# -*- coding: utf-8 -*-
"""
This module provides the grid mechanics of a 2048-like game.

It includes the shared move types, the line compaction algorithm that slides and merges tiles,
the checks for legal and illegal moves, and the random generator spawning new tiles.
"""

from .gameboard import compact_line, is_done, latent_state, line_cells, slide_and_merge
from .gamemove import can_move, illegal_moves, legal_moves, legal_moves_mask
from .spawn import RandomTileGenerator
from .types import Coordinate, Direction, MoveResult, Spawn, Transition, TransitionKind

__all__ = [
    'Coordinate',
    'Direction',
    'MoveResult',
    'Spawn',
    'Transition',
    'TransitionKind',
    'RandomTileGenerator',
    'line_cells',
    'compact_line',
    'slide_and_merge',
    'latent_state',
    'is_done',
    'legal_moves_mask',
    'legal_moves',
    'illegal_moves',
    'can_move',
]
