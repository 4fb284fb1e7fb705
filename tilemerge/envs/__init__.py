# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 grid engine.

This module provides the `GridEngine` class, which owns the grid and the score of a game session.
"""

from .engine import GridEngine

__all__ = ['GridEngine']
