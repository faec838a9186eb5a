# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `TwentyFortyEight` engine, which owns a game board and turns direction
commands into new states, together with its configuration and result types.
"""

from .config import GameConfig, default_config, small_config
from .twentyfortyeight import GamePhase, GameState, MoveResult, TwentyFortyEight

__all__ = [
    "TwentyFortyEight",
    "GameConfig",
    "GamePhase",
    "GameState",
    "MoveResult",
    "default_config",
    "small_config",
]
