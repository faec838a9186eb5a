# -*- coding: utf-8 -*-
"""
Pure board functions of the 2048 engine.

It includes the direction enumeration, functions for checking legal and illegal moves, sliding and
merging tiles, spawning tiles, computing latent and next states, and checking if the game is done.
"""

from .gameboard import (
    empty_cells,
    fill_cells,
    is_done,
    latent_state,
    merge_line,
    next_state,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import Direction, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "Direction",
    "legal_actions",
    "legal_actions_mask",
    "illegal_actions",
    "merge_line",
    "slide_and_merge",
    "empty_cells",
    "spawn_tile",
    "fill_cells",
    "latent_state",
    "is_done",
    "next_state",
]
