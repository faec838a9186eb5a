"""
Configuration for the 2048 engine.

The defaults reproduce the classic game: a 4x4 board, two starting tiles, and new tiles worth 2
(90%) or 4 (10%).
"""

from dataclasses import dataclass
from math import isclose


@dataclass(frozen=True)
class GameConfig:
    """
    Parameters of a game.

    Attributes
    ----------
    size : int
        Side length of the square board. At least 2, so that a fresh board always has a legal move.
    start_tiles : int
        Number of tiles spawned by a new game or a reset. At most ``size * size - 1``.
    tile_values : tuple[int, ...]
        Values a spawned tile can take. Each must be a power of two, at least 2.
    tile_probs : tuple[float, ...]
        Probability of each entry of ``tile_values``. Must sum to 1.
    """

    size: int = 4
    start_tiles: int = 2
    tile_values: tuple[int, ...] = (2, 4)
    tile_probs: tuple[float, ...] = (0.9, 0.1)

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        # ##>: A fresh board keeps one empty cell, so it is never terminal.
        if not 1 <= self.start_tiles < self.size * self.size:
            raise ValueError(f'start_tiles must be in [1, {self.size * self.size - 1}], got {self.start_tiles}')
        if len(self.tile_values) != len(self.tile_probs) or not self.tile_values:
            raise ValueError('tile_values and tile_probs must be non-empty and of equal length')
        for value in self.tile_values:
            if value < 2 or value & (value - 1):
                raise ValueError(f'tile values must be powers of two >= 2, got {value}')
        if any(prob < 0 for prob in self.tile_probs) or not isclose(sum(self.tile_probs), 1.0):
            raise ValueError(f'tile_probs must be non-negative and sum to 1, got {self.tile_probs}')

    @property
    def cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


def default_config() -> GameConfig:
    """
    Create the classic 2048 configuration.

    Returns
    -------
    GameConfig
        A 4x4 board with two starting tiles.
    """
    return GameConfig()


def small_config() -> GameConfig:
    """
    Create a 3x3 configuration, where games end quickly.

    Returns
    -------
    GameConfig
        A 3x3 board with two starting tiles.
    """
    return GameConfig(size=3)
