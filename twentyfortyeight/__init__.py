"""2048 game engine."""

from twentyfortyeight.core import Direction
from twentyfortyeight.envs import GameConfig, GamePhase, GameState, MoveResult, TwentyFortyEight
from twentyfortyeight.errors import BoardFullError, GameError, PersistenceError
from twentyfortyeight.storage import FileHighScoreStore, HighScoreStore, MemoryHighScoreStore

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "TwentyFortyEight",
    "GameConfig",
    "GamePhase",
    "GameState",
    "MoveResult",
    "GameError",
    "BoardFullError",
    "PersistenceError",
    "HighScoreStore",
    "MemoryHighScoreStore",
    "FileHighScoreStore",
]
