"""2048 board engine: owns one game and turns direction commands into new states."""

import logging
from dataclasses import dataclass
from enum import Enum

from numpy import array_equal, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from twentyfortyeight.core.gameboard import fill_cells, is_done, latent_state, spawn_tile
from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.envs.config import GameConfig, default_config
from twentyfortyeight.errors import BoardFullError, PersistenceError
from twentyfortyeight.storage import HighScoreStore, MemoryHighScoreStore

_logger = logging.getLogger(__name__)


def _snapshot(board: ndarray) -> ndarray:
    snapshot = board.copy()
    snapshot.flags.writeable = False
    return snapshot


class GamePhase(str, Enum):
    """Phase of a game. ``GAME_OVER`` is left only through ``reset``."""

    PLAYING = 'playing'
    GAME_OVER = 'game_over'


@dataclass(frozen=True, eq=False)
class MoveResult:
    """
    Outcome of one move.

    Attributes
    ----------
    moved : bool
        Whether the move changed the board. A tile was spawned if and only if this is True.
    score_delta : int
        Sum of the values of the tiles created by merging.
    board : ndarray
        Read-only snapshot of the board after the move (and the spawn).
    terminal : bool
        Whether the game is over after this move.
    """

    moved: bool
    score_delta: int
    board: ndarray
    terminal: bool


@dataclass(frozen=True, eq=False)
class GameState:
    """Read-only snapshot of a game, for the presentation layer."""

    board: ndarray
    score: int
    high_score: int
    terminal: bool

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.terminal else GamePhase.PLAYING


class TwentyFortyEight:
    """
    2048 board engine.

    The engine owns the board, the current score and the high score. The presentation layer sends
    directions to ``apply_move`` and renders the snapshots it gets back; it never mutates the board.

    Parameters
    ----------
    config : GameConfig, optional
        Board size, starting tiles and spawn distribution. Defaults to the classic 4x4 game.
    seed : int, optional
        Seed of the random generator. Ignored when ``rng`` is given.
    rng : Generator, optional
        Random source for spawned tiles.
    store : HighScoreStore, optional
        Persistence collaborator for the high score. Defaults to an in-memory store.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: Generator | None = None,
        store: HighScoreStore | None = None,
    ):
        self.config = config if config is not None else default_config()
        self._rng = rng if rng is not None else default_rng(seed)
        self._store = store if store is not None else MemoryHighScoreStore()

        self._board: ndarray = zeros((self.config.size, self.config.size), dtype=int64)
        self._score = 0
        self._high_score = self._load_high_score()

        self.reset()

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def max_tile(self) -> int:
        return int(self._board.max())

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.is_terminal() else GamePhase.PLAYING

    @property
    def state(self) -> GameState:
        """
        Snapshot of the whole game.

        Returns
        -------
        GameState
            Board copy, scores and terminal flag at the time of the call.
        """
        return GameState(
            board=_snapshot(self._board),
            score=self._score,
            high_score=self._high_score,
            terminal=self.is_terminal(),
        )

    def get_board(self) -> ndarray:
        """Read-only N x N snapshot of the board, 0 for empty cells."""
        return _snapshot(self._board)

    def get_score(self) -> int:
        return self._score

    def get_high_score(self) -> int:
        return self._high_score

    def is_terminal(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True when the board is full and no two adjacent tiles are equal.
        """
        return is_done(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with the configured starting tiles.

        The high score is kept.

        Parameters
        ----------
        seed : int, optional
            Re-seed the random generator before spawning the starting tiles.

        Returns
        -------
        ndarray
            Read-only snapshot of the new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = zeros((self.config.size, self.config.size), dtype=int64)
        self._score = 0
        fill_cells(
            self._board,
            number_tile=self.config.start_tiles,
            rng=self._rng,
            values=self.config.tile_values,
            probs=self.config.tile_probs,
        )

        _logger.info('New %dx%d game, high score %d', self.size, self.size, self._high_score)
        return self.get_board()

    def spawn_tile(self) -> tuple[tuple[int, int], int]:
        """
        Place one new tile in a uniformly chosen empty cell.

        Called by ``apply_move`` after each effective move; public for tests.

        Returns
        -------
        tuple
            Position ``(row, col)`` and value of the new tile.

        Raises
        ------
        BoardFullError
            If the board has no empty cell. Normal play never gets there, since a move that
            changes the board always frees or keeps an empty cell.
        """
        if self._board.all():
            raise BoardFullError('cannot spawn a tile on a full board')

        cell, value = spawn_tile(
            self._board, rng=self._rng, values=self.config.tile_values, probs=self.config.tile_probs
        )
        _logger.debug('Spawned %d at %s', value, cell)
        return cell, value

    def apply_move(self, direction: Direction | int | str) -> MoveResult:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction
            The move. Integers and direction names are converted to ``Direction``.

        Returns
        -------
        MoveResult
            Whether the board moved, the score gained, the new board and the terminal flag.

        Raises
        ------
        ValueError
            If ``direction`` does not name one of the four directions.

        Notes
        -----
        - An ineffective move leaves board and score unchanged and spawns nothing.
        - Once the game is over every move is ineffective: no tile can slide or merge.
        """
        direction = Direction.from_name(direction) if isinstance(direction, str) else Direction(direction)

        updated_board, score_delta = latent_state(self._board, direction)
        if array_equal(updated_board, self._board):
            _logger.debug('Move %s left the board unchanged', direction.name)
            return MoveResult(moved=False, score_delta=0, board=self.get_board(), terminal=self.is_terminal())

        self._board = updated_board.astype(int64, copy=True)
        self._score += score_delta
        self._update_high_score()
        self.spawn_tile()

        terminal = self.is_terminal()
        _logger.debug('Move %s scored %d, score %d', direction.name, score_delta, self._score)
        if terminal:
            _logger.info('Game over, final score %d', self._score)

        return MoveResult(moved=True, score_delta=score_delta, board=self.get_board(), terminal=terminal)

    def _update_high_score(self) -> None:
        if self._score <= self._high_score:
            return

        self._high_score = self._score
        try:
            self._store.persist_high_score(self._high_score)
        except (PersistenceError, OSError):
            _logger.warning('Failed to persist high score %d, keeping it in memory', self._high_score, exc_info=True)

    def _load_high_score(self) -> int:
        # ##>: Stores outside this package may raise OSError or return a non-integer.
        try:
            return max(int(self._store.load_high_score()), 0)
        except (PersistenceError, OSError, TypeError, ValueError):
            _logger.warning('Failed to load high score, starting from 0', exc_info=True)
            return 0
