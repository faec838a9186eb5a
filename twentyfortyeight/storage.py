"""
High score stores.

The engine reads the high score once when it is built and hands it back every time it increases.
Anything with ``load_high_score`` and ``persist_high_score`` methods can act as the store.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from twentyfortyeight.errors import PersistenceError

# ##>: Key of the high score inside the JSON document.
HIGH_SCORE_KEY = 'HIGH_SCORE'

_logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Persistence collaborator of the engine."""

    def load_high_score(self) -> int:
        """Return the stored high score, 0 when nothing was stored yet."""
        ...

    def persist_high_score(self, score: int) -> None:
        """Store a new high score."""
        ...


class MemoryHighScoreStore:
    """Keeps the high score in memory, for tests and throw-away sessions."""

    def __init__(self, high_score: int = 0):
        self.high_score = high_score
        self.writes: list[int] = []

    def load_high_score(self) -> int:
        return self.high_score

    def persist_high_score(self, score: int) -> None:
        self.high_score = score
        self.writes.append(score)


class FileHighScoreStore:
    """
    Stores the high score in a small JSON document.

    Parameters
    ----------
    path : str or Path
        Location of the document. Parent directories are created on the first write.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load_high_score(self) -> int:
        """
        Read the high score from disk.

        Returns
        -------
        int
            The stored high score, or 0 if the document does not exist.

        Raises
        ------
        PersistenceError
            If the document cannot be read or does not hold a non-negative integer.
        """
        if not self.path.exists():
            return 0

        try:
            document = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as error:
            raise PersistenceError(f'cannot read high score from {self.path}: {error}') from error

        score = document.get(HIGH_SCORE_KEY, 0) if isinstance(document, dict) else None
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise PersistenceError(f'malformed high score in {self.path}: {score!r}')
        return score

    def persist_high_score(self, score: int) -> None:
        """
        Write the high score to disk.

        Raises
        ------
        PersistenceError
            If the document cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({HIGH_SCORE_KEY: int(score)}), encoding='utf-8')
        except OSError as error:
            raise PersistenceError(f'cannot write high score to {self.path}: {error}') from error
        _logger.debug('High score %d written to %s', score, self.path)
