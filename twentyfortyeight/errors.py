"""Exceptions raised by the 2048 engine and its collaborators."""


class GameError(Exception):
    """Base class for every error raised by this package."""


class BoardFullError(GameError):
    """A tile was requested on a board without empty cells."""


class PersistenceError(GameError):
    """The high score could not be read from or written to its store."""
