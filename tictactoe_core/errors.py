"""
Errors raised by the tic-tac-toe core.
All of them are caller errors: the core never retries or recovers.
"""

from typing import Optional


class GameError(Exception):
    """Base class for every error the core raises."""


class InvalidMove(GameError, ValueError):
    """
    A move was rejected: occupied cell, index out of range,
    bad mark, or the wrong side tried to move.
    """

    def __init__(self, message: str, index=None, mark=None):
        super().__init__(message)
        self.index = index
        self.mark = mark


class GameAlreadyOver(GameError):
    """A move was attempted on a board that already has a result."""

    def __init__(self, message: str, outcome: Optional[object] = None):
        super().__init__(message)
        self.outcome = outcome


class PreconditionViolated(GameError):
    """The search was asked to run on a finished or malformed board."""
