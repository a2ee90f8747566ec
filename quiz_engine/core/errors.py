"""Exception types raised by the quiz engine."""

from __future__ import annotations


class QuizEngineError(Exception):
    """Base class for every error raised by the quiz engine."""


class InvalidArgumentError(QuizEngineError, ValueError):
    """Raised when a caller passes a malformed question, key or payload."""


class OutOfRangeError(QuizEngineError, IndexError):
    """Raised when a question or answer index falls outside its bounds."""


class QuizAlreadyExistsError(QuizEngineError):
    """Raised when registering a quiz under an identifier already in use."""


class QuizNotFoundError(QuizEngineError, LookupError):
    """Raised when looking up a quiz identifier that is not registered."""
