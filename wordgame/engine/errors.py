"""Exceptions raised by the game engine."""

from __future__ import annotations


class WordGameError(Exception):
    """Base class for all engine errors."""


class LoadError(WordGameError):
    """The vocabulary source could not be read or is malformed."""


class EmptyVocabularyError(WordGameError, LookupError):
    """A random word was requested from an empty vocabulary."""


class LengthMismatchError(WordGameError, ValueError):
    """The scorer was called with a word of the wrong length."""


class RoundOverError(WordGameError, RuntimeError):
    """A guess was submitted to a round that has already ended."""


class RoundInProgressError(WordGameError, RuntimeError):
    """The target or result was requested before the round ended."""
