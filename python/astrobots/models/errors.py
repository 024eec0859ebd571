"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class AstrobotsError(Exception):
    """Base class for every puzzle error."""


class BoardError(AstrobotsError, ValueError):
    """A layout could not be turned into a state."""


class UnsolvableError(AstrobotsError, ValueError):
    """The goal cannot be reached from the given state."""


class GenerationError(AstrobotsError, RuntimeError):
    """No acceptable puzzle was found within the attempt budget."""


class InvariantMismatchError(AstrobotsError, RuntimeError):
    """Two states that should belong to one puzzle do not."""


class SelectionError(AstrobotsError, IndexError):
    """A selection refers to a robot the state does not have."""
