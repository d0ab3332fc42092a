"""Exceptions raised by the game core."""

from __future__ import annotations


class AstroLinguaError(Exception):
    """Base class for all game-core errors."""


class EmptyCollectionError(AstroLinguaError, ValueError):
    """A random choice was requested from an empty pool."""


class InvalidVocabularyError(AstroLinguaError, ValueError):
    """The vocabulary is empty or holds malformed entries."""
