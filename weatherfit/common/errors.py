"""Exceptions raised by the comfort core."""

from __future__ import annotations


class WeatherfitError(Exception):
    """Base class for all errors raised by the package."""


class InvalidObservation(WeatherfitError, ValueError):
    """Raised when a weather observation holds values outside its domain."""


class InvalidProfile(WeatherfitError, ValueError):
    """Raised when a comfort profile or profile patch is malformed."""


class InvalidFeedback(WeatherfitError, ValueError):
    """Raised when a feedback event cannot be constructed."""


class ItemListDecodeError(WeatherfitError, ValueError):
    """Raised when a stored item list is not a JSON array of strings."""
