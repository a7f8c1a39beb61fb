"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class MelodexError(Exception):
    """Base class for all Melodex errors."""


class InvalidArgumentError(MelodexError, ValueError):
    """Raised when an analytics routine receives an invalid scalar argument."""


class EntityValidationError(MelodexError, ValueError):
    """Raised when an entity is constructed with missing or invalid fields."""
