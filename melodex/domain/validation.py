"""Construction-time field checks shared by the entity classes."""

from __future__ import annotations

from typing import TypeVar

from melodex.helpers.exceptions import EntityValidationError

T = TypeVar("T")


def require(value: T | None, field_name: str, entity: str) -> T:
    """Return value, or raise if it is None."""
    if value is None:
        raise EntityValidationError(f"{entity}.{field_name} is required")
    return value


def require_text(value: str | None, field_name: str, entity: str) -> str:
    """Return a non-blank string, or raise."""
    if value is None or not str(value).strip():
        raise EntityValidationError(f"{entity}.{field_name} must be a non-empty string")
    return value


def clamp_popularity(value: float) -> float:
    """Clamp a popularity score into [0, 100]."""
    return max(0.0, min(100.0, float(value)))
