"""Genre enumeration shared by songs, albums and user preferences."""

from __future__ import annotations

from enum import Enum

from melodex.helpers.exceptions import EntityValidationError


class Genre(Enum):
    """Closed set of music genres."""

    ROCK = "ROCK"
    POP = "POP"
    HIP_HOP = "HIP_HOP"
    JAZZ = "JAZZ"
    CLASSICAL = "CLASSICAL"
    ELECTRONIC = "ELECTRONIC"
    REGGAE = "REGGAE"
    COUNTRY = "COUNTRY"
    BLUES = "BLUES"
    FOLK = "FOLK"
    METAL = "METAL"
    RNB = "RNB"
    INDIE = "INDIE"
    LATIN = "LATIN"
    KPOP = "KPOP"

    @classmethod
    def parse(cls, label: str) -> Genre:
        """
        Resolve a genre from a case-insensitive label.

        Accepts "hip-hop", "Hip Hop" and "HIP_HOP" alike.

        Raises:
            EntityValidationError: If the label names no known genre
        """
        key = label.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise EntityValidationError(f"Unknown genre: {label!r}") from None
