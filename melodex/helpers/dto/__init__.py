"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer
contracts within that domain (interfaces → services → components).

Rules for DTO modules:
- Import only stdlib and typing (domain types for annotations only)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
- Pure data structures with optional simple properties
"""

from __future__ import annotations

from melodex.helpers.dto.analytics_dto import (
    NO_SONGS_MARKER,
    AlbumSummary,
    ArtistPair,
    Decade,
    DynamicPlaylistParams,
    PlayStatistics,
    ScoredSong,
    SongSummary,
    UserStatistics,
)

__all__ = [
    "NO_SONGS_MARKER",
    "AlbumSummary",
    "ArtistPair",
    "Decade",
    "DynamicPlaylistParams",
    "PlayStatistics",
    "ScoredSong",
    "SongSummary",
    "UserStatistics",
]
