"""
Analytics domain DTOs.

Data transfer objects for analytics results and parameters.
These form cross-layer contracts between components, services, and interfaces.

Rules:
- Import only stdlib and typing at runtime (domain types are for annotations only)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from melodex.domain.genre import Genre
    from melodex.domain.song import Song


# ──────────────────────────────────────────────────────────────────────
# Grouping keys
# ──────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, order=True)
class Decade:
    """Decade grouping key; any year inside the decade normalizes to its start."""

    start_year: int

    def __post_init__(self) -> None:
        # Floor division keeps negative years consistent: -5 -> -10
        object.__setattr__(self, "start_year", (self.start_year // 10) * 10)

    @property
    def label(self) -> str:
        return f"{self.start_year}s"


@dataclass(frozen=True)
class ArtistPair:
    """Unordered pair of co-artists, stored with the lexicographically smaller name first."""

    first: str
    second: str

    def __post_init__(self) -> None:
        if self.first > self.second:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)


# ──────────────────────────────────────────────────────────────────────
# Result DTOs
# ──────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SongSummary:
    """Lightweight song projection used by the decade/genre catalog breakdown."""

    title: str
    artists: str  # sorted, ", " joined
    popularity: float
    play_count: int


@dataclass
class AlbumSummary:
    """Domain result for album summary projection."""

    title: str
    artist: str
    release_year: int
    song_count: int
    total_play_count: int
    song_titles: str  # ", " joined in album order
    most_popular_song: str  # title, or NO_SONGS_MARKER for an empty album


NO_SONGS_MARKER = "N/A"


@dataclass
class UserStatistics:
    """Domain result for per-user listening statistics."""

    username: str
    is_premium: bool
    total_play_count: int
    playlist_count: int
    top_songs: list[Song] = field(default_factory=list)
    most_played_genres: frozenset[Genre] = field(default_factory=frozenset)


@dataclass
class PlayStatistics:
    """
    Summary of total play counts across a group of users.

    An empty group reports count=0, total=0, average=0.0 and None for
    minimum/maximum.
    """

    count: int
    total: int
    average: float
    minimum: int | None
    maximum: int | None


@dataclass(frozen=True)
class ScoredSong:
    """A recommendation candidate with its computed score."""

    song: Song
    score: float


# ──────────────────────────────────────────────────────────────────────
# Parameter DTOs (for simplifying function signatures)
# ──────────────────────────────────────────────────────────────────────


@dataclass
class DynamicPlaylistParams:
    """Parameters for generate_dynamic_playlist."""

    available_songs: Sequence[Song]
    target_duration: timedelta
    variety_factor: int  # 1 (strict) .. 10 (exploratory)
    preferred_genres: Set[Genre] = field(default_factory=frozenset)
    preferred_artists: Set[str] = field(default_factory=frozenset)
    earliest_year: int | None = None  # inclusive
    latest_year: int | None = None  # inclusive
