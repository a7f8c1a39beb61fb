"""Song entity."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import timedelta

from melodex.domain.genre import Genre
from melodex.domain.validation import clamp_popularity, require, require_text
from melodex.helpers.exceptions import EntityValidationError


class Song:
    """
    A track in the catalog.

    Identity is the id: two songs with the same id are equal regardless of
    their other attributes. Play count and popularity are the only mutable
    fields; popularity is always clamped into [0, 100].
    """

    __slots__ = (
        "_id",
        "_title",
        "_artists",
        "_duration",
        "_release_year",
        "_primary_genre",
        "_secondary_genres",
        "_play_count",
        "_popularity",
    )

    def __init__(
        self,
        title: str,
        artists: str | Iterable[str],
        duration: timedelta,
        release_year: int,
        primary_genre: Genre,
        secondary_genres: Iterable[Genre] | None = None,
        play_count: int = 0,
        popularity: float = 0.0,
        song_id: str | None = None,
    ) -> None:
        self._id = song_id or str(uuid.uuid4())
        self._title = require_text(title, "title", "Song")

        artists = require(artists, "artists", "Song")
        # A bare string is one artist name, not an iterable of names
        artist_set = frozenset({require_text(artists, "artists", "Song")} if isinstance(artists, str) else artists)
        if not artist_set:
            raise EntityValidationError("Song.artists must contain at least one artist")
        self._artists = artist_set

        self._duration = require(duration, "duration", "Song")
        if self._duration < timedelta(0):
            raise EntityValidationError(f"Song.duration must be non-negative, got {duration}")

        self._release_year = require(release_year, "release_year", "Song")
        self._primary_genre = require(primary_genre, "primary_genre", "Song")
        self._secondary_genres = frozenset(secondary_genres or ())

        require(play_count, "play_count", "Song")
        if play_count < 0:
            raise EntityValidationError(f"Song.play_count must be non-negative, got {play_count}")
        self._play_count = play_count
        self._popularity = clamp_popularity(require(popularity, "popularity", "Song"))

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def artists(self) -> frozenset[str]:
        return self._artists

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def release_year(self) -> int:
        return self._release_year

    @property
    def primary_genre(self) -> Genre:
        return self._primary_genre

    @property
    def secondary_genres(self) -> frozenset[Genre]:
        return self._secondary_genres

    @property
    def play_count(self) -> int:
        return self._play_count

    @property
    def popularity(self) -> float:
        return self._popularity

    @property
    def all_genres(self) -> frozenset[Genre]:
        """Primary genre plus every secondary genre."""
        return self._secondary_genres | {self._primary_genre}

    def increment_play_count(self, count: int = 1) -> None:
        """Add plays; non-positive counts are ignored."""
        if count > 0:
            self._play_count += count

    def update_popularity(self, popularity: float) -> None:
        self._popularity = clamp_popularity(popularity)

    def has_artist(self, artist: str) -> bool:
        return artist in self._artists

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Song(id={self._id}, title={self._title!r})"
