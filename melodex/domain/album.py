"""Album entity."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from melodex.domain.genre import Genre
from melodex.domain.song import Song
from melodex.domain.validation import require, require_text


class Album:
    """
    An ordered collection of songs released together.

    Songs are held by reference: the album does not own their lifecycle, so
    play count or popularity changes on a song are visible through the album's
    derived values.
    """

    __slots__ = ("_id", "_title", "_artist", "_release_year", "_primary_genre", "_songs", "_is_compilation")

    def __init__(
        self,
        title: str,
        artist: str,
        release_year: int,
        primary_genre: Genre,
        songs: Iterable[Song] | None = None,
        is_compilation: bool = False,
        album_id: str | None = None,
    ) -> None:
        self._id = album_id or str(uuid.uuid4())
        self._title = require_text(title, "title", "Album")
        self._artist = require_text(artist, "artist", "Album")
        self._release_year = require(release_year, "release_year", "Album")
        self._primary_genre = require(primary_genre, "primary_genre", "Album")
        self._songs: list[Song] = []
        for song in songs or ():
            self.add_song(song)
        self._is_compilation = is_compilation

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def artist(self) -> str:
        return self._artist

    @property
    def release_year(self) -> int:
        return self._release_year

    @property
    def primary_genre(self) -> Genre:
        return self._primary_genre

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    @property
    def is_compilation(self) -> bool:
        return self._is_compilation

    @property
    def song_count(self) -> int:
        return len(self._songs)

    @property
    def average_popularity(self) -> float:
        """Mean popularity of the album's songs, 0.0 when empty."""
        if not self._songs:
            return 0.0
        return sum(song.popularity for song in self._songs) / len(self._songs)

    @property
    def total_play_count(self) -> int:
        return sum(song.play_count for song in self._songs)

    def add_song(self, song: Song) -> None:
        """Append a song unless it is None or already on the album."""
        if song is not None and song not in self._songs:
            self._songs.append(song)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Album):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Album(id={self._id}, title={self._title!r}, artist={self._artist!r})"
