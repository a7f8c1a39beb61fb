"""Playlist entity."""

from __future__ import annotations

import random
import uuid
from collections import Counter
from datetime import datetime, timedelta

from melodex.domain.genre import Genre
from melodex.domain.song import Song
from melodex.domain.validation import require_text
from melodex.helpers.time_helper import utc_now


class Playlist:
    """
    A user-curated, ordered list of songs.

    The owner is referenced by user id only. Songs are held by reference and a
    song appears at most once per playlist.
    """

    __slots__ = ("_id", "name", "_owner_id", "_created_at", "_songs", "is_public", "description")

    def __init__(
        self,
        name: str,
        owner_id: str,
        is_public: bool = False,
        description: str = "",
        created_at: datetime | None = None,
        playlist_id: str | None = None,
    ) -> None:
        self._id = playlist_id or str(uuid.uuid4())
        self.name = require_text(name, "name", "Playlist")
        self._owner_id = require_text(owner_id, "owner_id", "Playlist")
        self._created_at = created_at or utc_now()
        self._songs: list[Song] = []
        self.is_public = is_public
        self.description = description

    @property
    def id(self) -> str:
        return self._id

    @property
    def owner_id(self) -> str:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    @property
    def song_count(self) -> int:
        return len(self._songs)

    @property
    def total_duration(self) -> timedelta:
        return sum((song.duration for song in self._songs), timedelta(0))

    @property
    def all_genres(self) -> frozenset[Genre]:
        return frozenset(genre for song in self._songs for genre in song.all_genres)

    @property
    def most_frequent_genre(self) -> Genre | None:
        """
        Most common primary genre in the playlist.

        Ties go to the genre that first appears in playlist order.
        Returns None for an empty playlist.
        """
        counts = Counter(song.primary_genre for song in self._songs)
        if not counts:
            return None
        return counts.most_common(1)[0][0]

    @property
    def average_popularity(self) -> float:
        if not self._songs:
            return 0.0
        return sum(song.popularity for song in self._songs) / len(self._songs)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_song(self, song: Song) -> None:
        if song is not None and song not in self._songs:
            self._songs.append(song)

    def remove_song(self, song: Song) -> bool:
        """Remove a song; returns False if it was not in the playlist."""
        try:
            self._songs.remove(song)
        except ValueError:
            return False
        return True

    def remove_song_at(self, index: int) -> None:
        """Remove the song at index; out-of-range indexes are ignored."""
        if 0 <= index < len(self._songs):
            del self._songs[index]

    def move_song(self, from_index: int, to_index: int) -> None:
        """Move a song to a new position, shifting the songs in between."""
        if not (0 <= from_index < len(self._songs)):
            raise IndexError(f"from_index {from_index} out of range")
        song = self._songs.pop(from_index)
        self._songs.insert(max(0, min(to_index, len(self._songs))), song)

    def shuffle(self, rng: random.Random | None = None) -> None:
        (rng or random.Random()).shuffle(self._songs)

    def sort_by_title(self) -> None:
        self._songs.sort(key=lambda song: song.title)

    def sort_by_popularity(self) -> None:
        self._songs.sort(key=lambda song: song.popularity, reverse=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playlist):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Playlist(id={self._id}, name={self.name!r}, owner_id={self._owner_id}, songs={len(self._songs)})"
