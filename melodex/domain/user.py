"""User entity."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from datetime import date
from types import MappingProxyType
from typing import TYPE_CHECKING

from melodex.domain.genre import Genre
from melodex.domain.validation import require, require_text

if TYPE_CHECKING:
    from melodex.domain.album import Album


class User:
    """
    A listener on the platform.

    Tracks favorite genres and albums, a per-song play count map (counts only
    ever grow) and a chronological listening history of song ids.
    """

    __slots__ = (
        "_id",
        "_username",
        "_email",
        "_join_date",
        "_favorite_genres",
        "_song_play_counts",
        "_favorite_albums",
        "_country",
        "is_premium",
        "_listening_history",
    )

    def __init__(
        self,
        username: str,
        email: str,
        join_date: date,
        favorite_genres: Iterable[Genre] | None = None,
        country: str = "",
        is_premium: bool = False,
        user_id: str | None = None,
    ) -> None:
        self._id = user_id or str(uuid.uuid4())
        self._username = require_text(username, "username", "User")
        self._email = require_text(email, "email", "User")
        self._join_date = require(join_date, "join_date", "User")
        self._favorite_genres: set[Genre] = set(favorite_genres or ())
        self._song_play_counts: dict[str, int] = {}
        self._favorite_albums: set[Album] = set()
        self._country = country
        self.is_premium = is_premium
        self._listening_history: list[str] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def join_date(self) -> date:
        return self._join_date

    @property
    def country(self) -> str:
        return self._country

    @property
    def favorite_genres(self) -> frozenset[Genre]:
        return frozenset(self._favorite_genres)

    @property
    def song_play_counts(self) -> Mapping[str, int]:
        """Read-only view of song id -> play count, in first-play order."""
        return MappingProxyType(self._song_play_counts)

    @property
    def favorite_albums(self) -> frozenset[Album]:
        return frozenset(self._favorite_albums)

    @property
    def listening_history(self) -> tuple[str, ...]:
        return tuple(self._listening_history)

    @property
    def total_play_count(self) -> int:
        return sum(self._song_play_counts.values())

    @property
    def most_played_song_id(self) -> str | None:
        """Song id with the highest play count; the first one played wins ties."""
        if not self._song_play_counts:
            return None
        return max(self._song_play_counts, key=self._song_play_counts.__getitem__)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_favorite_genre(self, genre: Genre) -> None:
        if genre is not None:
            self._favorite_genres.add(genre)

    def remove_favorite_genre(self, genre: Genre) -> None:
        self._favorite_genres.discard(genre)

    def play_song(self, song_id: str, count: int = 1) -> None:
        """Add plays for a song; non-positive counts are ignored."""
        if count > 0:
            self._song_play_counts[song_id] = self._song_play_counts.get(song_id, 0) + count

    def add_favorite_album(self, album: Album) -> None:
        if album is not None:
            self._favorite_albums.add(album)

    def remove_favorite_album(self, album: Album) -> None:
        self._favorite_albums.discard(album)

    def record_listen(self, *song_ids: str) -> None:
        """Append song ids to the end of the listening history."""
        self._listening_history.extend(song_ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username!r}, premium={self.is_premium})"
