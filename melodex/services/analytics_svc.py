"""
Analytics service - single entry point for catalog analytics.

ARCHITECTURE:
- Callers hand in already-validated, in-memory entity collections
- The service applies configured defaults and delegates to the pure
  computation layer (melodex.components.analytics)
- Results are returned unchanged as DTOs or entity collections

The service holds configuration only; no state is shared between calls and
entity inputs are never mutated.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from melodex.components.analytics.catalog_analytics_comp import (
    album_summaries,
    albums_by_criteria,
    artist_collaborations,
    average_popularity_by_genre,
    catalog_by_decade_and_genre,
    most_popular_song_by_genre,
    top_n_songs_by_play_count,
)
from melodex.components.analytics.listener_analytics_comp import (
    genre_affinity_scores,
    personalized_recommendations,
    play_statistics_by_premium,
    recommendation_scores,
    track_transition_probabilities,
    user_statistics,
    users_with_overlapping_genres,
)
from melodex.components.analytics.playlist_analytics_comp import (
    generate_dynamic_playlist,
    total_playlists_duration,
)

if TYPE_CHECKING:
    from melodex.domain import Album, Genre, Playlist, Song, User
    from melodex.helpers.dto.analytics_dto import (
        AlbumSummary,
        ArtistPair,
        Decade,
        DynamicPlaylistParams,
        PlayStatistics,
        ScoredSong,
        SongSummary,
        UserStatistics,
    )
    from melodex.services.config_service import ConfigService

logger = logging.getLogger(__name__)


@dataclass
class AnalyticsConfig:
    """Configuration for AnalyticsService."""

    default_top_n: int = 10
    shuffle_seed: int | None = None


class AnalyticsService:
    """
    Service for catalog, listener and playlist analytics.

    Thin facade over melodex.components.analytics that supplies configured
    defaults (top-N size, shuffle seed).
    """

    def __init__(self, cfg: AnalyticsConfig | None = None) -> None:
        """
        Initialize analytics service.

        Args:
            cfg: Analytics configuration; defaults are used when omitted
        """
        self.cfg = cfg or AnalyticsConfig()

    @classmethod
    def from_config_service(cls, config_service: ConfigService) -> AnalyticsService:
        """Build a service from composed application configuration."""
        return cls(config_service.make_analytics_config())

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def get_average_popularity_by_genre(self, songs: Sequence[Song]) -> dict[Genre, float]:
        return average_popularity_by_genre(songs)

    def get_most_popular_song_by_genre(self, songs: Sequence[Song]) -> dict[Genre, Song | None]:
        return most_popular_song_by_genre(songs)

    def get_top_n_songs_by_play_count(self, songs: Sequence[Song], n: int | None = None) -> list[Song]:
        """
        Rank songs by play count.

        Args:
            songs: Songs to rank
            n: Number of songs; falls back to cfg.default_top_n
        """
        return top_n_songs_by_play_count(songs, self.cfg.default_top_n if n is None else n)

    def find_albums_by_criteria(
        self,
        albums: Sequence[Album],
        year_after: int,
        min_avg_popularity: float,
        genre: Genre,
    ) -> list[Album]:
        return albums_by_criteria(albums, year_after, min_avg_popularity, genre)

    def create_album_summaries(self, albums: Sequence[Album]) -> list[AlbumSummary]:
        return album_summaries(albums)

    def analyze_catalog_by_decade_and_genre(
        self, songs: Sequence[Song]
    ) -> dict[Decade, dict[Genre, list[SongSummary]]]:
        return catalog_by_decade_and_genre(songs)

    def find_artist_collaborations(self, songs: Sequence[Song]) -> dict[ArtistPair, list[Song]]:
        return artist_collaborations(songs)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def find_users_with_overlapping_genres(self, users: Sequence[User]) -> dict[str, list[str]]:
        return users_with_overlapping_genres(users)

    def generate_user_statistics(
        self,
        users: Sequence[User],
        songs: Sequence[Song],
        playlists: Sequence[Playlist],
    ) -> dict[str, UserStatistics]:
        return user_statistics(users, songs, playlists)

    def get_play_statistics_by_premium_status(self, users: Sequence[User]) -> dict[bool, PlayStatistics]:
        return play_statistics_by_premium(users)

    def get_recommendation_scores(self, user: User, songs: Sequence[Song]) -> list[ScoredSong]:
        return recommendation_scores(user, songs)

    def get_personalized_recommendations(
        self,
        user: User,
        songs: Sequence[Song],
        albums: Sequence[Album] = (),
    ) -> list[Song]:
        return personalized_recommendations(user, songs, albums)

    def calculate_genre_affinity_scores(
        self,
        users: Sequence[User],
        songs: Sequence[Song],
        playlists: Sequence[Playlist],
    ) -> dict[User, dict[Genre, float]]:
        return genre_affinity_scores(users, songs, playlists)

    def analyze_track_transition_probabilities(
        self,
        users: Sequence[User],
        song_lookup: Mapping[str, Song],
    ) -> dict[Song, dict[Song, float]]:
        return track_transition_probabilities(users, song_lookup)

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def calculate_total_playlists_duration(self, playlists: Sequence[Playlist]) -> timedelta:
        return total_playlists_duration(playlists)

    def generate_dynamic_playlist(
        self,
        params: DynamicPlaylistParams,
        rng: random.Random | None = None,
    ) -> list[Song]:
        """
        Build a duration-bounded playlist.

        Args:
            params: Candidate pool, preferences and limits
            rng: Random source for high-variety shuffles. When omitted, a new
                source seeded from cfg.shuffle_seed is created for this call.
        """
        if rng is None:
            rng = random.Random(self.cfg.shuffle_seed)
            logger.debug("[analytics] Using per-call random source (seed=%s)", self.cfg.shuffle_seed)
        return generate_dynamic_playlist(params, rng)
