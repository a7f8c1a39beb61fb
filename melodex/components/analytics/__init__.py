"""
Analytics package.

Pure computation over in-memory catalog entities. Every routine takes its
collections as arguments and returns a new value.
"""

from .catalog_analytics_comp import (
    album_summaries,
    albums_by_criteria,
    artist_collaborations,
    average_popularity_by_genre,
    catalog_by_decade_and_genre,
    most_popular_song_by_genre,
    top_n_songs_by_play_count,
)
from .listener_analytics_comp import (
    genre_affinity_scores,
    personalized_recommendations,
    play_statistics_by_premium,
    recommendation_scores,
    track_transition_probabilities,
    user_statistics,
    users_with_overlapping_genres,
)
from .playlist_analytics_comp import (
    generate_dynamic_playlist,
    total_playlists_duration,
)

__all__ = [
    "album_summaries",
    "albums_by_criteria",
    "artist_collaborations",
    "average_popularity_by_genre",
    "catalog_by_decade_and_genre",
    "generate_dynamic_playlist",
    "genre_affinity_scores",
    "most_popular_song_by_genre",
    "personalized_recommendations",
    "play_statistics_by_premium",
    "recommendation_scores",
    "top_n_songs_by_play_count",
    "total_playlists_duration",
    "track_transition_probabilities",
    "user_statistics",
    "users_with_overlapping_genres",
]
