"""
Listener analytics - pure computation over users and their listening data.

PURE LEAF-DOMAIN - These functions operate on in-memory data only:
- Take users plus the authoritative song/playlist collections as input
- Build any id -> entity index once per call
- Return new result values; users, songs and playlists are never mutated

Play-count entries that reference a song id missing from the catalog are
skipped without error.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping, Sequence

from melodex.domain.album import Album
from melodex.domain.genre import Genre
from melodex.domain.playlist import Playlist
from melodex.domain.song import Song
from melodex.domain.user import User
from melodex.helpers.dto.analytics_dto import PlayStatistics, ScoredSong, UserStatistics
from melodex.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

USER_TOP_SONGS = 5
RECOMMENDATION_LIMIT = 10

# Recommendation weights
FAVORITE_GENRE_WEIGHT = 10.0
SECONDARY_GENRE_WEIGHT = 2.0
POPULARITY_WEIGHT = 0.5
FAVORITE_ARTIST_BONUS = 20.0

# Genre affinity weights
SECONDARY_PLAY_WEIGHT = 0.5
FAVORITE_GENRE_BONUS = 20.0
PLAYLIST_SONG_WEIGHT = 0.5
MAX_AFFINITY = 100.0


def _song_index(songs: Sequence[Song]) -> dict[str, Song]:
    return {song.id: song for song in songs}


def _playlists_by_owner(playlists: Sequence[Playlist]) -> dict[str, list[Playlist]]:
    owned: dict[str, list[Playlist]] = defaultdict(list)
    for playlist in playlists:
        owned[playlist.owner_id].append(playlist)
    return owned


def _check_unique_usernames(users: Sequence[User]) -> None:
    seen: set[str] = set()
    for user in users:
        if user.username in seen:
            raise InvalidArgumentError(f"Duplicate username in input: {user.username!r}")
        seen.add(user.username)


# ──────────────────────────────────────────────────────────────────────
# Social and statistics
# ──────────────────────────────────────────────────────────────────────


def users_with_overlapping_genres(users: Sequence[User]) -> dict[str, list[str]]:
    """
    For every user, list the other users sharing at least one favorite genre.

    Args:
        users: Users to compare pairwise

    Returns:
        username -> other usernames, in input order

    Raises:
        InvalidArgumentError: If two users share a username
    """
    logger.info("[analytics] Finding overlapping favorite genres across %d users", len(users))
    _check_unique_usernames(users)

    favorites = {user.id: user.favorite_genres for user in users}
    return {
        user.username: [
            other.username
            for other in users
            if other != user and not favorites[user.id].isdisjoint(favorites[other.id])
        ]
        for user in users
    }


def user_statistics(
    users: Sequence[User],
    songs: Sequence[Song],
    playlists: Sequence[Playlist],
) -> dict[str, UserStatistics]:
    """
    Build listening statistics for each user.

    Top songs are the user's five highest personal play counts (ties keep
    first-play order). Ids missing from ``songs`` are dropped after ranking,
    so a user can end up with fewer than five top songs.

    Returns:
        username -> UserStatistics
    """
    logger.info("[analytics] Generating statistics for %d users", len(users))
    _check_unique_usernames(users)

    song_by_id = _song_index(songs)
    owned = _playlists_by_owner(playlists)

    stats: dict[str, UserStatistics] = {}
    for user in users:
        ranked_ids = sorted(user.song_play_counts.items(), key=lambda item: item[1], reverse=True)
        top_songs = [song_by_id[song_id] for song_id, _ in ranked_ids[:USER_TOP_SONGS] if song_id in song_by_id]
        stats[user.username] = UserStatistics(
            username=user.username,
            is_premium=user.is_premium,
            total_play_count=user.total_play_count,
            playlist_count=len(owned.get(user.id, ())),
            top_songs=top_songs,
            most_played_genres=frozenset(song.primary_genre for song in top_songs),
        )
    return stats


def _summarize_play_counts(totals: list[int]) -> PlayStatistics:
    if not totals:
        return PlayStatistics(count=0, total=0, average=0.0, minimum=None, maximum=None)
    total = sum(totals)
    return PlayStatistics(
        count=len(totals),
        total=total,
        average=total / len(totals),
        minimum=min(totals),
        maximum=max(totals),
    )


def play_statistics_by_premium(users: Sequence[User]) -> dict[bool, PlayStatistics]:
    """
    Summarize total play counts for premium and free users.

    Both keys are always present. An empty group reports count=0, total=0,
    average=0.0 and None for minimum and maximum.

    Returns:
        {True: premium statistics, False: free statistics}
    """
    logger.info("[analytics] Partitioning %d users by premium status", len(users))

    groups: dict[bool, list[int]] = {True: [], False: []}
    for user in users:
        groups[bool(user.is_premium)].append(user.total_play_count)

    return {is_premium: _summarize_play_counts(totals) for is_premium, totals in groups.items()}


# ──────────────────────────────────────────────────────────────────────
# Recommendations and affinity
# ──────────────────────────────────────────────────────────────────────


def recommendation_scores(user: User, songs: Sequence[Song]) -> list[ScoredSong]:
    """
    Score every song the user has not played yet.

    score = 10 if the primary genre is a favorite
          + 2 per secondary genre that is a favorite
          + 0.5 * popularity
          + 20 if any artist made one of the user's favorite albums

    Returns:
        ScoredSong entries in input order
    """
    if user is None:
        raise InvalidArgumentError("user is required")

    favorite_genres = user.favorite_genres
    played_ids = user.song_play_counts.keys()
    favorite_artists = {album.artist for album in user.favorite_albums}

    scored = []
    for song in songs:
        if song.id in played_ids:
            continue
        score = FAVORITE_GENRE_WEIGHT if song.primary_genre in favorite_genres else 0.0
        score += SECONDARY_GENRE_WEIGHT * len(song.secondary_genres & favorite_genres)
        score += POPULARITY_WEIGHT * song.popularity
        if not song.artists.isdisjoint(favorite_artists):
            score += FAVORITE_ARTIST_BONUS
        scored.append(ScoredSong(song=song, score=score))
    return scored


def personalized_recommendations(
    user: User,
    songs: Sequence[Song],
    albums: Sequence[Album] = (),
) -> list[Song]:
    """
    Recommend up to ten unplayed songs for a user, best score first.

    Args:
        user: Listener to recommend for
        songs: Candidate catalog
        albums: Catalog albums; favorite-artist matching uses the user's own
            favorite albums, so this is accepted but not required

    Returns:
        At most ten songs, non-increasing in score (ties keep input order)
    """
    logger.info(
        "[analytics] Computing recommendations for %s over %d songs (%d albums)",
        user.username if user else None,
        len(songs),
        len(albums),
    )
    scored = recommendation_scores(user, songs)
    ranked = sorted(scored, key=lambda entry: entry.score, reverse=True)
    return [entry.song for entry in ranked[:RECOMMENDATION_LIMIT]]


def _raw_genre_scores(user: User, song_by_id: Mapping[str, Song], owned: Sequence[Playlist]) -> dict[Genre, float]:
    scores: dict[Genre, float] = defaultdict(float)

    for song_id, plays in user.song_play_counts.items():
        song = song_by_id.get(song_id)
        if song is None:
            logger.debug("[analytics] Skipping unknown song id %s for %s", song_id, user.username)
            continue
        scores[song.primary_genre] += plays
        for genre in song.secondary_genres:
            scores[genre] += plays * SECONDARY_PLAY_WEIGHT

    for genre in user.favorite_genres:
        scores[genre] += FAVORITE_GENRE_BONUS

    for playlist in owned:
        for song in playlist.songs:
            scores[song.primary_genre] += PLAYLIST_SONG_WEIGHT

    return dict(scores)


def genre_affinity_scores(
    users: Sequence[User],
    songs: Sequence[Song],
    playlists: Sequence[Playlist],
) -> dict[User, dict[Genre, float]]:
    """
    Infer a 0-100 preference score per genre for each user.

    Raw scores combine play history (primary genre at full weight, secondary
    genres at half weight), a flat bonus per favorite genre, and half a point
    per song in playlists the user owns. Each user's map is then scaled so the
    strongest genre is exactly 100.

    Returns:
        User -> Genre -> score; users with no signal get an empty map
    """
    logger.info("[analytics] Calculating genre affinity for %d users", len(users))

    song_by_id = _song_index(songs)
    owned = _playlists_by_owner(playlists)

    affinity: dict[User, dict[Genre, float]] = {}
    for user in users:
        raw = _raw_genre_scores(user, song_by_id, owned.get(user.id, ()))
        max_score = max(raw.values(), default=1.0)
        affinity[user] = {genre: min(MAX_AFFINITY, score / max_score * MAX_AFFINITY) for genre, score in raw.items()}
    return affinity


# ──────────────────────────────────────────────────────────────────────
# Listening transitions
# ──────────────────────────────────────────────────────────────────────


def track_transition_probabilities(
    users: Sequence[User],
    song_lookup: Mapping[str, Song],
) -> dict[Song, dict[Song, float]]:
    """
    Estimate next-song probabilities from users' listening histories.

    Each history is resolved through ``song_lookup`` (unknown ids dropped);
    sequences shorter than two songs are ignored. Every consecutive pair
    counts as one transition, and counts are normalized per origin song.

    Returns:
        origin song -> destination song -> probability
    """
    logger.info("[analytics] Analyzing track transitions for %d users", len(users))

    counts: dict[Song, dict[Song, int]] = defaultdict(lambda: defaultdict(int))
    for user in users:
        sequence = [song_lookup[song_id] for song_id in user.listening_history if song_id in song_lookup]
        if len(sequence) < 2:
            continue
        for current, following in zip(sequence, sequence[1:]):
            counts[current][following] += 1

    probabilities: dict[Song, dict[Song, float]] = {}
    for origin, destinations in counts.items():
        total = sum(destinations.values())
        probabilities[origin] = {song: count / total for song, count in destinations.items()}
    return probabilities
