"""
Playlist analytics - duration totals and dynamic playlist generation.

PURE LEAF-DOMAIN - no I/O, inputs are never mutated. Randomness is only used
for high-variety playlist generation and always comes from the caller's
``random.Random`` instance, so a seeded source gives reproducible output.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from datetime import timedelta

from melodex.domain.playlist import Playlist
from melodex.domain.song import Song
from melodex.helpers.dto.analytics_dto import DynamicPlaylistParams
from melodex.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MIN_VARIETY = 1
MAX_VARIETY = 10
# Above this, a secondary genre match is enough
SECONDARY_GENRE_VARIETY = 3
# Above this, artist preferences stop filtering
ANY_ARTIST_VARIETY = 7


def total_playlists_duration(playlists: Sequence[Playlist]) -> timedelta:
    """
    Sum the duration of every song across the given playlists.

    A song that appears in several playlists is counted once per playlist.
    """
    logger.info("[analytics] Summing duration across %d playlists", len(playlists))
    return sum((song.duration for playlist in playlists for song in playlist.songs), timedelta(0))


def _validate(params: DynamicPlaylistParams) -> None:
    if params.available_songs is None:
        raise InvalidArgumentError("available_songs is required")
    if params.target_duration is None or params.target_duration < timedelta(0):
        raise InvalidArgumentError(f"target_duration must be a non-negative timedelta, got {params.target_duration!r}")
    if params.variety_factor is None or not (MIN_VARIETY <= params.variety_factor <= MAX_VARIETY):
        raise InvalidArgumentError(
            f"variety_factor must be between {MIN_VARIETY} and {MAX_VARIETY}, got {params.variety_factor!r}"
        )
    if (
        params.earliest_year is not None
        and params.latest_year is not None
        and params.earliest_year > params.latest_year
    ):
        raise InvalidArgumentError(
            f"earliest_year {params.earliest_year} is after latest_year {params.latest_year}"
        )


def _matches(song: Song, params: DynamicPlaylistParams) -> bool:
    genres = params.preferred_genres
    if genres and song.primary_genre not in genres:
        if params.variety_factor <= SECONDARY_GENRE_VARIETY or song.secondary_genres.isdisjoint(genres):
            return False

    artists = params.preferred_artists
    if artists and params.variety_factor <= ANY_ARTIST_VARIETY and song.artists.isdisjoint(artists):
        return False

    if params.earliest_year is not None and song.release_year < params.earliest_year:
        return False
    if params.latest_year is not None and song.release_year > params.latest_year:
        return False
    return True


def _order(candidates: list[Song], params: DynamicPlaylistParams, rng: random.Random) -> list[Song]:
    variety = params.variety_factor
    if variety <= SECONDARY_GENRE_VARIETY:
        genres = params.preferred_genres or frozenset()
        return sorted(candidates, key=lambda song: (song.primary_genre not in genres, -song.popularity))
    if variety <= ANY_ARTIST_VARIETY:
        # Least popular first, newest first within equal popularity
        return sorted(candidates, key=lambda song: (song.popularity, -song.release_year))
    shuffled = list(candidates)
    rng.shuffle(shuffled)
    return shuffled


def generate_dynamic_playlist(
    params: DynamicPlaylistParams,
    rng: random.Random | None = None,
) -> list[Song]:
    """
    Build a playlist from a candidate pool that fits a target duration.

    Filtering:
        - genre: primary genre preferred, or (variety > 3) any secondary genre preferred
        - artist: any artist preferred, or (variety > 7) no artist match required
        - year: inclusive range, enforcing only the bounds supplied
        Empty preference sets do not filter.

    Ordering by variety factor:
        - 1-3: preferred primary genre first, then popularity descending
        - 4-7: popularity ascending, then release year descending
        - 8-10: a single shuffle of the candidates using ``rng``

    Songs are then taken in order until the next one would push the total
    strictly past ``target_duration``. The first song is always taken.

    Args:
        params: Candidate pool, preferences and limits
        rng: Random source for high-variety shuffling; a fresh unseeded
            source is used when omitted

    Returns:
        Ordered songs for the playlist

    Raises:
        InvalidArgumentError: On a missing pool, negative target duration,
            variety outside 1-10 or an inverted year range
    """
    _validate(params)
    logger.info(
        "[analytics] Generating dynamic playlist: %d candidates, target %s, variety %d",
        len(params.available_songs),
        params.target_duration,
        params.variety_factor,
    )

    candidates = [song for song in params.available_songs if _matches(song, params)]
    ordered = _order(candidates, params, rng or random.Random())

    playlist: list[Song] = []
    elapsed = timedelta(0)
    for song in ordered:
        if playlist and elapsed + song.duration > params.target_duration:
            break
        playlist.append(song)
        elapsed += song.duration

    logger.debug("[analytics] Dynamic playlist: %d songs, %s total", len(playlist), elapsed)
    return playlist
