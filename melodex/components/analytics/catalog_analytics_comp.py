"""
Catalog analytics - pure computation over songs and albums.

PURE LEAF-DOMAIN - These functions operate on in-memory data only:
- Take entity collections and scalar parameters as input
- Perform ONLY aggregation, filtering, ranking and projection
- Return new result values; inputs are never mutated
- Do NOT import melodex.services or melodex.interfaces

Ties are broken by input order throughout: the first song reaching the
maximum wins, and sorts are stable.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from itertools import combinations

from melodex.domain.album import Album
from melodex.domain.genre import Genre
from melodex.domain.song import Song
from melodex.helpers.dto.analytics_dto import (
    NO_SONGS_MARKER,
    AlbumSummary,
    ArtistPair,
    Decade,
    SongSummary,
)
from melodex.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────
# Genre aggregates
# ──────────────────────────────────────────────────────────────────────


def average_popularity_by_genre(songs: Sequence[Song]) -> dict[Genre, float]:
    """
    Compute the mean popularity of songs grouped by primary genre.

    Args:
        songs: Songs to aggregate

    Returns:
        Genre -> mean popularity. Genres without songs are absent.
    """
    logger.info("[analytics] Computing average popularity by genre (%d songs)", len(songs))

    totals: dict[Genre, float] = defaultdict(float)
    counts: dict[Genre, int] = defaultdict(int)
    for song in songs:
        totals[song.primary_genre] += song.popularity
        counts[song.primary_genre] += 1

    return {genre: totals[genre] / counts[genre] for genre in totals}


def most_popular_song_by_genre(songs: Sequence[Song]) -> dict[Genre, Song | None]:
    """
    Find the most popular song for each primary genre.

    Args:
        songs: Songs to search

    Returns:
        Genre -> song with the highest popularity (first one wins ties)
    """
    logger.info("[analytics] Finding most popular song per genre (%d songs)", len(songs))

    best: dict[Genre, Song | None] = {}
    for song in songs:
        current = best.get(song.primary_genre)
        if current is None or song.popularity > current.popularity:
            best[song.primary_genre] = song
    return best


# ──────────────────────────────────────────────────────────────────────
# Rankings and filters
# ──────────────────────────────────────────────────────────────────────


def top_n_songs_by_play_count(songs: Sequence[Song], n: int) -> list[Song]:
    """
    Rank songs by play count, highest first, and keep the first n.

    Songs with equal play counts keep their input order.

    Args:
        songs: Songs to rank
        n: Number of songs to return; more than available returns all

    Returns:
        At most n songs

    Raises:
        InvalidArgumentError: If n is None or negative
    """
    if n is None or n < 0:
        raise InvalidArgumentError(f"n must be a non-negative integer, got {n!r}")

    logger.info("[analytics] Ranking top %d songs by play count", n)
    ranked = sorted(songs, key=lambda song: song.play_count, reverse=True)
    return ranked[:n]


def albums_by_criteria(
    albums: Sequence[Album],
    year_after: int,
    min_avg_popularity: float,
    genre: Genre,
) -> list[Album]:
    """
    Filter albums on release year, average popularity and genre.

    An album matches when it was released strictly after ``year_after``, its
    average popularity is at least ``min_avg_popularity``, and either its own
    primary genre or the primary genre of one of its songs is ``genre``.

    Raises:
        InvalidArgumentError: If any criterion is None
    """
    if year_after is None or min_avg_popularity is None or genre is None:
        raise InvalidArgumentError("year_after, min_avg_popularity and genre are all required")

    logger.info(
        "[analytics] Filtering %d albums: year > %d, avg popularity >= %.1f, genre %s",
        len(albums),
        year_after,
        min_avg_popularity,
        genre.value,
    )

    return [
        album
        for album in albums
        if album.release_year > year_after
        and album.average_popularity >= min_avg_popularity
        and (album.primary_genre is genre or any(song.primary_genre is genre for song in album.songs))
    ]


# ──────────────────────────────────────────────────────────────────────
# Projections and groupings
# ──────────────────────────────────────────────────────────────────────


def album_summaries(albums: Sequence[Album]) -> list[AlbumSummary]:
    """Project each album to an AlbumSummary, preserving input order."""
    logger.info("[analytics] Building summaries for %d albums", len(albums))

    summaries = []
    for album in albums:
        songs = album.songs
        most_popular = max(songs, key=lambda song: song.popularity) if songs else None
        summaries.append(
            AlbumSummary(
                title=album.title,
                artist=album.artist,
                release_year=album.release_year,
                song_count=len(songs),
                total_play_count=sum(song.play_count for song in songs),
                song_titles=", ".join(song.title for song in songs),
                most_popular_song=most_popular.title if most_popular else NO_SONGS_MARKER,
            )
        )
    return summaries


def catalog_by_decade_and_genre(songs: Sequence[Song]) -> dict[Decade, dict[Genre, list[SongSummary]]]:
    """
    Break the catalog down by release decade, then by primary genre.

    Args:
        songs: Songs to group

    Returns:
        Decade -> Genre -> song summaries in input order
    """
    logger.info("[analytics] Grouping %d songs by decade and genre", len(songs))

    breakdown: dict[Decade, dict[Genre, list[SongSummary]]] = defaultdict(lambda: defaultdict(list))
    for song in songs:
        breakdown[Decade(song.release_year)][song.primary_genre].append(
            SongSummary(
                title=song.title,
                artists=", ".join(sorted(song.artists)),
                popularity=song.popularity,
                play_count=song.play_count,
            )
        )

    return {decade: dict(by_genre) for decade, by_genre in breakdown.items()}


def artist_collaborations(songs: Sequence[Song]) -> dict[ArtistPair, list[Song]]:
    """
    Group multi-artist songs by every pair of co-artists on them.

    A song with k artists contributes to C(k, 2) pairs.

    Returns:
        ArtistPair -> songs featuring both artists, in input order
    """
    logger.info("[analytics] Finding artist collaborations (%d songs)", len(songs))

    pairs: dict[ArtistPair, list[Song]] = defaultdict(list)
    for song in songs:
        if len(song.artists) < 2:
            continue
        for first, second in combinations(sorted(song.artists), 2):
            pairs[ArtistPair(first, second)].append(song)

    return dict(pairs)
