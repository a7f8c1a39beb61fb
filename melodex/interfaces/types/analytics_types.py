"""
Analytics response types - Pydantic models for analytics results.

External contracts for presentation layers that render or serialize results.
These models are thin adapters around DTOs from helpers/dto/analytics_dto.py.

Architecture:
- Response models use .from_dto() to convert DTOs/entities to Pydantic
- Services continue using DTOs (no Pydantic imports in services layer)
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from melodex.domain.song import Song
from melodex.helpers.dto.analytics_dto import (
    AlbumSummary,
    ArtistPair,
    PlayStatistics,
    SongSummary,
    UserStatistics,
)

# ──────────────────────────────────────────────────────────────────────
# Song Models
# ──────────────────────────────────────────────────────────────────────


class SongResponse(BaseModel):
    """Pydantic model for a Song entity."""

    id: str = Field(..., description="Song id")
    title: str = Field(..., description="Song title")
    artists: list[str] = Field(..., description="Artist names, sorted")
    duration_seconds: float = Field(..., ge=0, description="Track length in seconds")
    release_year: int = Field(..., description="Release year")
    primary_genre: str = Field(..., description="Primary genre label")
    secondary_genres: list[str] = Field(default_factory=list, description="Secondary genre labels, sorted")
    play_count: int = Field(..., ge=0, description="Global play count")
    popularity: float = Field(..., ge=0, le=100, description="Popularity score (0-100)")

    @classmethod
    def from_dto(cls, song: Song) -> SongResponse:
        """Convert a Song entity to Pydantic response model."""
        return cls(
            id=song.id,
            title=song.title,
            artists=sorted(song.artists),
            duration_seconds=song.duration.total_seconds(),
            release_year=song.release_year,
            primary_genre=song.primary_genre.value,
            secondary_genres=sorted(genre.value for genre in song.secondary_genres),
            play_count=song.play_count,
            popularity=song.popularity,
        )


class SongSummaryResponse(BaseModel):
    """Pydantic model for SongSummary DTO."""

    title: str
    artists: str
    popularity: float
    play_count: int

    @classmethod
    def from_dto(cls, dto: SongSummary) -> SongSummaryResponse:
        return cls(title=dto.title, artists=dto.artists, popularity=dto.popularity, play_count=dto.play_count)


# ──────────────────────────────────────────────────────────────────────
# Album and Collaboration Models
# ──────────────────────────────────────────────────────────────────────


class AlbumSummaryResponse(BaseModel):
    """Pydantic model for AlbumSummary DTO."""

    title: str = Field(..., description="Album title")
    artist: str = Field(..., description="Album artist")
    release_year: int = Field(..., description="Release year")
    song_count: int = Field(..., ge=0, description="Number of songs on the album")
    total_play_count: int = Field(..., ge=0, description="Sum of song play counts")
    song_titles: str = Field(..., description="Comma-separated song titles in album order")
    most_popular_song: str = Field(..., description="Title of the most popular song, or 'N/A'")

    @classmethod
    def from_dto(cls, dto: AlbumSummary) -> AlbumSummaryResponse:
        """Convert AlbumSummary DTO to Pydantic response model."""
        return cls(
            title=dto.title,
            artist=dto.artist,
            release_year=dto.release_year,
            song_count=dto.song_count,
            total_play_count=dto.total_play_count,
            song_titles=dto.song_titles,
            most_popular_song=dto.most_popular_song,
        )


class ArtistCollaborationResponse(BaseModel):
    """One co-artist pair and the songs they share."""

    artists: tuple[str, str] = Field(..., description="Canonical pair, smaller name first")
    songs: list[str] = Field(default_factory=list, description="Titles of shared songs")

    @classmethod
    def from_dto(cls, pair: ArtistPair, songs: list[Song]) -> ArtistCollaborationResponse:
        return cls(artists=(pair.first, pair.second), songs=[song.title for song in songs])


# ──────────────────────────────────────────────────────────────────────
# User Models
# ──────────────────────────────────────────────────────────────────────


class UserStatisticsResponse(BaseModel):
    """Pydantic model for UserStatistics DTO."""

    username: str
    is_premium: bool
    total_play_count: int = Field(..., ge=0)
    playlist_count: int = Field(..., ge=0)
    top_songs: list[SongResponse] = Field(default_factory=list, description="Up to five most played songs")
    most_played_genres: list[str] = Field(default_factory=list, description="Genres of the top songs, sorted")

    @classmethod
    def from_dto(cls, dto: UserStatistics) -> UserStatisticsResponse:
        """Convert UserStatistics DTO to Pydantic response model."""
        return cls(
            username=dto.username,
            is_premium=dto.is_premium,
            total_play_count=dto.total_play_count,
            playlist_count=dto.playlist_count,
            top_songs=[SongResponse.from_dto(song) for song in dto.top_songs],
            most_played_genres=sorted(genre.value for genre in dto.most_played_genres),
        )


class PlayStatisticsResponse(BaseModel):
    """Pydantic model for PlayStatistics DTO."""

    count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    average: float
    minimum: int | None = Field(None, description="None when the group is empty")
    maximum: int | None = Field(None, description="None when the group is empty")

    @classmethod
    def from_dto(cls, dto: PlayStatistics) -> PlayStatisticsResponse:
        return cls(
            count=dto.count,
            total=dto.total,
            average=dto.average,
            minimum=dto.minimum,
            maximum=dto.maximum,
        )


class PremiumPlayStatisticsResponse(BaseModel):
    """Premium vs free play statistics."""

    premium: PlayStatisticsResponse
    free: PlayStatisticsResponse

    @classmethod
    def from_dto(cls, dto: dict[bool, PlayStatistics]) -> PremiumPlayStatisticsResponse:
        """Convert the {True: ..., False: ...} partition to a named response."""
        return cls(
            premium=PlayStatisticsResponse.from_dto(dto[True]),
            free=PlayStatisticsResponse.from_dto(dto[False]),
        )
